from dataclasses import dataclass, field
from enum import Enum


class ResultCode(int, Enum):
    SUCCESS = 0
    FAILED = 1


@dataclass
class RunResult:
    executed: int = 0
    succeeded: int = 0
    failed_tokens: list[str] = field(default_factory=list)

    @property
    def any_failure(self) -> bool:
        return bool(self.failed_tokens)

    @property
    def exit_code(self) -> ResultCode:
        return ResultCode.FAILED if self.any_failure else ResultCode.SUCCESS

    def record_failure(self, token: str) -> None:
        self.failed_tokens.append(token)
