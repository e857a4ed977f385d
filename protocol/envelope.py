"""Records exchanged with the remote-execution backend."""

from __future__ import annotations

from dataclasses import dataclass

from protocol.meta_ops import MetaOp


@dataclass(frozen=True)
class ServerLocation:
    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class MetaMonOp:
    opcode: MetaOp
    name: str


@dataclass(frozen=True)
class ExecutionOutcome:
    status: int
    status_msg: str = ""
    content_length: int = 0
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return self.status >= 0


def outcome_ok(content: bytes = b"") -> ExecutionOutcome:
    return ExecutionOutcome(status=0, content_length=len(content), content=content)


def outcome_error(status: int, status_msg: str) -> ExecutionOutcome:
    if status >= 0:
        raise ValueError(f"error status must be negative, got {status}")
    return ExecutionOutcome(status=status, status_msg=status_msg)
