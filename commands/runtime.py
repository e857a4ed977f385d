"""Execution stage: one blocking remote call per resolved command."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from client.remote import RemoteExecutor
from commands.schemas import CommandSpec
from protocol.envelope import ExecutionOutcome, MetaMonOp, ServerLocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    token: str
    spec: CommandSpec | None = None
    outcome: ExecutionOutcome | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.outcome is not None and self.outcome.ok


class CommandRuntime:
    def __init__(self, executor: RemoteExecutor) -> None:
        self._executor = executor

    def run(self, location: ServerLocation, token: str, spec: CommandSpec) -> CommandResult:
        op = MetaMonOp(opcode=spec.opcode, name=spec.display_name)
        logger.debug("executing %s on %s", spec.display_name, location)
        try:
            outcome = self._executor.execute(location, op)
        except Exception as exc:  # noqa: BLE001
            message = f"{spec.display_name}: {type(exc).__name__}: {exc}"
            logger.error("%s", message)
            return CommandResult(token=token, spec=spec, error=message)

        if not outcome.ok:
            message = f"{outcome.status_msg} error: {self._decode(outcome.status)}"
            logger.error("%s", message)
            return CommandResult(token=token, spec=spec, outcome=outcome, error=message)
        return CommandResult(token=token, spec=spec, outcome=outcome)

    def _decode(self, status: int) -> str:
        try:
            return self._executor.decode_error(status)
        except Exception as exc:  # noqa: BLE001
            return f"status {status} ({type(exc).__name__}: {exc})"
