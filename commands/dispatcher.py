"""Sequential dispatcher for administration commands."""

from __future__ import annotations

import logging
from typing import BinaryIO, Sequence

from client.models import RunResult
from client.remote import RemoteExecutor
from commands.presenter import OutputPresenter
from commands.registry import CommandRegistry, unknown_command_text
from commands.runtime import CommandResult, CommandRuntime
from common.reporting import Reporter
from protocol.envelope import ServerLocation

logger = logging.getLogger(__name__)


class AdminDispatcher:
    """Resolve, execute and present each requested command in order.

    Failures never stop the run: an unknown name or a failed remote call is
    reported and recorded, and the remaining commands still execute.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        executor: RemoteExecutor,
        report_error: Reporter,
        out: BinaryIO,
    ) -> None:
        self._registry = registry
        self._runtime = CommandRuntime(executor)
        self._presenter = OutputPresenter(out)
        self._report_error = report_error

    def resolve(self, token: str) -> CommandResult:
        spec = self._registry.lookup(token)
        if spec is None:
            return CommandResult(token=token, error=unknown_command_text(token))
        return CommandResult(token=token, spec=spec)

    def run_one(self, location: ServerLocation, token: str) -> CommandResult:
        resolved = self.resolve(token)
        if resolved.spec is None:
            self._report_error(resolved.error or unknown_command_text(token))
            return resolved

        result = self._runtime.run(location, token, resolved.spec)
        if result.ok:
            self._presenter.present(result)
        return result

    def run(self, location: ServerLocation, tokens: Sequence[str]) -> RunResult:
        summary = RunResult()
        for token in tokens:
            result = self.run_one(location, token)
            if result.spec is not None:
                summary.executed += 1
            if result.ok:
                summary.succeeded += 1
            else:
                summary.record_failure(token)
        logger.debug(
            "ran %d command(s): %d ok, %d failed",
            len(tokens),
            summary.succeeded,
            len(summary.failed_tokens),
        )
        return summary

    def execute(self, location: ServerLocation, tokens: Sequence[str]) -> int:
        return int(self.run(location, tokens).exit_code)
