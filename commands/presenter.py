"""Presentation stage: write successful command output to stdout."""

from __future__ import annotations

from typing import BinaryIO

from commands.runtime import CommandResult


def render_success(result: CommandResult) -> bytes:
    if result.spec is None or result.outcome is None:
        raise ValueError(f"nothing to present for `{result.token}`")
    outcome = result.outcome
    if outcome.content_length <= 0:
        return f"{result.spec.display_name} OK\n".encode("utf-8")
    return bytes(outcome.content[: outcome.content_length])


class OutputPresenter:
    def __init__(self, out: BinaryIO) -> None:
        self._out = out

    def present(self, result: CommandResult) -> None:
        self._out.write(render_success(result))
        self._out.flush()
