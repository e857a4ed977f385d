"""Console reporting helpers built on rich."""

from __future__ import annotations

from typing import Callable, TextIO

from rich.console import Console
from rich.markup import escape

Reporter = Callable[[str], None]


def make_reporter(stream: TextIO, style: str | None = None) -> Reporter:
    # Help lines are column aligned; never let the console re-wrap them.
    console = Console(file=stream, highlight=False, emoji=False, soft_wrap=True)

    def reporter(message: str) -> None:
        console.print(escape(message), style=style)

    return reporter


def report_lines(reporter: Reporter, lines: list[str]) -> None:
    for line in lines:
        reporter(line)
