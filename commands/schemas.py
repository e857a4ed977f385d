"""Schema for the administration command catalog."""

from __future__ import annotations

from dataclasses import dataclass

from protocol.meta_ops import MetaOp


@dataclass(frozen=True)
class CommandSpec:
    key: str
    display_name: str
    opcode: MetaOp
    description: str

    def describe(self, width: int = 0) -> str:
        return f"{self.key.rjust(width)} -- {self.description}"


def normalize_name(name: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in name)
