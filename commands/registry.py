"""Immutable registry of administration commands."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from commands.catalog import ADMIN_COMMANDS
from commands.schemas import CommandSpec, normalize_name
from protocol.meta_ops import MetaOp


def unknown_command_text(name: str) -> str:
    return f"no such command: {name}"


class CommandRegistry:
    """Lookup table from normalized command name to :class:`CommandSpec`.

    Built once from an ordered sequence of ``(opcode, description)`` records and
    read-only afterwards. The key of each entry is the lowercased opcode name,
    the display name is the opcode name itself.
    """

    def __init__(self, entries: Iterable[tuple[MetaOp, str]]) -> None:
        specs: dict[str, CommandSpec] = {}
        seen_ops: set[MetaOp] = set()
        for opcode, description in entries:
            key = normalize_name(opcode.name)
            if key in specs:
                raise ValueError(f"duplicate command: {key}")
            if opcode in seen_ops:
                raise ValueError(f"duplicate opcode: {opcode.name}")
            seen_ops.add(opcode)
            specs[key] = CommandSpec(
                key=key,
                display_name=opcode.name,
                opcode=opcode,
                description=description,
            )
        self._specs = MappingProxyType(dict(sorted(specs.items())))
        self._max_key_length = max((len(key) for key in self._specs), default=0)

    @classmethod
    def default(cls) -> CommandRegistry:
        return cls(ADMIN_COMMANDS)

    @property
    def max_key_length(self) -> int:
        return self._max_key_length

    def lookup(self, name: str) -> CommandSpec | None:
        return self._specs.get(normalize_name(name))

    def list_all(self) -> list[CommandSpec]:
        return list(self._specs.values())

    def render_listing(self) -> list[str]:
        return [spec.describe(self._max_key_length) for spec in self._specs.values()]

    def describe_one(self, name: str) -> str:
        spec = self.lookup(name)
        if spec is None:
            return unknown_command_text(name)
        return spec.describe()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)
