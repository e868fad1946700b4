# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `ParseResult`, the accumulator filled by one parse/run call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParseResult:
    """
    Mutable record of everything recognised in one token list.

    Attributes:
        flags (dict[str, bool]): Flag name to value.
        options (dict[str, str]): Option name to value.
        commands (list[str]): Command names descended into, in order.
        positionals (dict[str, str]): Positional slot name to value.
    """

    flags: dict[str, bool] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)
    commands: list[str] = field(default_factory=list)
    positionals: dict[str, str] = field(default_factory=dict)

    def flag(self, name: str) -> bool:
        """Return the flag value; an unknown or absent flag is False."""
        return self.flags.get(name, False)

    def option(self, name: str) -> str | None:
        return self.options.get(name)

    def positional(self, name: str) -> str | None:
        return self.positionals.get(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "flags": dict(self.flags),
            "options": dict(self.options),
            "commands": list(self.commands),
            "positionals": dict(self.positionals),
        }
