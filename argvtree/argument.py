# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the immutable argument definitions attached to a `CommandNode`.

Each definition describes one CLI input:
- `Flag`: a presence-only switch, `--name` or `-x`.
- `Option`: a value-bearing argument, `--name value`, `--name=value` or `-x value`.
- `Positional`: an unnamed slot filled by declaration order.

Definitions validate their own name and abbreviation shape on construction.
Uniqueness across a node is enforced by `CommandNode`, not here.

Used By:
- `CommandNode` builder calls
- `TokenParser` and `Validator`
- Help rendering and the grammar loader
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from argvtree.exceptions import InvalidAbbreviationError, InvalidNameError

NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def validate_name(name: str) -> str:
    """Return `name` unchanged if it is a legal argument or command name."""
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Argument name must be a non-empty string")
    if not NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(
            f"Invalid name '{name}': only letters, digits, '_' and '-' are allowed"
        )
    return name


def validate_abbr(abbr: str | None) -> str | None:
    """Return `abbr` unchanged if it is absent or exactly one character."""
    if abbr is None:
        return None
    if not isinstance(abbr, str) or len(abbr) != 1:
        raise InvalidAbbreviationError(
            f"Invalid abbreviation {abbr!r}: must be exactly one character"
        )
    return abbr


@dataclass(frozen=True)
class Flag:
    """
    Represents a boolean presence switch.

    Attributes:
        name (str): Long name, matched as `--name`.
        abbr (str | None): One-character short form, matched as `-x`.
        help (str): Help text for the flag.
        required (bool): True if the flag must be given explicitly.
        default (bool): Value used when the flag is absent.
    """

    name: str
    abbr: str | None = None
    help: str = ""
    required: bool = False
    default: bool = False

    def __post_init__(self) -> None:
        validate_name(self.name)
        validate_abbr(self.abbr)

    @property
    def tokens(self) -> tuple[str, ...]:
        """Exact tokens that select this flag."""
        if self.abbr:
            return (f"--{self.name}", f"-{self.abbr}")
        return (f"--{self.name}",)

    def matches(self, token: str) -> bool:
        return token in self.tokens


@dataclass(frozen=True)
class Option:
    """
    Represents a value-bearing argument.

    Attributes:
        name (str): Long name, matched as `--name`.
        abbr (str | None): One-character short form, matched as `-x`.
        help (str): Help text for the option.
        required (bool): True if a value must be supplied (explicitly or by default).
        default (str | None): Value used when the option is absent or has no value.
        allowed (tuple[str, ...]): Permitted values in declaration order; empty
            means unconstrained.
    """

    name: str
    abbr: str | None = None
    help: str = ""
    required: bool = False
    default: str | None = None
    allowed: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_name(self.name)
        validate_abbr(self.abbr)
        if isinstance(self.allowed, str):
            raise TypeError(
                f"Allowed values for option '{self.name}' must be a sequence "
                f"of strings, not the string {self.allowed!r}"
            )
        if not isinstance(self.allowed, tuple):
            object.__setattr__(self, "allowed", tuple(self.allowed or ()))

    @property
    def tokens(self) -> tuple[str, ...]:
        """Exact name portions that select this option."""
        if self.abbr:
            return (f"--{self.name}", f"-{self.abbr}")
        return (f"--{self.name}",)

    def matches(self, name_part: str) -> bool:
        return name_part in self.tokens

    def is_allowed(self, value: str) -> bool:
        return not self.allowed or value in self.allowed

    def get_choice_text(self) -> str:
        """Placeholder shown after the option in usage lines."""
        if self.allowed:
            return f"{{{','.join(self.allowed)}}}"
        return self.name.upper().replace("-", "_")


@dataclass(frozen=True)
class Positional:
    """
    Represents a positional slot, filled strictly by declaration order.

    Attributes:
        name (str): Key under which the value is stored in the result.
        help (str): Help text for the slot.
    """

    name: str
    help: str = ""

    def __post_init__(self) -> None:
        validate_name(self.name)

    def get_positional_text(self) -> str:
        return f"<{self.name}>"
