# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Post-parse validation for argvtree.

`Validator` runs once after `TokenParser` has consumed every token. Each
visited node is checked against its own `NodeRecord`, so a name given or
defaulted on one node never satisfies a requirement of another. For each
node it:
- raises `RequiredFlagMissingError` or fills flag defaults,
- raises `RequiredOptionMissingError` or fills option defaults,
- checks allowed-value membership of defaults,
- raises `MissingPositionalsError` when fewer slots were filled than declared.

Nodes are checked deepest first, so where a parent and a subcommand share a
name the subcommand's default is the one kept. Defaults never overwrite a
value given explicitly by a token on any node.

The result is mutated in place and the first unmet constraint raises.
"""
from __future__ import annotations

from typing import Iterable

from argvtree.exceptions import (
    DisallowedValueError,
    MissingPositionalsError,
    RequiredFlagMissingError,
    RequiredOptionMissingError,
)
from argvtree.parser import NodeRecord
from argvtree.result import ParseResult


class Validator:
    """Checks and completes a raw `ParseResult` against per-node records."""

    def __init__(self, records: Iterable[NodeRecord]) -> None:
        self.records: list[NodeRecord] = list(records)

    def validate(self, result: ParseResult) -> ParseResult:
        explicit_flags = set().union(*(record.flags for record in self.records))
        explicit_options = set().union(*(record.options for record in self.records))
        defaulted_flags: set[str] = set()
        defaulted_options: set[str] = set()

        for record in reversed(self.records):
            for name in self._validate_flags(record):
                if name in explicit_flags or name in defaulted_flags:
                    continue
                result.flags[name] = record.node.flags[name].default
                defaulted_flags.add(name)

            for name in self._validate_options(record):
                if name in explicit_options or name in defaulted_options:
                    continue
                result.options[name] = record.node.options[name].default
                defaulted_options.add(name)

            self._validate_positionals(record)
        return result

    def _validate_flags(self, record: NodeRecord) -> list[str]:
        """Return the names of this node's flags that fall back to their default."""
        node = record.node
        defaults = []
        for flag in node.flags.values():
            if flag.name in record.flags:
                continue
            if flag.required:
                raise RequiredFlagMissingError(
                    f"Flag '--{flag.name}' is required for '{node.full_name}'"
                )
            defaults.append(flag.name)
        return defaults

    def _validate_options(self, record: NodeRecord) -> list[str]:
        """Return the names of this node's options that fall back to their default."""
        node = record.node
        defaults = []
        for option in node.options.values():
            if option.name in record.options:
                continue
            if option.default is None:
                if option.required:
                    raise RequiredOptionMissingError(
                        f"Option '--{option.name}' is required "
                        f"for '{node.full_name}'"
                    )
                continue
            if not option.is_allowed(option.default):
                raise DisallowedValueError(
                    f"Value '{option.default}' is not allowed for option "
                    f"'{option.name}'. Allowed values: {', '.join(option.allowed)}"
                )
            defaults.append(option.name)
        return defaults

    def _validate_positionals(self, record: NodeRecord) -> None:
        missing = record.unfilled_positionals()
        if missing:
            raise MissingPositionalsError(missing)
