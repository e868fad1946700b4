# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `TokenParser`, the cursor-driven state machine that
classifies a raw token list against a `CommandNode` tree.

Each token is tried, in strict priority order, as:
1. a child command name of the current node (descend),
2. a flag of the current node (`--name` / `-x`, exact match),
3. an option of the current node (`--name value`, `--name=value`, `-x value`),
4. the next unfilled positional slot of the current node.

A token that fits none of these raises `UnknownArgumentError` with a
"did you mean" suggestion. There is no backtracking: once a token has been
claimed it is never reconsidered, so values that look like flags
(`--prefix --not-a-flag`) are kept as values.

The parser produces a raw `ParseResult` plus one `NodeRecord` per visited
node, holding what that node's own tokens set. Required fields, remaining
defaults and missing positionals are handled afterwards by `Validator`, which
checks each node against its record rather than the shared result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from argvtree.argument import Flag, Option
from argvtree.exceptions import (
    DisallowedValueError,
    MissingOptionValueError,
    UnknownArgumentError,
)
from argvtree.logger import logger
from argvtree.result import ParseResult
from argvtree.suggestions import closest_match, suggestion_candidates

if TYPE_CHECKING:
    from argvtree.command import CommandNode


@dataclass
class NodeRecord:
    """
    What the tokens matched against one node set.

    Attributes:
        node (CommandNode): The visited node.
        flags (set[str]): Flag names given explicitly while at this node.
        options (set[str]): Option names given explicitly while at this node.
        filled_positionals (int): Number of positional slots filled, in order.
    """

    node: CommandNode
    flags: set[str] = field(default_factory=set)
    options: set[str] = field(default_factory=set)
    filled_positionals: int = 0

    def unfilled_positionals(self) -> list[str]:
        unfilled = self.node.positionals[self.filled_positionals :]
        return [positional.name for positional in unfilled]


class TokenParser:
    """
    Single-use parser for one token list.

    Attributes:
        entry (CommandNode): Node the parse was started on.
        node (CommandNode): Node currently being matched against.
        records (list[NodeRecord]): One record for the entry node followed by one
            for every node descended into.
        result (ParseResult): Accumulated raw result.
    """

    def __init__(self, entry: CommandNode) -> None:
        self.entry: CommandNode = entry
        self.node: CommandNode = entry
        self.records: list[NodeRecord] = [NodeRecord(entry)]
        self.result: ParseResult = ParseResult()

    @property
    def record(self) -> NodeRecord:
        return self.records[-1]

    def explicit_flags(self) -> set[str]:
        return set().union(*(record.flags for record in self.records))

    def parse(self, tokens: Sequence[str] | None) -> ParseResult:
        args = list(tokens or [])
        i = 0
        while i < len(args):
            i += self._handle_token(args, i)
        return self.result

    def _handle_token(self, args: list[str], i: int) -> int:
        """Classify `args[i]` and return the number of tokens it consumed."""
        token = args[i]

        child = self.node.commands.get(token)
        if child is not None:
            self._descend(child)
            return 1

        flag = self._match_flag(token)
        if flag is not None:
            self.record.flags.add(flag.name)
            self.result.flags[flag.name] = True
        self._fill_flag_defaults()
        if flag is not None:
            return 1

        consumed = self._consume_option(args, i)
        if consumed:
            return consumed

        positionals = self.node.positionals
        filled = self.record.filled_positionals
        if filled < len(positionals):
            self.result.positionals[positionals[filled].name] = token
            self.record.filled_positionals += 1
            return 1

        suggestion = closest_match(token, suggestion_candidates(self.node))
        raise UnknownArgumentError(token, suggestion)

    def _descend(self, child: CommandNode) -> None:
        logger.debug("Descending into command '%s'", child.full_name)
        self.node = child
        self.records.append(NodeRecord(child))
        self.result.commands.append(child.name)

    def _match_flag(self, token: str) -> Flag | None:
        for flag in self.node.flags.values():
            if flag.matches(token):
                return flag
        return None

    def _fill_flag_defaults(self) -> None:
        # A default never overwrites a flag some node's tokens set.
        explicit = self.explicit_flags()
        for flag in self.node.flags.values():
            if flag.required or flag.name in explicit:
                continue
            self.result.flags[flag.name] = flag.default

    def _match_option(self, name_part: str) -> Option | None:
        for option in self.node.options.values():
            if option.matches(name_part):
                return option
        return None

    def _consume_option(self, args: list[str], i: int) -> int:
        name_part, separator, inline_value = args[i].partition("=")
        option = self._match_option(name_part)
        if option is None:
            return 0

        value: str | None
        if separator:
            value, consumed = inline_value, 1
        elif i + 1 < len(args):
            value, consumed = args[i + 1], 2
        else:
            value, consumed = None, 1

        if value is None:
            if option.default is None:
                raise MissingOptionValueError(
                    f"Option '{option.name}' requires a value"
                )
            value = option.default

        if not option.is_allowed(value):
            raise DisallowedValueError(
                f"Value '{value}' is not allowed for option '{option.name}'. "
                f"Allowed values: {', '.join(option.allowed)}"
            )

        self.record.options.add(option.name)
        self.result.options[option.name] = value
        return consumed
