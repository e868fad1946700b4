# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandNode`, one level of a declarative command tree.

A node owns its flags, options, ordered positional slots and child commands,
plus an optional callback. Builder calls return a handle for chaining:
`add_flag`, `add_option`, `add_positional` and `attach_callback` return the
node itself, while `add_command` returns the newly created child so a
subcommand can be configured in one expression.

Example Usage:
    git = CommandNode("git", description="Version control")
    (
        git.add_command("commit", description="Record changes")
        .add_option("message", abbr="m", required=True)
        .add_flag("all", abbr="a")
        .attach_callback(do_commit)
    )
    result = git.run(["commit", "-m", "Initial commit", "--all"])

Children hold only a weak reference to their parent; the parent owns its
children through `commands`. Keep a reference to the root for as long as
path queries on descendants are needed.

A tree is expected to be fully built before it is parsed. Building and parsing
the same tree from different threads at once is not supported; independent
trees need no coordination.
"""
from __future__ import annotations

import weakref
from typing import Any, Callable, Iterable, Sequence

from argvtree.argument import Flag, Option, Positional, validate_name
from argvtree.exceptions import DuplicateNameError, InvalidAbbreviationError
from argvtree.help import get_usage, render_help
from argvtree.logger import logger
from argvtree.parser import TokenParser
from argvtree.result import ParseResult
from argvtree.validator import Validator

Callback = Callable[[ParseResult], Any]


class CommandNode:
    """
    A command (or the root program) in an argument tree.

    Attributes:
        name (str): Command name, matched exactly against tokens.
        description (str): Display text for help output.
        flags (dict[str, Flag]): Flags by name, in declaration order.
        options (dict[str, Option]): Options by name, in declaration order.
        positionals (list[Positional]): Positional slots in declaration order.
        commands (dict[str, CommandNode]): Child commands by name.
        callback (Callable[[ParseResult], Any] | None): Invoked by `run`.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        parent: CommandNode | None = None,
    ) -> None:
        self.name: str = validate_name(name)
        self.description: str = description
        self.flags: dict[str, Flag] = {}
        self.options: dict[str, Option] = {}
        self.positionals: list[Positional] = []
        self.commands: dict[str, CommandNode] = {}
        self.callback: Callback | None = None
        self._parent: weakref.ReferenceType[CommandNode] | None = (
            weakref.ref(parent) if parent is not None else None
        )

    @property
    def parent(self) -> CommandNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def root(self) -> CommandNode:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def lineage(self) -> list[CommandNode]:
        """Return the nodes from the root down to this node."""
        nodes: list[CommandNode] = []
        node: CommandNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return list(reversed(nodes))

    @property
    def path(self) -> list[str]:
        return [node.name for node in self.lineage()]

    @property
    def full_name(self) -> str:
        return " ".join(self.path)

    def _check_abbr_available(self, abbr: str | None) -> None:
        if abbr is None:
            return
        taken = [flag.abbr for flag in self.flags.values()]
        taken.extend(option.abbr for option in self.options.values())
        if abbr in taken:
            raise InvalidAbbreviationError(
                f"Abbreviation '-{abbr}' is already registered on '{self.full_name}'"
            )

    def add_flag(
        self,
        name: str,
        abbr: str | None = None,
        help: str = "",
        required: bool = False,
        default: bool = False,
    ) -> CommandNode:
        """
        Register a boolean flag on this node.

        Raises:
            DuplicateNameError: If a flag with this name already exists.
            InvalidNameError: If the name is empty or has illegal characters.
            InvalidAbbreviationError: If the abbreviation is malformed or taken.
        """
        if name in self.flags:
            raise DuplicateNameError(f"Flag '{name}' is already registered")
        flag = Flag(name=name, abbr=abbr, help=help, required=required, default=default)
        self._check_abbr_available(flag.abbr)
        self.flags[flag.name] = flag
        logger.debug("Registered flag '%s' on '%s'", flag.name, self.full_name)
        return self

    def add_option(
        self,
        name: str,
        abbr: str | None = None,
        help: str = "",
        required: bool = False,
        default: str | None = None,
        allowed: Iterable[str] | None = None,
    ) -> CommandNode:
        """
        Register a value-bearing option on this node.

        Raises:
            DuplicateNameError: If an option with this name already exists.
            InvalidNameError: If the name is empty or has illegal characters.
            InvalidAbbreviationError: If the abbreviation is malformed or taken.
            TypeError: If `allowed` is a bare string.
        """
        if name in self.options:
            raise DuplicateNameError(f"Option '{name}' is already registered")
        option = Option(
            name=name,
            abbr=abbr,
            help=help,
            required=required,
            default=default,
            allowed=() if allowed is None else allowed,
        )
        self._check_abbr_available(option.abbr)
        self.options[option.name] = option
        logger.debug("Registered option '%s' on '%s'", option.name, self.full_name)
        return self

    def add_positional(self, name: str, help: str = "") -> CommandNode:
        """Append a positional slot; duplicate names are not checked."""
        self.positionals.append(Positional(name=name, help=help))
        return self

    def add_command(self, name: str, description: str = "") -> CommandNode:
        """
        Create a child command and return it (not this node).

        Raises:
            DuplicateNameError: If a child with this name already exists.
            InvalidNameError: If the name is empty or has illegal characters.
        """
        if name in self.commands:
            raise DuplicateNameError(f"Command '{name}' is already registered")
        child = CommandNode(name, description=description, parent=self)
        self.commands[name] = child
        logger.debug("Registered command '%s'", child.full_name)
        return child

    def attach_callback(self, callback: Callback) -> CommandNode:
        """Set the callback run for this node; any previous callback is replaced."""
        if not callable(callback):
            raise TypeError(f"{callback!r} is not callable")
        if self.callback is not None:
            logger.debug("Replacing callback on '%s'", self.full_name)
        self.callback = callback
        return self

    def get_command(self, path: Sequence[str]) -> CommandNode | None:
        """Resolve a sequence of child names starting at this node."""
        node: CommandNode | None = self
        for name in path:
            if node is None:
                return None
            node = node.commands.get(name)
        return node

    def parse_args(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Parse and validate `tokens` without running any callback.

        Validation covers this node and every command descended into, each
        against the tokens given while at that node.

        Raises:
            ArgumentParseError: On the first token that cannot be classified.
            ArgumentValidationError: On the first unmet constraint after parsing.
        """
        parser = TokenParser(self)
        result = parser.parse(tokens)
        Validator(parser.records).validate(result)
        logger.debug("Parsed '%s': %s", self.full_name, result.to_dict())
        return result

    def run(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Parse, validate, then invoke callbacks along the recorded command path.

        The callback on this node runs first, followed by the callback of each
        command descended into, all receiving the same `ParseResult`.
        """
        result = self.parse_args(tokens)
        self._invoke(result)
        node: CommandNode | None = self
        for name in result.commands:
            node = node.commands.get(name)
            if node is None:
                break
            node._invoke(result)
        return result

    def _invoke(self, result: ParseResult) -> None:
        if self.callback is None:
            return
        logger.debug("Running callback for '%s'", self.full_name)
        self.callback(result)

    def get_usage(self, plain_text: bool = False) -> str:
        return get_usage(self, plain_text=plain_text)

    def render_help(self) -> None:
        render_help(self)

    def __str__(self) -> str:
        required = sum(flag.required for flag in self.flags.values()) + sum(
            option.required for option in self.options.values()
        )
        return (
            f"CommandNode(name={self.full_name!r}, flags={len(self.flags)}, "
            f"options={len(self.options)}, positional={len(self.positionals)}, "
            f"commands={len(self.commands)}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
