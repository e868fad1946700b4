# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Grammar loader that builds a `CommandNode` tree from YAML, TOML or a dict.

Example (YAML):
    name: git
    description: Version control
    commands:
      - name: commit
        callback: myapp.handlers.commit
        options:
          - name: message
            abbr: m
            required: true
        flags:
          - name: all
            abbr: a

Every entry is validated with pydantic before the tree is built through the
regular builder calls, so duplicate names and bad abbreviations raise the same
errors as hand-written trees.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from argvtree.command import CommandNode
from argvtree.logger import logger


def import_callback(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ImportError(f"Invalid callback path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ImportError(f"Could not import '{dotted_path}': {error}") from error
    try:
        callback = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ImportError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(callback):
        raise ImportError(f"'{dotted_path}' is not callable")
    return callback


class RawFlag(BaseModel):
    """Raw flag entry."""

    name: str
    abbr: str | None = None
    help: str = ""
    required: bool = False
    default: bool = False


class RawOption(BaseModel):
    """Raw option entry."""

    name: str
    abbr: str | None = None
    help: str = ""
    required: bool = False
    default: str | None = None
    allowed: list[str] = Field(default_factory=list)

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    @field_validator("allowed", mode="before")
    @classmethod
    def stringify_allowed(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return value


class RawPositional(BaseModel):
    """Raw positional entry."""

    name: str
    help: str = ""


class RawCommand(BaseModel):
    """Raw command entry; nests recursively through `commands`."""

    name: str
    description: str = ""
    callback: str | None = None
    flags: list[RawFlag] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)
    positionals: list[RawPositional] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("positionals", mode="before")
    @classmethod
    def expand_positional_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    def build(self, node: CommandNode) -> CommandNode:
        """Populate `node` with this entry's definitions and children."""
        for flag in self.flags:
            node.add_flag(**flag.model_dump())
        for option in self.options:
            node.add_option(**option.model_dump())
        for positional in self.positionals:
            node.add_positional(positional.name, help=positional.help)
        if self.callback:
            node.attach_callback(import_callback(self.callback))
        for raw_child in self.commands:
            child = node.add_command(raw_child.name, description=raw_child.description)
            raw_child.build(child)
        return node


class GrammarConfig(RawCommand):
    """Top-level grammar: the root command of the tree."""

    def to_command_node(self) -> CommandNode:
        return self.build(CommandNode(self.name, description=self.description))


def from_dict(raw_config: dict[str, Any]) -> CommandNode:
    """Build a `CommandNode` tree from an in-memory grammar mapping."""
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Grammar must be a mapping with at least a 'name' key.\n"
            "Example:\n"
            "name: 'myapp'\n"
            "flags:\n"
            "  - name: 'verbose'\n"
            "    abbr: 'v'"
        )
    return GrammarConfig(**raw_config).to_command_node()


def loader(file_path: Path | str) -> CommandNode:
    """
    Load a command grammar from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the grammar file (.yaml, .yml or .toml).

    Returns:
        CommandNode: The root of the built tree.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If an entry has the wrong shape.
        DefinitionError: If the grammar itself is inconsistent.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such grammar file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as grammar_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(grammar_file)
        elif suffix == ".toml":
            raw_config = toml.load(grammar_file)
        else:
            raise ValueError(f"Unsupported grammar format: {suffix}")

    logger.debug("Loaded grammar file '%s'", path)
    return from_dict(raw_config)
