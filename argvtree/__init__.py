"""
Argvtree CLI Grammar

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Flag, Option, Positional
from .command import CommandNode
from .exceptions import (
    ArgumentParseError,
    ArgumentValidationError,
    ArgvError,
    DefinitionError,
    DisallowedValueError,
    DuplicateNameError,
    InvalidAbbreviationError,
    InvalidNameError,
    MissingOptionValueError,
    MissingPositionalsError,
    RequiredFlagMissingError,
    RequiredOptionMissingError,
    UnknownArgumentError,
)
from .logger import logger
from .result import ParseResult


__all__ = [
    "CommandNode",
    "Flag",
    "Option",
    "Positional",
    "ParseResult",
    "ArgvError",
    "DefinitionError",
    "DuplicateNameError",
    "InvalidNameError",
    "InvalidAbbreviationError",
    "ArgumentParseError",
    "MissingOptionValueError",
    "DisallowedValueError",
    "UnknownArgumentError",
    "ArgumentValidationError",
    "RequiredFlagMissingError",
    "RequiredOptionMissingError",
    "MissingPositionalsError",
]
