# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argvtree.

Every failure is an `ArgvError` carrying a human-readable message. The
subclasses group failures by the phase that raises them, so callers can catch
a whole phase (e.g. `ArgumentParseError`) or a single cause.

Exception Hierarchy:
- ArgvError
    ├── DefinitionError
    │   ├── DuplicateNameError
    │   ├── InvalidNameError
    │   └── InvalidAbbreviationError
    ├── ArgumentParseError
    │   ├── MissingOptionValueError
    │   ├── DisallowedValueError
    │   └── UnknownArgumentError
    └── ArgumentValidationError
        ├── RequiredFlagMissingError
        ├── RequiredOptionMissingError
        └── MissingPositionalsError

Definition errors are raised by the builder calls on `CommandNode`; parse
errors as soon as the offending token is reached; validation errors after the
full token list has been consumed.
"""
from __future__ import annotations


class ArgvError(Exception):
    """Base exception for argvtree."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DefinitionError(ArgvError):
    """Raised while building the argument tree."""


class DuplicateNameError(DefinitionError):
    """Exception raised when a flag, option or command name is already registered."""


class InvalidNameError(DefinitionError):
    """Exception raised when an argument name is empty or has illegal characters."""


class InvalidAbbreviationError(DefinitionError):
    """Exception raised when an abbreviation is malformed or already taken."""


class ArgumentParseError(ArgvError):
    """Raised while consuming the token list."""


class MissingOptionValueError(ArgumentParseError):
    """Exception raised when an option has neither a value nor a default."""


class DisallowedValueError(ArgumentParseError):
    """Exception raised when an option value is outside its allowed set."""


class UnknownArgumentError(ArgumentParseError):
    """Exception raised when a token matches no command, flag, option or slot."""

    def __init__(self, token: str, suggestion: str | None = None) -> None:
        self.token = token
        self.suggestion = suggestion
        if suggestion:
            message = f"Unknown argument {token}. Did you mean {suggestion}?"
        else:
            message = f"Unknown argument {token}."
        super().__init__(message)


class ArgumentValidationError(ArgvError):
    """Raised by the post-parse validation pass."""


class RequiredFlagMissingError(ArgumentValidationError):
    """Exception raised when a required flag was not given."""


class RequiredOptionMissingError(ArgumentValidationError):
    """Exception raised when a required option was not given and has no default."""


class MissingPositionalsError(ArgumentValidationError):
    """Exception raised when declared positional slots were left unfilled."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        plural = "s" if len(self.missing) > 1 else ""
        super().__init__(
            f"Missing required positional argument{plural}: {', '.join(self.missing)}"
        )
