import pytest

from argvtree import CommandNode
from argvtree.exceptions import (
    ArgumentValidationError,
    DisallowedValueError,
    RequiredFlagMissingError,
    RequiredOptionMissingError,
)


def test_required_flag_missing():
    node = CommandNode("test").add_flag("accept", required=True)
    with pytest.raises(RequiredFlagMissingError) as excinfo:
        node.run([])
    assert "required" in str(excinfo.value)
    assert "accept" in str(excinfo.value)


def test_required_flag_not_satisfied_by_other_tokens():
    node = (
        CommandNode("test")
        .add_option("level", allowed=["debug", "info", "error"])
        .add_flag("confirm", required=True)
    )
    with pytest.raises(RequiredFlagMissingError):
        node.run(["--level", "debug"])


def test_required_flag_with_default_still_required():
    node = CommandNode("test").add_flag("accept", required=True, default=True)
    with pytest.raises(RequiredFlagMissingError):
        node.run([])


def test_required_flag_provided():
    result = CommandNode("test").add_flag("accept", required=True).run(["--accept"])
    assert result.flag("accept") is True


def test_required_option_missing():
    node = CommandNode("test").add_option("message", required=True)
    with pytest.raises(RequiredOptionMissingError) as excinfo:
        node.run([])
    assert "message" in str(excinfo.value)
    assert isinstance(excinfo.value, ArgumentValidationError)


def test_required_option_satisfied_by_default():
    result = CommandNode("test").add_option("env", required=True, default="dev").run([])
    assert result.option("env") == "dev"


def test_required_option_provided():
    result = CommandNode("test").add_option("name", required=True).run(["--name", "John"])
    assert result.option("name") == "John"


def test_default_outside_allowed_set_rejected():
    node = CommandNode("test").add_option("level", default="trace", allowed=["debug", "info"])
    with pytest.raises(DisallowedValueError) as excinfo:
        node.run([])
    assert "trace" in str(excinfo.value)


def test_mix_of_required_and_optional():
    node = (
        CommandNode("test")
        .add_flag("required-flag", required=True)
        .add_flag("optional-flag")
        .add_option("required-opt", required=True)
        .add_option("optional-opt", default="default")
        .add_positional("file")
    )
    result = node.run(["--required-flag", "--required-opt", "value", "input.txt"])
    assert result.flag("required-flag") is True
    assert result.flag("optional-flag") is False
    assert result.option("required-opt") == "value"
    assert result.option("optional-opt") == "default"
    assert result.positional("file") == "input.txt"


def test_first_unmet_constraint_raises():
    node = (
        CommandNode("test")
        .add_flag("confirm", required=True)
        .add_option("message", required=True)
    )
    with pytest.raises(RequiredFlagMissingError):
        node.run([])
