import importlib
import sys

import pytest
from pydantic import ValidationError

from argvtree.config import from_dict, import_callback, loader
from argvtree.exceptions import DuplicateNameError

CALLBACKS_MODULE = """
CALLS = []


def record(result):
    CALLS.append(result)
"""

GRAMMAR = {
    "name": "myapp",
    "description": "Example application",
    "flags": [{"name": "verbose", "abbr": "v", "help": "Verbose output"}],
    "options": [
        {"name": "output", "abbr": "o", "default": "result.txt"},
        {"name": "level", "allowed": ["debug", "info"], "default": "info"},
    ],
    "positionals": ["input"],
    "commands": [
        {
            "name": "commit",
            "callback": "grammar_callbacks.record",
            "options": [{"name": "message", "abbr": "m", "required": True}],
            "flags": [{"name": "all", "abbr": "a"}],
        }
    ],
}

YAML_GRAMMAR = """
name: myapp
description: Example application
flags:
  - name: verbose
    abbr: v
    help: Verbose output
options:
  - name: output
    abbr: o
    default: result.txt
  - name: level
    allowed: [debug, info]
    default: info
positionals:
  - input
commands:
  - name: commit
    callback: grammar_callbacks.record
    options:
      - name: message
        abbr: m
        required: true
    flags:
      - name: all
        abbr: a
"""

TOML_GRAMMAR = """
name = "myapp"
description = "Example application"
positionals = ["input"]

[[flags]]
name = "verbose"
abbr = "v"
help = "Verbose output"

[[options]]
name = "output"
abbr = "o"
default = "result.txt"

[[options]]
name = "level"
allowed = ["debug", "info"]
default = "info"

[[commands]]
name = "commit"
callback = "grammar_callbacks.record"

[[commands.options]]
name = "message"
abbr = "m"
required = true

[[commands.flags]]
name = "all"
abbr = "a"
"""


@pytest.fixture(autouse=True)
def callbacks(tmp_path, monkeypatch):
    (tmp_path / "grammar_callbacks.py").write_text(CALLBACKS_MODULE, encoding="UTF-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, "grammar_callbacks", raising=False)
    return importlib.import_module("grammar_callbacks")


def test_from_dict_builds_tree(callbacks):
    root = from_dict(GRAMMAR)
    assert root.name == "myapp"
    assert root.description == "Example application"
    assert root.flags["verbose"].abbr == "v"
    assert root.options["level"].allowed == ("debug", "info")
    assert [p.name for p in root.positionals] == ["input"]
    commit = root.commands["commit"]
    assert commit.parent is root
    assert commit.options["message"].required is True
    assert commit.callback is callbacks.record


def test_loaded_grammar_parses_and_dispatches(callbacks):
    root = from_dict(GRAMMAR)
    result = root.run(["-v", "in.txt", "commit", "-m", "hello", "-a"])
    assert callbacks.CALLS == [result]
    assert result.flag("verbose") is True
    assert result.option("output") == "result.txt"
    assert result.option("message") == "hello"
    assert result.flag("all") is True


@pytest.mark.parametrize("suffix,content", [(".yaml", YAML_GRAMMAR), (".toml", TOML_GRAMMAR)])
def test_loader_formats_agree_with_dict(tmp_path, suffix, content):
    path = tmp_path / f"grammar{suffix}"
    path.write_text(content, encoding="UTF-8")
    args = ["in.txt", "--level=debug", "commit", "--message", "hi"]
    assert loader(path).parse_args(args) == from_dict(GRAMMAR).parse_args(args)


def test_loader_accepts_string_path(tmp_path):
    path = tmp_path / "grammar.yml"
    path.write_text(YAML_GRAMMAR, encoding="UTF-8")
    assert loader(str(path)).name == "myapp"


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_suffix(tmp_path):
    path = tmp_path / "grammar.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(path)


def test_loader_rejects_non_mapping(tmp_path):
    path = tmp_path / "grammar.yaml"
    path.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(path)


def test_loader_rejects_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_invalid_entry_shape():
    with pytest.raises(ValidationError):
        from_dict({"name": "app", "flags": [{"abbr": "v"}]})


def test_grammar_errors_surface_from_builder():
    with pytest.raises(DuplicateNameError):
        from_dict({"name": "app", "flags": [{"name": "a"}, {"name": "a"}]})


def test_non_string_option_values_are_stringified():
    root = from_dict(
        {"name": "app", "options": [{"name": "port", "default": 8080, "allowed": [8080, 9090]}]}
    )
    assert root.options["port"].default == "8080"
    assert root.options["port"].allowed == ("8080", "9090")


def test_import_callback_errors():
    with pytest.raises(ImportError):
        import_callback("nodots")
    with pytest.raises(ImportError):
        import_callback("argvtree_missing_module.func")
    with pytest.raises(ImportError):
        import_callback("argvtree.config.does_not_exist")
    with pytest.raises(ImportError):
        import_callback("argvtree.logger.logger")
