# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage and help rendering for a `CommandNode`.

Everything here reads tree state only (names, abbreviations, help text,
defaults, allowed values and children) and never affects parsing.

Functions:
- get_options_text: Bracketed summary of flags, options and positionals.
- get_usage: Full usage line, prefixed with the command path.
- render_help: Rich-formatted help panel printed to the console.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from argvtree.console import HelpStyles, console as default_console

if TYPE_CHECKING:
    from argvtree.command import CommandNode


def get_options_text(node: CommandNode, plain_text: bool = False) -> str:
    """
    Render the flags, options and positionals of `node` as a usage fragment.

    Returns:
        str: e.g. `[--verbose] [--output OUTPUT] <input>`.
    """
    options_list = []
    for flag in node.flags.values():
        text = f"--{flag.name}"
        options_list.append(text if flag.required else f"[{text}]")

    for option in node.options.values():
        text = f"--{option.name} {option.get_choice_text()}"
        options_list.append(text if option.required else f"[{text}]")

    for positional in node.positionals:
        options_list.append(positional.get_positional_text())

    if node.commands:
        options_list.append("{" + ",".join(node.commands) + "}")

    text = " ".join(options_list)
    return text if plain_text else escape(text)


def get_usage(node: CommandNode, plain_text: bool = False) -> str:
    """
    Render the usage line for `node`, including its command path.

    Returns:
        str: A formatted usage line showing syntax and argument structure.
    """
    command_path = node.full_name
    if not plain_text:
        command_path = f"[{HelpStyles.COMMAND}]{escape(command_path)}[/]"
    options_text = get_options_text(node, plain_text)
    if options_text:
        return f"{command_path} {options_text}"
    return command_path


def _flag_forms(name: str, abbr: str | None) -> str:
    if abbr:
        return f"-{abbr}, --{name}"
    return f"--{name}"


def _print_row(console: Console, left: str, help_text: str) -> None:
    arg_line = f"  {escape(left):<30} "
    if help_text and len(left) > 30:
        help_text = f"\n{'':<33}{help_text}"
    console.print(f"{arg_line}{help_text}")


def render_help(node: CommandNode, console: Console | None = None) -> None:
    """
    Print formatted help text for `node` using Rich output.

    Includes usage, description, positional slots, flags and options with
    their required/default markers, and the list of subcommands.
    """
    console = console or default_console
    console.print(f"[{HelpStyles.USAGE}]usage:[/] {get_usage(node)}\n")

    if node.description:
        console.print(escape(node.description) + "\n")

    if node.positionals:
        console.print(f"[{HelpStyles.HEADING}]positional:[/]")
        for positional in node.positionals:
            _print_row(console, positional.name, escape(positional.help))

    if node.flags or node.options:
        console.print(f"[{HelpStyles.HEADING}]options:[/]")
        for flag in node.flags.values():
            help_text = escape(flag.help)
            if flag.required:
                help_text += f" [{HelpStyles.REQUIRED}](required)[/]"
            elif flag.default:
                help_text += f" [{HelpStyles.DEFAULT}](default: true)[/]"
            _print_row(console, _flag_forms(flag.name, flag.abbr), help_text.strip())

        for option in node.options.values():
            left = f"{_flag_forms(option.name, option.abbr)} {option.get_choice_text()}"
            help_text = escape(option.help)
            if option.required and option.default is None:
                help_text += f" [{HelpStyles.REQUIRED}](required)[/]"
            if option.default is not None:
                default = escape(option.default)
                help_text += f" [{HelpStyles.DEFAULT}](default: {default})[/]"
            _print_row(console, left, help_text.strip())

    if node.commands:
        console.print(f"[{HelpStyles.HEADING}]commands:[/]")
        for child in node.commands.values():
            _print_row(console, child.name, escape(child.description))
