"""git_like.py"""
import sys

from rich.markup import escape

from argvtree import ArgvError, CommandNode, ParseResult
from argvtree.console import console


def commit(result: ParseResult) -> None:
    console.print(f"Committing with message: {result.option('message')}")
    console.print(f"Stage all: {result.flag('all')}")


def push(result: ParseResult) -> None:
    console.print(f"Pushing to: {result.positional('remote')}")
    console.print(f"Force: {result.flag('force')}")


git = CommandNode("git", description="A tiny git look-alike.")
(
    git.add_command("commit", description="Record changes.")
    .add_option("message", abbr="m", required=True, help="Commit message.")
    .add_flag("all", abbr="a", help="Stage all modified files.")
    .attach_callback(commit)
)
(
    git.add_command("push", description="Update remote refs.")
    .add_flag("force", abbr="f")
    .add_positional("remote")
    .attach_callback(push)
)

if __name__ == "__main__":
    args = sys.argv[1:]
    if not args:
        git.render_help()
        sys.exit(0)
    try:
        git.run(args)
    except ArgvError as error:
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        git.commands.get(args[0], git).render_help()
        sys.exit(2)
