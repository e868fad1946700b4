# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance and help styles for argvtree."""
from rich.console import Console


class HelpStyles:
    """Rich style strings used when rendering usage and help."""

    USAGE = "bold"
    HEADING = "bold"
    COMMAND = "bold green"
    REQUIRED = "bold red"
    DEFAULT = "dim"


console = Console()
