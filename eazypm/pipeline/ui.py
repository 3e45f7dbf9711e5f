"""Central UI handler for eazypm.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every module.

Usage:
    from eazypm.pipeline.ui import console, print_error

    console.print("[success]Done[/success]")
    print_error("No dependencies found")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme

EAZYPM_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "command": "bold bright_green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
    "blade": "white",
    "hilt": "grey50",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=EAZYPM_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_banner() -> None:
    """Print the sword intro and title."""
    console.print()
    console.print("    /", style="hilt", highlight=False)
    console.print(Text.assemble(("O===[", "hilt"), ("====================-", "blade")))
    console.print("    \\", style="hilt", highlight=False)
    console.print()
    console.print("eazypm - easy & safe dependency reinstaller\n", style="bold bright_white")


def print_error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[error]ERROR:[/error] {escape(msg)}", highlight=False)


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {escape(msg)}", highlight=False)


def print_command(cmd: str) -> None:
    """Print the generated install command, unstyled markup-wise."""
    console.print("Install Command:", style="command")
    console.print(Text(cmd, style="command"))
    console.print()
