"""Interactive prompts: package manager selection and run confirmation."""

from __future__ import annotations

import click
import readchar
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from eazypm.detector import PackageManagerChoice

from .ui import console

SELECT_MESSAGE = "What package manager should be used to reinstall?"
CONFIRM_MESSAGE = "Do you want to backup and run the safe-chained install automatically?"


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP:
        return "up"
    if key == readchar.key.DOWN:
        return "down"
    if key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
        return "enter"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def next_enabled(choices: list[PackageManagerChoice], index: int, step: int) -> int:
    """Move from index by step (+1/-1), wrapping and skipping disabled choices."""
    count = len(choices)
    for offset in range(1, count + 1):
        candidate = (index + step * offset) % count
        if choices[candidate].installed:
            return candidate
    return index


def _selection_panel(choices: list[PackageManagerChoice], selected: int) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=2)
    table.add_column(justify="left")

    for i, choice in enumerate(choices):
        if not choice.installed:
            table.add_row(" ", f"[dim]{choice.label} {choice.disabled_hint}[/dim]")
        elif i == selected:
            table.add_row(">", f"[bold cyan]{choice.label}[/bold cyan]")
        else:
            table.add_row(" ", choice.label)

    table.add_row("", "")
    table.add_row("", "[dim]Use up/down to navigate, Enter to select[/dim]")

    return Panel(table, title=f"[bold]{SELECT_MESSAGE}[/bold]", border_style="cyan", padding=(1, 2))


def select_package_manager(choices: list[PackageManagerChoice], default_index: int) -> str:
    """Arrow-key single choice; disabled (not installed) entries cannot be selected.

    Raises:
        KeyboardInterrupt: On Ctrl+C
    """
    selected = default_index

    console.print()
    with Live(_selection_panel(choices, selected), console=console, transient=True, auto_refresh=False) as live:
        while True:
            key = get_key()
            if key == "up":
                selected = next_enabled(choices, selected, -1)
            elif key == "down":
                selected = next_enabled(choices, selected, 1)
            elif key == "enter":
                break
            live.update(_selection_panel(choices, selected), refresh=True)

    name = choices[selected].name
    console.print(f"[success]?[/success] {SELECT_MESSAGE} [cyan]{name}[/cyan]", highlight=False)
    return name


def confirm_run() -> bool:
    """Yes/No gate for backup + reinstall, default yes."""
    return click.confirm(CONFIRM_MESSAGE, default=True)
