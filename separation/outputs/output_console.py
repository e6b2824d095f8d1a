"""Console output — the separation degree plus an optional Rich path line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from separation.model import SeparationResult


def render_console(result: SeparationResult, show_path: bool = False) -> None:
    """Print the degree on its own line; with *show_path*, follow it with the chain."""
    typer.echo(result.degrees)
    if not show_path:
        return

    console = Console(highlight=False)
    if not result.related:
        console.print(
            Text(f"No connection between {result.origin} and {result.target}"),
            soft_wrap=True,
        )
        return

    line = Text("Path: ", style="bold")
    line.append(f"({result.degrees} hops) ")
    line.append(" -> ".join(result.path))
    console.print(line, soft_wrap=True)
