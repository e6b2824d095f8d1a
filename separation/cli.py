"""CLI entry point — degrees <person1> <person2>."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from separation.config import load_config
from separation.friendship_reader import InputError, load_graph
from separation.graph import shortest_path
from separation.logger import logger
from separation.model import SeparationResult
from separation.outputs.output_console import render_console
from separation.outputs.output_json import render_json

USAGE = "Usage: degrees <person1> <person2>"

app = typer.Typer(add_completion=False)


@app.command()
def degrees(
    people: Annotated[
        list[str] | None,
        typer.Argument(help="Exactly two names: origin and target", show_default=False),
    ] = None,
    input_file: Annotated[
        Path | None, typer.Option("--input", help="Friendship file (default: input.txt)")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to separation.yml")
    ] = None,
    show_path: Annotated[
        bool, typer.Option("--path", help="Also print one shortest chain of friends")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Print the degrees of separation between two people (-1 if unrelated)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if people is None or len(people) != 2:
        typer.echo(USAGE)
        return
    origin, target = people

    cfg = load_config(config_path)
    if input_file is not None:
        cfg.input_file = input_file

    try:
        graph = load_graph(cfg)
    except InputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904

    result = SeparationResult(
        origin=origin,
        target=target,
        degrees=graph.degrees_of_separation(origin, target),
    )
    logger.debug("Query %r -> %r: %d", origin, target, result.degrees)

    if show_path or as_json:
        result.path = shortest_path(graph, origin, target).path

    if as_json:
        typer.echo(render_json(result))
    else:
        render_console(result, show_path=show_path)


def main() -> None:
    app()
