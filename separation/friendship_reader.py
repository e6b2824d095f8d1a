"""Friendship file reader — parses input.txt pairs into a bidirectional graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

from separation.graph import AdjacencyListGraph
from separation.logger import logger
from separation.model import Friendship, FriendshipLoad, LoadStats, SeparationConfig

_SEPARATOR = " "


class InputError(Exception):
    """Raised when the friendship file cannot be read."""


def parse_line(line: str) -> Friendship | None:
    """Split ``"A B"`` on single spaces; None unless that gives exactly two tokens."""
    names = line.split(_SEPARATOR)
    if len(names) != 2:
        return None
    return Friendship(a=names[0], b=names[1])


def read_friendships(path: Path, encoding: str = "utf-8") -> FriendshipLoad:
    """Read every line of *path*, skipping the ones that are not a name pair."""
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError:
        raise InputError(f"File not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read file {path}: {e}") from None

    friendships: list[Friendship] = []
    total = 0
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for lineno, line in enumerate(lines, start=1):
        total += 1
        friendship = parse_line(line)
        if friendship is None:
            logger.debug("Skipping malformed line %d in %s: %r", lineno, path, line)
            continue
        friendships.append(friendship)

    stats = LoadStats(total=total, loaded=len(friendships), skipped=total - len(friendships))
    if stats.skipped:
        logger.info("Skipped %d malformed line(s) out of %d total", stats.skipped, total)
    return FriendshipLoad(friendships=friendships, stats=stats)


def build_graph(
    friendships: Iterable[Friendship], bidirectional: bool = True
) -> AdjacencyListGraph[str]:
    """Insert each pair as vertices plus an edge (both ways when bidirectional)."""
    graph: AdjacencyListGraph[str] = AdjacencyListGraph()
    for f in friendships:
        graph.add_vertex(f.a)
        graph.add_vertex(f.b)
        graph.connect(f.a, f.b)
        if bidirectional:
            graph.connect(f.b, f.a)
    return graph


def load_graph(config: SeparationConfig) -> AdjacencyListGraph[str]:
    """Read the configured friendship file and build its graph."""
    load = read_friendships(config.input_file, encoding=config.encoding)
    graph = build_graph(load.friendships, bidirectional=config.bidirectional)
    logger.debug(
        "Loaded %s: %d people, %d edges from %d line(s)",
        config.input_file,
        len(graph),
        graph.edge_count(),
        load.stats.loaded,
    )
    return graph
