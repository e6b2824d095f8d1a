"""Graph engine — adjacency list graph, bfs, degrees_of_separation, shortest_path."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from separation.model import NO_RELATION

T = TypeVar("T", bound=Hashable)


class DirectedGraph(Protocol[T]):
    """Protocol for directed graphs queried by the BFS functions below."""

    def add_vertex(self, v: T) -> bool: ...

    def connect(self, from_v: T, to_v: T) -> bool: ...

    def contains(self, v: T) -> bool: ...

    def out_edges(self, v: T) -> list[T]: ...


class AdjacencyListGraph(Generic[T]):
    """Directed graph storing each vertex with the list of its outgoing edges.

    Failures are reported through boolean return values; no method raises on
    unknown vertices. Duplicate edges are kept.
    """

    def __init__(self) -> None:
        self._adjacency: dict[T, list[T]] = {}

    def add_vertex(self, v: T) -> bool:
        """Add *v* with no outgoing edges. False if it was already present."""
        if v in self._adjacency:
            return False
        self._adjacency[v] = []
        return True

    def connect(self, from_v: T, to_v: T) -> bool:
        """Add a directed edge. Both endpoints must already be vertices."""
        if from_v not in self._adjacency or to_v not in self._adjacency:
            return False
        self._adjacency[from_v].append(to_v)
        return True

    def contains(self, v: T) -> bool:
        return v in self._adjacency

    def out_edges(self, v: T) -> list[T]:
        """Successors of *v* as a new list; empty when *v* is unknown."""
        return list(self._adjacency.get(v, ()))

    def vertices(self) -> list[T]:
        return list(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def degrees_of_separation(self, start: T, end: T) -> int:
        return degrees_of_separation(self, start, end)

    def __contains__(self, v: object) -> bool:
        return v in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)


@dataclass
class BfsResult(Generic[T]):
    distances: dict[T, int] = field(default_factory=dict)
    parents: dict[T, T] = field(default_factory=dict)


@dataclass
class PathResult(Generic[T]):
    path: list[T] = field(default_factory=list)
    hops: int = NO_RELATION


def bfs(graph: DirectedGraph[T], start: T, target: T | None = None) -> BfsResult[T]:
    """BFS from *start*. Stops as soon as *target* is discovered, if given."""
    result: BfsResult[T] = BfsResult()
    if not graph.contains(start):
        return result

    visited: set[T] = {start}
    result.distances[start] = 0
    queue: deque[T] = deque([start])

    while queue:
        current = queue.popleft()
        current_distance = result.distances[current]
        for neighbor in graph.out_edges(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            result.distances[neighbor] = current_distance + 1
            result.parents[neighbor] = current
            queue.append(neighbor)
            if target is not None and neighbor == target:
                return result

    return result


def degrees_of_separation(graph: DirectedGraph[T], start: T, end: T) -> int:
    """Minimum number of edges from *start* to *end*.

    0 when both are the same value, even if neither is in the graph.
    -1 when either vertex is unknown or *end* is unreachable.
    """
    if start == end:
        return 0
    if not graph.contains(start) or not graph.contains(end):
        return NO_RELATION

    return bfs(graph, start, target=end).distances.get(end, NO_RELATION)


def shortest_path(graph: DirectedGraph[T], start: T, end: T) -> PathResult[T]:
    """Reconstruct one shortest path from *start* to *end* using the BFS parent map."""
    if start == end:
        return PathResult(path=[start], hops=0)
    if not graph.contains(start) or not graph.contains(end):
        return PathResult()

    parents = bfs(graph, start, target=end).parents
    if end not in parents:
        return PathResult()

    path: list[T] = [end]
    current = end
    while current in parents:
        current = parents[current]
        path.append(current)
    path.reverse()

    return PathResult(path=path, hops=len(path) - 1)
