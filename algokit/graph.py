"""Adjacency-list graphs with integer vertices and weighted edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """A directed edge ``source -> target`` with a cost."""

    source: int
    target: int
    cost: int = 1


Edges = list[Edge]


class Graph:
    """A graph on vertices ``0 .. n-1`` stored as adjacency lists."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("number of vertices must be non-negative")
        self._adj: list[list[Edge]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adj)

    def __getitem__(self, v: int) -> list[Edge]:
        """Edges leaving vertex ``v``."""
        return self._adj[v]

    def __iter__(self) -> Iterator[list[Edge]]:
        return iter(self._adj)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise IndexError(f"vertex {v} out of range")

    def add(self, source: int, target: int, cost: int = 1, directed: bool = False) -> None:
        """Add an edge; an undirected edge is stored in both directions."""
        self._check(source)
        self._check(target)
        self._adj[source].append(Edge(source, target, cost))
        if not directed:
            self._adj[target].append(Edge(target, source, cost))

    def edges(self) -> list[Edge]:
        """Every stored edge, grouped by source vertex."""
        return [e for adj in self._adj for e in adj]