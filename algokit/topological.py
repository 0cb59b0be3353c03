"""Topological ordering of a directed graph."""

from __future__ import annotations

from collections import deque

from .graph import Graph


def topological_sort(graph: Graph) -> list[int]:
    """Vertices in topological order by Kahn's algorithm.

    Vertices on or behind a cycle never reach in-degree zero and are left
    out, so the result is shorter than the graph exactly when it has a cycle.
    """
    n = len(graph)
    indegree = [0] * n
    for e in graph.edges():
        indegree[e.target] += 1
    queue = deque(v for v in range(n) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        v = queue.popleft()
        order.append(v)
        for e in graph[v]:
            indegree[e.target] -= 1
            if indegree[e.target] == 0:
                queue.append(e.target)
    return order