"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Sequence

from .graph import Edge, Graph

INF = math.inf


class NegativeCycleError(ValueError):
    """A negative cycle is reachable from the source."""


def bellman_ford(edges: Iterable[Edge], n: int, source: int) -> list:
    """Distances from ``source``; ``INF`` for unreachable vertices.

    Raises ``NegativeCycleError`` if a negative cycle is reachable.
    """
    edges = list(edges)
    dist: list = [INF] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for e in edges:
            if dist[e.source] == INF:
                continue
            candidate = dist[e.source] + e.cost
            if candidate < dist[e.target]:
                dist[e.target] = candidate
                changed = True
        if not changed:
            break
    for e in edges:
        if dist[e.source] != INF and dist[e.target] > dist[e.source] + e.cost:
            raise NegativeCycleError("negative cycle reachable from the source")
    return dist


def warshall_floyd(dist: Sequence[Sequence]) -> list[list]:
    """All-pairs shortest distances from a square matrix of direct distances.

    Missing edges are ``INF``; the input is left unchanged.
    """
    d = [list(row) for row in dist]
    n = len(d)
    if any(len(row) != n for row in d):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = d[k]
        for i in range(n):
            dik = d[i][k]
            if dik == INF:
                continue
            row_i = d[i]
            for j in range(n):
                dkj = row_k[j]
                if dkj == INF:
                    continue
                if dik + dkj < row_i[j]:
                    row_i[j] = dik + dkj
    return d


def bfs(graph: Graph, source: int) -> list:
    """Edge counts of shortest paths from ``source``; ``INF`` if unreachable."""
    dist: list = [INF] * len(graph)
    dist[source] = 0
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for e in graph[v]:
            if dist[e.target] == INF:
                dist[e.target] = dist[v] + 1
                queue.append(e.target)
    return dist


def dfs(graph: Graph, source: int) -> list:
    """Path costs along a depth-first traversal tree rooted at ``source``.

    Each vertex is reached once, by the first edge the traversal uses; on a
    tree these are the true distances. Unreached vertices get ``INF``.
    """
    dist: list = [INF] * len(graph)
    dist[source] = 0
    stack = [(source, iter(graph[source]))]
    while stack:
        v, edges = stack[-1]
        for e in edges:
            if dist[e.target] == INF:
                dist[e.target] = dist[v] + e.cost
                stack.append((e.target, iter(graph[e.target])))
                break
        else:
            stack.pop()
    return dist


def dijkstra(graph: Graph, source: int) -> list:
    """Shortest distances from ``source`` with non-negative costs."""
    dist: list = [INF] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if dist[v] < d:
            continue
        for e in graph[v]:
            nd = d + e.cost
            if nd < dist[e.target]:
                dist[e.target] = nd
                heapq.heappush(heap, (nd, e.target))
    return dist