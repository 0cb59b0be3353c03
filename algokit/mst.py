"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from itertools import count
from typing import Iterable

from .graph import Edge, Graph
from .union_find import UnionFind


@dataclass
class SpanningTree:
    """Total cost and chosen edges of a spanning tree (or forest)."""

    cost: int = 0
    edges: list[Edge] = field(default_factory=list)


def kruskal(edges: Iterable[Edge], n: int) -> SpanningTree:
    """Minimum spanning forest of the vertices ``0 .. n-1``."""
    uf = UnionFind(n)
    tree = SpanningTree()
    for e in sorted(edges, key=lambda e: e.cost):
        if uf.unite(e.source, e.target):
            tree.edges.append(e)
            tree.cost += e.cost
    return tree


def prim(graph: Graph) -> SpanningTree:
    """Minimum spanning tree of the component holding vertex 0."""
    n = len(graph)
    tree = SpanningTree()
    if n == 0:
        return tree
    used = [False] * n
    best: list = [math.inf] * n
    best[0] = 0
    order = count()
    heap: list = [(0, next(order), 0, None)]
    while heap:
        cost, _, v, edge = heapq.heappop(heap)
        if used[v]:
            continue
        used[v] = True
        tree.cost += cost
        if edge is not None:
            tree.edges.append(edge)
        for e in graph[v]:
            if used[e.target] or best[e.target] <= e.cost:
                continue
            best[e.target] = e.cost
            heapq.heappush(heap, (e.cost, next(order), e.target, e))
    return tree