"""Lowest common ancestors in a rooted tree by binary lifting."""

from __future__ import annotations

from .graph import Graph


class LowestCommonAncestor:
    """Answer LCA queries on a tree after ``build`` in O(log n) each."""

    def __init__(self, graph: Graph, root: int = 0) -> None:
        self._graph = graph
        self._root = root
        self._log = len(graph).bit_length()
        self._depth: list[int] = []
        self._table: list[list[int]] = []
        self._built = False

    def build(self) -> None:
        """Compute depths and ancestor tables; required before queries."""
        graph = self._graph
        n = len(graph)
        parent = [-1] * n
        depth = [-1] * n
        if n:
            depth[self._root] = 0
            stack = [self._root]
            while stack:
                v = stack.pop()
                for e in graph[v]:
                    if depth[e.target] == -1:
                        depth[e.target] = depth[v] + 1
                        parent[e.target] = v
                        stack.append(e.target)
        table = [parent]
        for _ in range(self._log - 1):
            prev = table[-1]
            table.append([-1 if p == -1 else prev[p] for p in prev])
        self._depth = depth
        self._table = table
        self._built = True

    def depth(self, v: int) -> int:
        """Distance in edges from the root to ``v``."""
        self._check(v)
        return self._depth[v]

    def _check(self, v: int) -> None:
        if not self._built:
            raise RuntimeError("build() must be called before queries")
        if self._depth[v] < 0:
            raise ValueError(f"vertex {v} is not connected to the root")

    def query(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        depth, table = self._depth, self._table
        if depth[u] > depth[v]:
            u, v = v, u
        gap = depth[v] - depth[u]
        for k in range(self._log - 1, -1, -1):
            if (gap >> k) & 1:
                v = table[k][v]
        if u == v:
            return u
        for k in range(self._log - 1, -1, -1):
            if table[k][u] != table[k][v]:
                u = table[k][u]
                v = table[k][v]
        return table[0][u]