"""Strongly connected components and the condensation graph."""

from __future__ import annotations

from .graph import Graph


class StronglyConnectedComponents:
    """Kosaraju's decomposition of a directed graph.

    After ``build`` components are numbered in topological order of the
    condensation, and ``scc[v]`` gives the component of vertex ``v``.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._component = [-1] * len(graph)
        self.count = 0

    def __getitem__(self, v: int) -> int:
        return self._component[v]

    def _finish_order(self) -> list[int]:
        graph = self._graph
        n = len(graph)
        visited = [False] * n
        order: list[int] = []
        for start in range(n):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(graph[start]))]
            while stack:
                v, edges = stack[-1]
                for e in edges:
                    if not visited[e.target]:
                        visited[e.target] = True
                        stack.append((e.target, iter(graph[e.target])))
                        break
                else:
                    stack.pop()
                    order.append(v)
        return order

    def build(self) -> Graph:
        """Label the components and return the condensation graph.

        The condensation keeps one directed edge per edge of the original
        graph that joins two different components.
        """
        graph = self._graph
        n = len(graph)
        reverse: list[list[int]] = [[] for _ in range(n)]
        for e in graph.edges():
            reverse[e.target].append(e.source)

        component = [-1] * n
        label = 0
        for v in reversed(self._finish_order()):
            if component[v] != -1:
                continue
            component[v] = label
            stack = [v]
            while stack:
                u = stack.pop()
                for w in reverse[u]:
                    if component[w] == -1:
                        component[w] = label
                        stack.append(w)
            label += 1
        self._component = component
        self.count = label

        dag = Graph(label)
        for e in graph.edges():
            x, y = component[e.source], component[e.target]
            if x != y:
                dag.add(x, y, 1, directed=True)
        return dag