import math
import random

import pytest

from algokit.graph import Graph
from algokit.scc import StronglyConnectedComponents
from algokit.shortest_paths import bfs
from algokit.topological import topological_sort


def _random_digraph(seed, n=10, m=16):
    rng = random.Random(seed)
    g = Graph(n)
    for _ in range(m):
        g.add(rng.randrange(n), rng.randrange(n), directed=True)
    return g


def test_cycle_with_tail():
    g = Graph(4)
    g.add(0, 1, directed=True)
    g.add(1, 2, directed=True)
    g.add(2, 0, directed=True)
    g.add(2, 3, directed=True)
    scc = StronglyConnectedComponents(g)
    dag = scc.build()
    assert scc.count == 2
    assert scc[0] == scc[1] == scc[2]
    assert scc[3] != scc[0]
    assert len(dag) == 2
    assert [(e.source, e.target) for e in dag.edges()] == [(scc[2], scc[3])]


@pytest.mark.parametrize("seed", range(10))
def test_components_are_mutual_reachability(seed):
    g = _random_digraph(seed)
    scc = StronglyConnectedComponents(g)
    scc.build()
    reach = [bfs(g, s) for s in range(len(g))]
    for u in range(len(g)):
        for v in range(len(g)):
            mutual = reach[u][v] != math.inf and reach[v][u] != math.inf
            assert (scc[u] == scc[v]) == mutual


@pytest.mark.parametrize("seed", range(10))
def test_condensation_is_topologically_numbered(seed):
    g = _random_digraph(seed)
    scc = StronglyConnectedComponents(g)
    dag = scc.build()
    assert sorted({scc[v] for v in range(len(g))}) == list(range(scc.count))
    assert all(e.source < e.target for e in dag.edges())
    assert len(topological_sort(dag)) == scc.count


def test_unbuilt_components_are_unlabelled():
    g = Graph(2)
    scc = StronglyConnectedComponents(g)
    assert scc[0] == -1
    scc.build()
    assert {scc[0], scc[1]} == {0, 1}