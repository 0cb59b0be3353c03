"""Algorithms and data structures for competitive programming."""

__version__ = "0.1.0"

__all__ = [
    "binomial",
    "convolution",
    "fenwick",
    "formatting",
    "geometry",
    "graph",
    "lca",
    "li_chao",
    "lis",
    "modint",
    "mst",
    "number_theory",
    "polygon",
    "problems",
    "rolling_hash",
    "scc",
    "segment_tree",
    "shortest_paths",
    "sparse_table",
    "topological",
    "union_find",
]