# algokit

Algorithms and data structures of the kind used in programming contests,
written in plain Python with no dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.geometry` | `Point`, `Segment` (also `Line`), `Circle`, `Ccw`, `ccw`, `intersect`, `point_distance`, `line_distance`, `segment_point_distance`, `segment_distance`, `on_segment`, `projection`, `reflection` |
| `algokit.polygon` | `area`, `convex_hull`, `diameter`, `closest_pair`, `is_convex`, `contains`, `Containment` |
| `algokit.modint` | `ModInt`, an integer modulo a given modulus (998244353 by default) |
| `algokit.number_theory` | `power`, `extgcd`, `invmod`, `is_prime`, `prime_factorization`, `euler_phi`, `Sieve` |
| `algokit.binomial` | `Binomial` (factorial tables modulo a prime), `pascal_table` |
| `algokit.convolution` | `and_convolution`, `or_convolution`, `xor_convolution`, `ntt`, `convolve_mod` |
| `algokit.union_find` | `UnionFind`, `WeightedUnionFind` |
| `algokit.fenwick` | `FenwickTree` |
| `algokit.sparse_table` | `SparseTable` |
| `algokit.segment_tree` | `SegmentTree` (point update, range fold; range minimum by default), `LazySegmentTree` (range affine update, range sum) |
| `algokit.rolling_hash` | `RollingHash` |
| `algokit.li_chao` | `LiChaoTree` for line and segment minimum queries |
| `algokit.lis` | `longest_increasing_subsequence` |
| `algokit.graph` | `Edge`, `Graph` |
| `algokit.shortest_paths` | `bfs`, `dfs`, `dijkstra`, `bellman_ford`, `warshall_floyd`, `NegativeCycleError` |
| `algokit.mst` | `kruskal`, `prim`, `SpanningTree` |
| `algokit.scc` | `StronglyConnectedComponents` |
| `algokit.lca` | `LowestCommonAncestor` |
| `algokit.topological` | `topological_sort` |
| `algokit.formatting` | `format_value`, `dump` |
| `algokit.problems` | solvers for classic judge problems, and the `algokit` command |

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Examples

Shortest paths on a weighted graph:

```python
from algokit.graph import Graph
from algokit.shortest_paths import dijkstra

g = Graph(4)
g.add(0, 1, 5, False)
g.add(1, 2, 1, False)
g.add(0, 2, 10, False)
print(dijkstra(g, 0))   # [0, 5, 6, inf]
```

Unreachable vertices get `math.inf`. `bellman_ford` raises
`NegativeCycleError` when a negative cycle is reachable from the source.

Primes and modular arithmetic:

```python
from algokit.number_theory import is_prime, power, prime_factorization

is_prime(97)               # True
power(2, 10, 1000)         # 24
prime_factorization(360)   # [(2, 3), (3, 2), (5, 1)]
```

Longest increasing subsequence:

```python
from algokit.lis import longest_increasing_subsequence

longest_increasing_subsequence([3, 1, 4, 1, 5, 9, 2, 6], True)  # 4
```

Geometry:

```python
from algokit.geometry import Point
from algokit.polygon import area, convex_hull

square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
area(square)                                    # 1.0
convex_hull(square + [Point(0.5, 0.5)], True)   # the four corners, counter-clockwise
```

`Point` equality is approximate (within `1e-10` per coordinate).

Debug output:

```python
from algokit.formatting import dump, format_value

format_value({1: [2, 3]})   # '1:2 3'
dump([1, 2, 3])             # red "[[ DEBUG ]] 1 2 3" line on standard error
```

## Command line

The `algokit` command reads a problem's input from standard input and
writes the answers to standard output:

```
algokit staticrmq < input.txt
```

The problems it knows are `bitwise_and_convolution`,
`bitwise_and_convolution_by_or`, `bitwise_xor_convolution`,
`line_add_get_min`, `segment_add_get_min`, `range_affine_range_sum` and
`staticrmq`. Run

```
algokit --help
```

for the list. Input that ends early is reported on standard error with
exit status 1. Each solver is also a function in `algokit.problems`
(`solve_static_rmq`, `solve_line_add_get_min`, and so on) that takes the
whole input as a string and returns the output as a string.

## What it does not do

`Circle` is only a data holder: there are no circle intersection or
tangent routines, and there is no routine for cutting a polygon by a line.

## Running the tests

```
pip install .[test]
pytest
```