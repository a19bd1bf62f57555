# algolib

A collection of algorithms and data structures for contest-style problem
solving, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolib.modint` | `ModInt`, `modint_type`, `MontgomeryModint32`, `MontgomeryModint64` |
| `algolib.number_theory` | `gcd`, `ext_gcd`, `safe_mod`, `crt`, `int_pow`, `modpow`, `is_prime`, `factorize`, `sqrt_floor` |
| `algolib.binomial` | `BinomialCoefficient` (factorial tables modulo a prime) |
| `algolib.primality` | `miller_rabin`, `is_prime`, `find_prime_factor`, `factorize` (Miller-Rabin and Pollard's rho for 64-bit integers) |
| `algolib.random_number` | `RandomNumberGenerator` (integers from `[a, b)` or `[0, a)`) |
| `algolib.fenwick_tree` | `FenwickTree` |
| `algolib.inversion` | `inversion_number` |
| `algolib.convolution` | `bit_reversal`, `fft_transform`, `fft_convolution`, `ntt_transform`, `ntt_convolution` |
| `algolib.binary_search_tree` | `BinarySearchTree` |
| `algolib.splay_tree` | `LazyReversibleSplayTree` |
| `algolib.segment_tree` | `SegmentTree` |
| `algolib.lazy_segment_tree` | `LazySegmentTree` |
| `algolib.merge_sort_tree` | `MergeSortTree` |
| `algolib.union_find` | `UnionFind` |
| `algolib.dp` | `longest_increasing_subsequence`, `RerootingDP` |
| `algolib.matrix` | `left_rotate`, `right_rotate` |
| `algolib.timer` | `Timer` (elapsed whole milliseconds) |
| `algolib.geometry` | `Point`, `ccw`, `dist`, `convex_hull`, `polar_sort` |
| `algolib.max_flow` | `Dinic`, `FordFulkerson`, `FlowEdge` |
| `algolib.min_cost_flow` | `PrimalDual` |
| `algolib.graph` | `Dijkstra`, `Lowlink` |
| `algolib.rolling_hash` | `RollingHash`, `enumerate_lcp`, `enumerate_palindromes` |
| `algolib.suffix_array` | `suffix_array`, `lcp_array` |
| `algolib.tree` | `CentroidDecomposition`, `LowestCommonAncestor` |

## Examples

Number theory:

```python
from algolib.number_theory import ext_gcd, modpow, factorize

ext_gcd(3, 8)             # (1, 3, -1)
modpow(2, 10, 1000)       # 24
factorize(12)             # [(2, 2), (3, 1)]
```

`crt(remainders, moduli)` returns `(r, lcm)` and raises `ValueError` when the
system has no solution.

Modular integers:

```python
from algolib.modint import modint_type

Mint = modint_type(1_000_000_007)
x = Mint(3) / 2
(x * 2).val()             # 3
```

Range queries with a segment tree (`SegmentTree(op, e, data)`, where `data`
is a length or an iterable of values):

```python
from algolib.segment_tree import SegmentTree

seg = SegmentTree(min, lambda: float("inf"), [5, 3, 8, 1])
seg.prod(0, 3)            # 3
seg.set(1, 10)
seg.prod(0, 3)            # 5
```

Maximum flow:

```python
from algolib.max_flow import Dinic

g = Dinic(4)
g.add_edge(0, 1, 2)
g.add_edge(0, 2, 1)
g.add_edge(1, 3, 1)
g.add_edge(2, 3, 2)
g.max_flow(0, 3)          # 2
```

`PrimalDual.max_flow(s, t, flow_limit=None)` returns `(flow, cost)`;
`slope` returns the list of breakpoints.

Convolution modulo 998244353:

```python
from algolib.convolution import ntt_convolution

ntt_convolution([1, 2, 3], [4, 5])   # [4, 13, 22, 15]
```

Strings:

```python
from algolib.suffix_array import suffix_array, lcp_array

sa = suffix_array("abcbcba")         # [6, 0, 5, 3, 1, 4, 2]
lcp_array("abcbcba", sa)             # [1, 0, 1, 3, 0, 2]
```

Shortest paths: `Dijkstra().solve(graph, s)` takes adjacency lists of
`(neighbour, weight)` pairs and returns distances, with `None` for vertices
that cannot be reached; `calc_path(t)` then gives the vertices of a shortest
path.

Every structure that is parameterised by an operation (`SegmentTree`,
`LazySegmentTree`, `LazyReversibleSplayTree`, `RerootingDP`) takes plain Python
callables for the monoid operation, its identity and, where relevant, the
mapping and composition of lazy updates.

## What it does not do

This is a library only. It has no command-line tool and does not read problem
input or write answers; you call its classes and functions from your own code.