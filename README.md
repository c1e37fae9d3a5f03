# gapalgo

A small library of algorithms and data structures, in pure Python with no third-party
dependencies.

## Contents

| Module | What it holds |
| --- | --- |
| `gapalgo.interval` | `Interval` with open or closed ends (`IntervalType`): `contains`, `contains_interval`, `overlap`, `length` |
| `gapalgo.distribution` | `IntervalDistribution` (counts per bin: `init_bins`, `count`, `valid_part`, `percents`) and `IntervalPercent` (shares per bin: `get_percent`, `valid_keys`, `sub_percent`, `compare`) |
| `gapalgo.collection` | `Collection`, a multiset with `intersection`, `union` and `jaccard` |
| `gapalgo.stats` | `average` and `standard_deviation` (population) |
| `gapalgo.linear_fitting` | `line_fit`, an orthogonal least-squares fit returning a `Line` (`a*x + b*y + c = 0`) with `y_at` and `x_at` |
| `gapalgo.bilist` | `BiList`, a node of a circular doubly linked ring |
| `gapalgo.fibheap` | `FibHeap` over caller-owned `FibNode`s: `insert`, `min`, `union`, `decrease_key`, `extract_min` |
| `gapalgo.disjoint_set` | `DisjointSet`, union by depth with path compression: `connect`, `group` |
| `gapalgo.bikey_map` | `BiKeyMap`, a map keyed by unordered pairs |
| `gapalgo.scoring` | `ScoreScheme`, `ScoreMatrix`, `AlignStep`, `ResultType` |
| `gapalgo.smith_waterman` | `SmithWaterman` local alignment: `validate`, `fill`, `traceback`, `aligned_ref`, `aligned_query` |
| `gapalgo.graph_basic` | `ListGraph` (undirected) and `ListDigraph` with numbered edges, `subgraph` and DOT output (`write_dot`) |
| `gapalgo.tip_remove` | `TipRemover`, which finds and deletes short dead-end chains round after round |
| `gapalgo.trunk` | `trunk`, the central path of a tree found by peeling leaves, and `linear_trunk`, a linear graph's nodes in path order |
| `gapalgo.min_tree` | `min_tree`, a minimum spanning forest (Prim's algorithm on `FibHeap`) |

Errors are raised as exceptions: for example `Collection.remove` raises `KeyError` for an
absent element, `FibHeap.extract_min` raises `IndexError` on an empty heap, and
`SmithWaterman.validate` raises `ValueError` for an unsuitable score scheme.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Local alignment:

```python
from gapalgo.scoring import ScoreScheme
from gapalgo.smith_waterman import SmithWaterman

sw = SmithWaterman("ABCBDAB", "BDCABA", ScoreScheme(1, 0, 0, 0))
sw.validate()
sw.fill()
path = sw.traceback()
print(sw.aligned_ref(path))    # the matched elements of the reference, as a string
```

Multisets:

```python
from gapalgo.collection import Collection

a = Collection("Hello")
b = Collection("World")
print(Collection.jaccard(a, b))   # 0.25
```

Intervals:

```python
from gapalgo.interval import Interval, IntervalType

iv = Interval(1, 5, IntervalType.LEFT_CLOSE_RIGHT_OPEN)
iv.contains(5)   # False
```

Minimum spanning tree:

```python
from gapalgo.graph_basic import ListGraph
from gapalgo.min_tree import min_tree

g = ListGraph()
g.connect("a", "b")
g.connect("b", "c")
tree = min_tree(g, lambda edge: 1)
```

## What it does not do

The package is a library only: it has no command-line program. Its graphs are the
adjacency-list `ListGraph` and `ListDigraph`; it offers no general depth-first or
shortest-path search over them, and no block-allocated array type.