# algolab

Classic algorithms and data structures written as plain Python, together
with a small word-upload protocol and a threaded message board over TCP.
It needs nothing beyond the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `algolab.binomial_heap` | `BinomialHeap` (insert, `get_min`, `extract_min`, `decrease_key`, `delete_key`, `roots`, `is_empty`, `clear`, `len`, `in`) and `HeapError` |
| `algolab.fibonacci_heap` | `FibonacciHeap` (insert, `minimum`, `extract_min`, `decrease_key`, `delete_key`, `roots`, `len`, `in`) |
| `algolab.geometry` | `Point`, `Segment`, `direction`, `on_segment`, `orientation`, `segments_intersect`, and the sweep-line `find_intersecting_pair` |
| `algolab.kdtree` | `KDTree(k)` with `insert`, `add` (insert unless present), `in` and `len` |
| `algolab.numeric` | `extended_gcd`, `fibonacci_mod`, `fibonacci_range_sum` (modulo 1 000 000 007), `lu_solve` |
| `algolab.fenwick` | `RangeFenwickTree`: 1-based range add and range sum |
| `algolab.dsu` | `DisjointSet` with `find`, `union` and `size_of` |
| `algolab.basics` | `sort_ascending`, `swap_case` (ASCII letters only) |
| `algolab.graphs` | `dijkstra`, `bellman_ford`, `johnson`, `strongly_connected_components`, `scc_size_balance`, `kahn_topological_order`, `dfs_topological_order`, `transitive_closure` |
| `algolab.lca` | `LCA`: lowest common ancestor by binary lifting, with `is_ancestor` and `lca` |
| `algolab.matching` | `prefix_function`, `kmp_contains`, `automaton_search`, `rabin_karp_find` |
| `algolab.scheduling` | `Process`, `ScheduleResult`, `round_robin`, `shortest_remaining_time_first`, `shortest_job_first` |
| `algolab.services` | Small computations: `fibonacci_term`, `fibonacci_series`, `factorial`, `grade`, `arithmetic`, `star_pattern`, `series_term`, `prime_exponents`, `char_with_count`, `leave_balance`, `lookup_meaning`, `student_record` / `StudentRecord`, `crc_encode`, `crc_check`, `check_password`, and `Inventory` |
| `algolab.transfer` | `count_words`, `send_words`, `receive_words`, `upload`, `serve_upload` |
| `algolab.board` | `MessageBoard`, `BoardServer`, `BoardClient` |

## Examples

```python
from algolab.binomial_heap import BinomialHeap

heap = BinomialHeap([4, 3, 7, -1, 2, 6, 5])
heap.extract_min()        # -1
heap.delete_key(3)
heap.get_min()            # 2
len(heap)                 # 5
```

```python
from algolab.kdtree import KDTree

tree = KDTree(2)
for point in [(3, 6), (17, 15), (13, 15), (6, 12), (9, 1), (2, 7), (10, 19)]:
    tree.insert(point)

(10, 19) in tree          # True
(12, 19) in tree          # False
```

```python
from algolab.geometry import Point, segments_intersect

segments_intersect(Point(10, 0), Point(0, 10), Point(0, 0), Point(10, 10))  # True
segments_intersect(Point(1, 1), Point(10, 1), Point(1, 2), Point(10, 2))    # False
```

```python
from algolab.graphs import johnson

edges = [
    (1, 3, 2), (3, 2, 4), (1, 3, 8), (4, 1, 2), (1, 5, -4),
    (5, 4, 6), (4, 3, -5), (2, 5, 7), (2, 4, 1),
]
distances = johnson(5, edges)   # row i - 1 holds distances from vertex i
```

```python
from algolab.scheduling import round_robin

result = round_robin([10, 5, 8], quantum=2)
result.waiting, result.turnaround, result.average_waiting
```

Graph functions number vertices from 1 to `n`; weighted edges are
`(u, v, w)` triples and unweighted ones `(u, v)` pairs, all directed.
Unreachable vertices get `math.inf`.

## Errors

Operations that cannot be carried out raise exceptions. `BinomialHeap`
raises `HeapError` when it is empty, when a key is not found, or when a new
key is not smaller than the old one. `FibonacciHeap` raises `IndexError`
when empty, `KeyError` for a missing key and `ValueError` for a larger new
key. `bellman_ford` and `johnson` raise `ValueError` on a negative cycle,
`dijkstra` on a negative weight, and `lu_solve` on a singular matrix.

## Networking

`algolab.transfer` sends a 4-byte little-endian word count followed by one
fixed-size, NUL-padded chunk per word (255 bytes by default). `upload`
connects and sends the words of a file; `serve_upload` accepts one
connection on a listening socket you provide and appends the words, each
followed by a space, to a file.

`BoardServer` is a threaded TCP server sharing one `MessageBoard` among any
number of clients. `BoardClient` connects to it, posts with `broadcast` and
reads every message back with `fetch`; messages travel in 1024-byte chunks.

## What it does not do

The package has no command-line programs and no interactive menus; every
feature is used from Python. `algolab.services` holds only the
computations: it does not run servers or clients for them.