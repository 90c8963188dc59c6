# algobox

Classic algorithms and data structures in plain Python, with no third-party
dependencies. Every module is self-contained and importable on its own.

## Installation

```
pip install algobox
```

To run the test suite:

```
pip install "algobox[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.hashing` | `random_base`, `SingleHash`, `DoubleHash`, `TwoDHash` polynomial hashes |
| `algobox.hash_segtree` | `HashSegmentTree` (returning `HashNode`) for hashing a string under point updates |
| `algobox.strings` | `prefix_function`, `z_function`, `manacher` |
| `algobox.suffix_array` | `SuffixArray` with `sa`, `lcp` and `smaller_bounds` |
| `algobox.aho_corasick` | `AhoCorasick` multi-pattern automaton over lowercase letters |
| `algobox.suffix_automaton` | `SuffixAutomaton` (with `State`): occurrence counts, path counts, k-th substring, longest common substring |
| `algobox.fft` | `fft` and integer polynomial `multiply` over complex numbers |
| `algobox.ntt` | `ModInt`, `ntt`, `inverse_ntt`, `multiply` and `power` modulo 998244353 |
| `algobox.number_theory` | `linear_sieve`, `wheel_sieve`, `simple_sieve`, `segmented_sieve`, `prime_gaps`, `phi_mobius` |
| `algobox.rmq` | `SparseTable` range-minimum queries over half-open ranges |
| `algobox.segment_tree` | `LazySegmentTree` (range add, range merge) and `MaxSegmentTree.first_at_least` |
| `algobox.hld` | `HeavyLightDecomposition` with subtree add and path maximum |
| `algobox.treap` | `ImplicitTreap` sequence with insert, erase, reverse and cyclic shift |
| `algobox.matching` | `maximum_bipartite_matching`, `HopcroftKarp` |
| `algobox.maxflow` | `edmonds_karp`, `Dinic`, `MinCostMaxFlow` |
| `algobox.tarjan` | `tarjan` strongly connected components and bridge-like tree edges (`TarjanResult`) |
| `algobox.two_sat` | `TwoSatSolver` |

## Indexing conventions

Each structure keeps the indexing of its classic formulation, and its
docstrings say which one it uses:

- zero-based: `SingleHash`, `DoubleHash`, `HashSegmentTree`, the string
  functions, `SparseTable` (half-open `[left, right)`), `MaxSegmentTree`,
  `maximum_bipartite_matching`, `edmonds_karp`, `Dinic`, `MinCostMaxFlow`,
  `tarjan`;
- one-based: `TwoDHash`, `LazySegmentTree`, `HeavyLightDecomposition`,
  `ImplicitTreap`, `HopcroftKarp`, `TwoSatSolver`.

Out-of-range positions raise `IndexError`; malformed arguments raise
`ValueError`.

## Examples

String algorithms:

```python
from algobox.strings import prefix_function, z_function

prefix_function("abcabcd")   # [0, 0, 0, 1, 2, 3, 0]
z_function("aaabaab")        # [0, 2, 1, 0, 2, 1, 0]
```

Comparing substrings by hash:

```python
from algobox.hashing import DoubleHash, random_base

base = random_base()
h = DoubleHash("abracadabra", base)
assert h.get(0, 3) == h.get(7, 10)   # "abra" == "abra"
```

Polynomial multiplication modulo 998244353:

```python
from algobox.ntt import multiply

multiply([1, 1], [1, 1])   # [1, 2, 1], the coefficients of (1 + x)^2
```

A sequence with range reversal:

```python
from algobox.treap import ImplicitTreap

seq = ImplicitTreap()
for value in range(1, 6):
    seq.append(value)
seq.reverse_range(2, 4)
list(seq)   # [1, 4, 3, 2, 5]
```

Maximum flow:

```python
from algobox.maxflow import Dinic

network = Dinic(4, 0, 3)
network.add_edge(0, 1, 3)
network.add_edge(0, 2, 2)
network.add_edge(1, 3, 2)
network.add_edge(2, 3, 3)
network.max_flow()   # 4
```

2-SAT, with variables numbered from 1 and `negate` giving the opposite literal:

```python
from algobox.two_sat import TwoSatSolver

solver = TwoSatSolver(2)
solver.add_or(1, 2)
solver.add_or(solver.negate(1), 2)
solver.solve()        # True
solver.assignment[2]  # True
```

## What it does not do

algobox is a library only: it has no command-line program and reads no input
files. `HeavyLightDecomposition` supports only adding a value to a subtree and
taking the maximum along a path, and `AhoCorasick` accepts only the letters
`a` to `z`.