# teamnote

A library of classic competitive-programming algorithms in plain Python,
with no third-party dependencies.

## Contents

String algorithms

- `teamnote.kmp`: `failure_function(pattern)` returns the border lengths of
  every prefix (entry 0 is `-1`); `find_occurrences(text, pattern)` returns the
  end offsets of all occurrences, overlapping ones included.
- `teamnote.z`: `z_function(s)` and `match_z(s, t)`, both returning lists
  indexed by 1-based position in `s` (entry 0 unused).
- `teamnote.manacher`: `manacher(s)`, the longest odd palindrome radius at
  every 1-based centre. For even palindromes, run it on the string with a
  separator between and around all characters.
- `teamnote.aho_corasick`: the `AhoCorasick` automaton built from a set of
  words, with `search(text)` returning the 0-based indices at which some word
  ends, and the shortcut `aho_corasick(text, patterns)`.
- `teamnote.suffix_array`: `SuffixArray(s)`, exposing 1-based `sa`, `rank` and
  `lcp` lists and `compare(l1, r1, l2, r2)`, which tells whether the substring
  `s[l1..r1]` is smaller than `s[l2..r2]` (1-based, inclusive bounds).

Arithmetic and polynomials

- `teamnote.modint`: `ModInt(value, mod)` (default modulus `MOD = 998244353`)
  with `+`, `-`, `*`, `**` and negation, plus `mod_pow(base, exponent, mod)`
  and `mod_inverse(value, mod)`. Inverting zero raises `ZeroDivisionError`.
- `teamnote.fft`: floating-point `dft(values, inverse=False)`,
  `multiply(f, g)` for small integer coefficients and `multiply_split(f, g)`,
  which splits coefficients around `SPLIT` to multiply large ones exactly.
- `teamnote.ntt`: `dft(values, inverse=False)` and `multiply(f, g)` modulo
  998244353, returning `ModInt` values.

Transform lengths must be powers of two up to `MAX_LENGTH` (2**21); other
lengths raise `ValueError`.

Optimisation

- `teamnote.cht`: `ConvexHullTrick` for minimum queries, with `push(a, b)`
  (slopes must be non-increasing), `query(x)` by binary search and
  `query_monotone(x)` for non-decreasing `x`.
- `teamnote.alien`: `solve_with_penalty(n, cost, penalty)` and
  `alien(n, k, cost)`, which splits `0..n` into exactly `k` segments of
  minimal total `cost(j, i)` and returns `(total, cut_points)`.
- `teamnote.monotone_queue`: `solve(n, cost)` for
  `dp[i] = min_{j<i} dp[j] + cost(j, i)` with a Monge cost, returning
  `(values, counts, path)`.
- `teamnote.dinic`: `Dinic(n)` on vertices `1..n`, with
  `add_edge(u, v, capacity, directed=True)` and `flow(source, sink)`.
- `teamnote.hopcroft_karp`: `HopcroftKarp(n, m)` with `add_edge(u, v)` and
  `matching()`; afterwards `match_left` and `match_right` hold the pairs
  (0 means unmatched).

## Example

```python
from teamnote.kmp import find_occurrences
from teamnote.dinic import Dinic

print(find_occurrences("aabcbabaaa", "aa"))   # [2, 9, 10]

network = Dinic(4)
network.add_edge(1, 2, 3, True)
network.add_edge(2, 4, 2, True)
network.add_edge(1, 3, 1, True)
network.add_edge(3, 4, 5, True)
print(network.flow(1, 4))                     # 3
```

## What it does not do

The package is a library only. It has no command-line program, and it does
not read problem input or print answers; parsing input and formatting output
is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```