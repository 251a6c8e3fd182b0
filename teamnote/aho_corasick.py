"""Aho-Corasick automaton for finding where dictionary words end in a text."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

__all__ = ["AhoCorasick", "aho_corasick"]

_ROOT = 0


class AhoCorasick:
    """A trie of dictionary words with failure and dictionary-suffix links.

    Node 0 is the root. For every node, ``fail`` points to the node of its
    longest proper suffix present in the trie, and ``suffix`` points to the
    nearest node (itself included) along the failure chain that ends a word,
    or to the root when there is none.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.children: list[dict[str, int]] = [{}]
        self.parent: list[int] = [_ROOT]
        self.fail: list[int] = [_ROOT]
        self.suffix: list[int] = [_ROOT]
        self._build_trie(patterns)
        self._link()

    def _new_node(self, parent: int) -> int:
        self.children.append({})
        self.parent.append(parent)
        self.fail.append(-1)
        self.suffix.append(-1)
        return len(self.children) - 1

    def _build_trie(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            node = _ROOT
            for ch in pattern:
                nxt = self.children[node].get(ch)
                if nxt is None:
                    nxt = self._new_node(node)
                    self.children[node][ch] = nxt
                node = nxt
            self.suffix[node] = node

    def _link(self) -> None:
        queue = deque([_ROOT])
        while queue:
            node = queue.popleft()
            for ch, nxt in self.children[node].items():
                if node == _ROOT:
                    self.fail[nxt] = _ROOT
                else:
                    p = self.fail[node]
                    while p != _ROOT and ch not in self.children[p]:
                        p = self.fail[p]
                    self.fail[nxt] = self.children[p].get(ch, _ROOT)
                if self.suffix[nxt] == -1:
                    self.suffix[nxt] = self.suffix[self.fail[nxt]]
                queue.append(nxt)

    def states(self, text: str) -> Iterable[tuple[int, int]]:
        """Yield ``(index, node)`` for each character of ``text``.

        ``node`` is the trie node matching the longest suffix of
        ``text[:index + 1]`` that is a prefix of some word.
        """
        node = _ROOT
        for i, ch in enumerate(text):
            while node != _ROOT and ch not in self.children[node]:
                node = self.fail[node]
            node = self.children[node].get(ch, node)
            yield i, node

    def search(self, text: str) -> list[int]:
        """Return the 0-based indices of ``text`` at which some word ends."""
        return [i for i, node in self.states(text) if self.suffix[node] != _ROOT]


def aho_corasick(text: str, patterns: Iterable[str]) -> list[int]:
    """Return the 0-based indices of ``text`` at which any of ``patterns`` ends."""
    return AhoCorasick(patterns).search(text)