"""Aho-Corasick automaton over lowercase Latin letters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

ALPHABET_SIZE = 26


def _code(char: str) -> int:
    code = ord(char) - ord("a")
    if not 0 <= code < ALPHABET_SIZE:
        raise ValueError(f"character {char!r} is not a lowercase letter")
    return code


class AhoCorasick:
    """Multi-pattern matcher; add patterns, then build, then search."""

    def __init__(self) -> None:
        self._next: list[list[int]] = []
        self._link: list[int] = []
        self._outlink: list[int] = []
        self._out: list[list[int]] = []
        self._built = False
        self._new_node()

    def __len__(self) -> int:
        return len(self._next)

    def _new_node(self) -> int:
        self._next.append([0] * ALPHABET_SIZE)
        self._link.append(0)
        self._outlink.append(0)
        self._out.append([])
        return len(self._next) - 1

    def add_pattern(self, pattern: str, index: int) -> None:
        """Insert a pattern reported under ``index``."""
        if self._built:
            raise RuntimeError("cannot add patterns after build()")
        node = 0
        for char in pattern:
            code = _code(char)
            if not self._next[node][code]:
                self._next[node][code] = self._new_node()
            node = self._next[node][code]
        self._out[node].append(index)

    def build(self) -> None:
        """Compute suffix links, output links and the full transition table."""
        if self._built:
            return
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for code in range(ALPHABET_SIZE):
                v = self._next[u][code]
                if not v:
                    self._next[u][code] = self._next[self._link[u]][code]
                    continue
                link = self._next[self._link[u]][code] if u else 0
                self._link[v] = link
                self._outlink[v] = self._outlink[link] if not self._out[link] else link
                queue.append(v)
        self._built = True

    def advance(self, state: int, char: str) -> int:
        """State reached from ``state`` after reading ``char``."""
        code = _code(char)
        while state and not self._next[state][code]:
            state = self._link[state]
        return self._next[state][code]

    def search(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(end_position, pattern_index)`` for every match in ``text``."""
        self.build()
        state = 0
        for position, char in enumerate(text):
            state = self.advance(state, char)
            node = state
            while node:
                for index in self._out[node]:
                    yield position, index
                node = self._outlink[node]