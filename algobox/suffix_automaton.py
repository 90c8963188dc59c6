"""Suffix automaton with occurrence counts and substring queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class State:
    """One state of a suffix automaton."""

    length: int = 0
    link: int = 0
    count: int = 0
    terminal: bool = False
    is_clone: bool = False
    transitions: dict[str, int] = field(default_factory=dict)


class SuffixAutomaton:
    """Minimal automaton recognising all substrings of a text."""

    def __init__(self, text: str = "") -> None:
        self.states: list[State] = [State(link=-1)]
        self.last = 0
        self._paths: list[int] | None = None
        for char in text:
            self.extend(char)
        cur = self.last
        while cur > 0:
            self.states[cur].terminal = True
            cur = self.states[cur].link

    def __len__(self) -> int:
        return len(self.states)

    def extend(self, char: str) -> None:
        """Append one character to the text."""
        self._paths = None
        states = self.states
        cur = len(states)
        states.append(State(length=states[self.last].length + 1, count=1))
        p = self.last
        self.last = cur
        while p != -1 and char not in states[p].transitions:
            states[p].transitions[char] = cur
            p = states[p].link
        if p == -1:
            return
        q = states[p].transitions[char]
        if states[p].length + 1 == states[q].length:
            states[cur].link = q
            return
        clone = len(states)
        states.append(
            State(
                length=states[p].length + 1,
                link=states[q].link,
                is_clone=True,
                transitions=dict(states[q].transitions),
            )
        )
        while p != -1 and states[p].transitions.get(char) == q:
            states[p].transitions[char] = clone
            p = states[p].link
        states[q].link = states[cur].link = clone

    def count_occurrences(self) -> None:
        """Propagate counts along suffix links so each state holds its occurrences."""
        by_length = sorted(range(1, len(self.states)), key=lambda s: self.states[s].length, reverse=True)
        for cur in by_length:
            state = self.states[cur]
            self.states[state.link].count += state.count

    def _path_counts(self) -> list[int]:
        if self._paths is None:
            paths = [0] * len(self.states)
            order = sorted(range(len(self.states)), key=lambda s: self.states[s].length, reverse=True)
            for cur in order:
                paths[cur] = 1 + sum(paths[t] for t in self.states[cur].transitions.values())
            self._paths = paths
        return self._paths

    def count_paths(self, state: int) -> int:
        """Number of distinct paths from ``state``, the empty one included."""
        return self._path_counts()[state]

    def kth_substring(self, k: int) -> str:
        """The k-th distinct substring in lexicographic order; k = 0 is ''."""
        paths = self._path_counts()
        if not 0 <= k < paths[0]:
            raise ValueError(f"k must be in 0..{paths[0] - 1}")
        result = []
        cur = 0
        while k > 0:
            for char, target in sorted(self.states[cur].transitions.items()):
                if paths[target] < k:
                    k -= paths[target]
                else:
                    result.append(char)
                    cur = target
                    k -= 1
                    break
        return "".join(result)

    def longest_common_substring(self, other: str) -> str:
        """Longest substring of ``other`` that also occurs in the text."""
        cur = length = best = best_end = 0
        for i, char in enumerate(other):
            while cur > 0 and char not in self.states[cur].transitions:
                cur = self.states[cur].link
                length = self.states[cur].length
            if char in self.states[cur].transitions:
                cur = self.states[cur].transitions[char]
                length += 1
            if length > best:
                best, best_end = length, i
        return other[best_end - best + 1:best_end + 1]