"""Implicit treap: a sequence with logarithmic insert, erase, shift and reverse."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "priority", "size", "flipped", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.priority = random.random()
        self.size = 1
        self.flipped = False
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _push(node: _Node | None) -> None:
    if node is None or not node.flipped:
        return
    node.flipped = False
    node.left, node.right = node.right, node.left
    for child in (node.left, node.right):
        if child:
            child.flipped = not child.flipped


def _pull(node: _Node) -> None:
    node.size = _size(node.left) + _size(node.right) + 1


def _split(node: _Node | None, count: int) -> tuple[_Node | None, _Node | None]:
    """Split into the first ``count`` elements and the rest."""
    if node is None:
        return None, None
    _push(node)
    if count <= _size(node.left):
        left, node.left = _split(node.left, count)
        _pull(node)
        return left, node
    node.right, right = _split(node.right, count - _size(node.left) - 1)
    _pull(node)
    return node, right


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority > right.priority:
        _push(left)
        left.right = _merge(left.right, right)
        _pull(left)
        return left
    _push(right)
    right.left = _merge(left, right.left)
    _pull(right)
    return right


class ImplicitTreap:
    """Sequence addressed by one-based positions."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def _check(self, position: int) -> None:
        if not 1 <= position <= len(self):
            raise IndexError(f"position {position} outside 1..{len(self)}")

    def _split_range(self, start: int, end: int) -> tuple[_Node | None, _Node | None, _Node | None]:
        if not 1 <= start <= end <= len(self):
            raise IndexError(f"range [{start}, {end}] outside 1..{len(self)}")
        left, rest = _split(self._root, start - 1)
        middle, right = _split(rest, end - start + 1)
        return left, middle, right

    def insert(self, position: int, key: Any) -> None:
        """Insert ``key`` so that it ends up at ``position``."""
        if not 1 <= position <= len(self) + 1:
            raise IndexError(f"position {position} outside 1..{len(self) + 1}")
        left, right = _split(self._root, position - 1)
        self._root = _merge(_merge(left, _Node(key)), right)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._root = _merge(self._root, _Node(value))

    def __getitem__(self, position: int) -> Any:
        self._check(position)
        node = self._root
        while node:
            _push(node)
            left_size = _size(node.left)
            if position <= left_size:
                node = node.left
            elif position == left_size + 1:
                return node.key
            else:
                position -= left_size + 1
                node = node.right
        raise IndexError(position)

    def erase(self, position: int) -> None:
        """Remove the element at ``position``."""
        left, _, right = self._split_range(position, position)
        self._root = _merge(left, right)

    def cyclic_shift(self, start: int, end: int) -> None:
        """Rotate positions start..end one step to the right."""
        left, middle, right = self._split_range(start, end)
        first, last = _split(middle, end - start)
        self._root = _merge(_merge(_merge(left, last), first), right)

    def reverse_range(self, start: int, end: int) -> None:
        """Reverse the order of positions start..end."""
        left, middle, right = self._split_range(start, end)
        if middle:
            middle.flipped = not middle.flipped
        self._root = _merge(_merge(left, middle), right)

    def range_query(self, start: int, end: int) -> list[Any]:
        """Elements at positions start..end in order."""
        left, middle, right = self._split_range(start, end)
        part = ImplicitTreap()
        part._root = middle
        values = list(part)
        self._root = _merge(_merge(left, middle), right)
        return values