"""Polynomial rolling hashes over strings and character grids."""

from __future__ import annotations

import random
from collections.abc import Sequence

MOD1 = 1_000_000_007
MOD2 = 1_000_000_009
BASE_RANGE = (257, 10007)


def random_base() -> int:
    """Pick a random hashing base from the usual range."""
    return random.randint(*BASE_RANGE)


def _powers(base: int, mod: int, count: int) -> tuple[list[int], list[int]]:
    inverse = pow(base, mod - 2, mod)
    powers, inverses = [1], [1]
    for _ in range(count):
        powers.append(powers[-1] * base % mod)
        inverses.append(inverses[-1] * inverse % mod)
    return powers, inverses


def _check_range(left: int, right: int, length: int) -> None:
    if not 0 <= left <= right < length:
        raise IndexError(f"range [{left}, {right}] outside 0..{length - 1}")


class SingleHash:
    """Prefix hashes of a string under one modulus."""

    def __init__(self, text: str, base: int, mod: int = MOD1) -> None:
        self.base = base
        self.mod = mod
        self._powers, self._inverses = _powers(base, mod, len(text))
        self._prefix = [0]
        for char, power in zip(text, self._powers):
            self._prefix.append((self._prefix[-1] + ord(char) * power) % mod)

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def get(self, left: int, right: int) -> int:
        """Hash of text[left:right + 1] (zero-based, inclusive)."""
        _check_range(left, right, len(self))
        diff = self._prefix[right + 1] - self._prefix[left]
        return diff * self._inverses[left] % self.mod


class DoubleHash:
    """Prefix hashes of a string under two moduli."""

    def __init__(self, text: str, base: int | None = None) -> None:
        self.base = random_base() if base is None else base
        self._hashes = (
            SingleHash(text, self.base, MOD1),
            SingleHash(text, self.base, MOD2),
        )

    def __len__(self) -> int:
        return len(self._hashes[0])

    def get(self, left: int, right: int) -> tuple[int, int]:
        """Hash pair of text[left:right + 1] (zero-based, inclusive)."""
        first, second = self._hashes
        return first.get(left, right), second.get(left, right)


def _grid_prefix(grid: Sequence[str], powers: list[int], mod: int) -> list[list[int]]:
    width = len(grid[0])
    prefix = [[0] * (width + 1) for _ in range(len(grid) + 1)]
    for i, row in enumerate(grid, 1):
        above, current = prefix[i - 1], prefix[i]
        for j, char in enumerate(row, 1):
            weight = ord(char) * powers[i] % mod * powers[j]
            current[j] = (weight + above[j] + current[j - 1] - above[j - 1]) % mod
    return prefix


class TwoDHash:
    """Two-dimensional prefix hashes of a rectangular character grid."""

    def __init__(self, grid: Sequence[str], base: int | None = None) -> None:
        if not grid or not grid[0]:
            raise ValueError("grid must be non-empty")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("grid rows must all have the same length")
        self.base = random_base() if base is None else base
        self.rows = len(grid)
        self.cols = width
        self._tables = []
        for mod in (MOD1, MOD2):
            powers, inverses = _powers(self.base, mod, max(self.rows, self.cols))
            self._tables.append((mod, inverses, _grid_prefix(grid, powers, mod)))

    def get(self, x1: int, y1: int, x2: int, y2: int) -> tuple[int, int]:
        """Hash pair of the sub-grid with one-based inclusive corners."""
        if not (1 <= x1 <= x2 <= self.rows and 1 <= y1 <= y2 <= self.cols):
            raise IndexError("sub-grid outside the grid")
        result = []
        for mod, inverses, prefix in self._tables:
            total = (
                prefix[x2][y2]
                - prefix[x1 - 1][y2]
                - prefix[x2][y1 - 1]
                + prefix[x1 - 1][y1 - 1]
            )
            result.append(total % mod * inverses[x1] % mod * inverses[y1] % mod)
        return result[0], result[1]