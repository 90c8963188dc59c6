"""Polynomial multiplication with the complex fast Fourier transform."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable, Sequence


def fft(values: Iterable[complex], invert: bool = False) -> list[complex]:
    """Discrete Fourier transform of a sequence whose length is a power of two.

    With ``invert`` the inverse transform is computed, scaled by ``1 / n``.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n & (n - 1):
        raise ValueError("length must be a power of two")

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]

    length = 2
    while length <= n:
        angle = 2 * math.pi / length * (-1 if invert else 1)
        step = cmath.rect(1.0, angle)
        half = length // 2
        for start in range(0, n, length):
            w = 1 + 0j
            for k in range(start, start + half):
                u = a[k]
                v = a[k + half] * w
                a[k] = u + v
                a[k + half] = u - v
                w *= step
        length <<= 1

    if invert:
        a = [x / n for x in a]
    return a


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficients of the product of two integer polynomials.

    The result is padded with zeros to the smallest power of two that is at
    least ``len(a) + len(b)``.
    """
    n = 1
    while n < len(a) + len(b):
        n <<= 1
    fa = fft(list(a) + [0] * (n - len(a)))
    fb = fft(list(b) + [0] * (n - len(b)))
    product = fft((x * y for x, y in zip(fa, fb)), invert=True)
    return [round(x.real) for x in product]