"""Number-theoretic transform and polynomial arithmetic modulo 998244353."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cache

MOD = 998244353
MAX_LOG = 22


def _raw(value: object) -> int:
    if isinstance(value, ModInt):
        return value.value
    if isinstance(value, int):
        return value % MOD
    raise TypeError(f"cannot use {type(value).__name__} as a residue")


class ModInt:
    """Residue modulo 998244353."""

    __slots__ = ("value",)

    def __init__(self, value: int | ModInt = 0) -> None:
        self.value = _raw(value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ModInt, int)):
            return self.value == _raw(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __add__(self, other: ModInt | int) -> ModInt:
        if not isinstance(other, (ModInt, int)):
            return NotImplemented
        return ModInt(self.value + _raw(other))

    __radd__ = __add__

    def __sub__(self, other: ModInt | int) -> ModInt:
        if not isinstance(other, (ModInt, int)):
            return NotImplemented
        return ModInt(self.value - _raw(other))

    def __rsub__(self, other: int) -> ModInt:
        if not isinstance(other, int):
            return NotImplemented
        return ModInt(other - self.value)

    def __neg__(self) -> ModInt:
        return ModInt(-self.value)

    def __mul__(self, other: ModInt | int) -> ModInt:
        if not isinstance(other, (ModInt, int)):
            return NotImplemented
        return ModInt(self.value * _raw(other))

    __rmul__ = __mul__

    def __truediv__(self, other: ModInt | int) -> ModInt:
        if not isinstance(other, (ModInt, int)):
            return NotImplemented
        divisor = _raw(other)
        if divisor == 0:
            raise ZeroDivisionError("division by a zero residue")
        return self * pow(divisor, MOD - 2, MOD)

    def __rtruediv__(self, other: int) -> ModInt:
        if not isinstance(other, int):
            return NotImplemented
        return ModInt(other) / self

    def pow(self, exponent: int) -> ModInt:
        """This residue raised to a non-negative power."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt(pow(self.value, exponent, MOD))

    def __pow__(self, exponent: int) -> ModInt:
        return self.pow(exponent)


def _valid_root(root: int) -> bool:
    inverse = pow(root, MOD - 2, MOD)
    for base in (inverse, root):
        for level in range(1, MAX_LOG + 1):
            if pow(base, (MOD - 1) >> level, MOD) <= 1:
                return False
    return True


@cache
def _root() -> int:
    root = 2
    while not _valid_root(root):
        root += 1
    return root


@cache
def _twiddles(invert: bool, level: int) -> tuple[int, ...]:
    root = _root()
    base = root if invert else pow(root, MOD - 2, MOD)
    step = pow(base, (MOD - 1) >> level, MOD)
    powers = []
    w = 1
    for _ in range((1 << level) >> 1):
        powers.append(w)
        w = w * step % MOD
    return tuple(powers)


def ntt(values: Iterable[int | ModInt], invert: bool = False) -> list[int]:
    """Unscaled number-theoretic transform; the length must be a power of two."""
    a = [_raw(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1) or n > 1 << MAX_LOG:
        raise ValueError(f"length must be a power of two up to 2**{MAX_LOG}")

    level = n.bit_length() - 1
    m = n
    while m >= 2:
        half = m >> 1
        twiddles = _twiddles(bool(invert), level)
        for i in range(half):
            w = twiddles[i]
            for j in range(i, n, m):
                k = j + half
                x = a[j] - a[k]
                a[j] = (a[j] + a[k]) % MOD
                a[k] = w * x % MOD
        m >>= 1
        level -= 1

    i = 0
    for j in range(1, n - 1):
        k = n >> 1
        i ^= k
        while k > i:
            k >>= 1
            i ^= k
        if j < i:
            a[i], a[j] = a[j], a[i]
    return a


def inverse_ntt(values: Iterable[int | ModInt]) -> list[int]:
    """Inverse transform, scaled so that it undoes :func:`ntt`."""
    a = ntt(values, invert=True)
    scale = pow(len(a), MOD - 2, MOD)
    return [v * scale % MOD for v in a]


def multiply(a: Iterable[int | ModInt], b: Iterable[int | ModInt]) -> list[int]:
    """Product of two polynomials modulo 998244353, trailing zeros removed.

    If every coefficient of the product is zero the padded zero list is kept.
    """
    a = [_raw(v) for v in a]
    b = [_raw(v) for v in b]
    if not a or not b:
        raise ValueError("polynomials must have at least one coefficient")
    degree = len(a) + len(b) - 2
    n = 1
    while n <= degree:
        n <<= 1
    fa = ntt(a + [0] * (n - len(a)))
    fb = ntt(b + [0] * (n - len(b)))
    product = inverse_ntt(x * y % MOD for x, y in zip(fa, fb))
    while len(product) > 1 and product[-1] == 0:
        product.pop()
    if product == [0]:
        return [0] * n
    return product


def power(poly: Iterable[int | ModInt], exponent: int) -> list[int]:
    """Polynomial raised to a positive integer power by repeated squaring."""
    if exponent < 1:
        raise ValueError("exponent must be at least 1")
    base = [_raw(v) for v in poly]
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    result = multiply(half, half)
    if exponent & 1:
        result = multiply(result, base)
    return result