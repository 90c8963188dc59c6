"""Prime sieves and multiplicative functions."""

from __future__ import annotations

from itertools import count, pairwise
from math import isqrt

_WHEEL = 210
_WHEEL_PRIMES = (2, 3, 5, 7)
_RESIDUES = tuple(r for r in range(_WHEEL) if all(r % p for p in _WHEEL_PRIMES))
_COPRIME = tuple(r in _RESIDUES for r in range(_WHEEL))


def linear_sieve(limit: int) -> tuple[list[int], list[int]]:
    """Least prime factors of 0..limit and the primes up to limit.

    ``lp[n]`` is the least prime factor of ``n`` for ``n >= 2`` and 0 otherwise.
    """
    lp = [0] * (max(limit, 0) + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if lp[i] == 0:
            lp[i] = i
            primes.append(i)
        for p in primes:
            if p > lp[i] or i * p > limit:
                break
            lp[i * p] = p
    return lp, primes


def wheel_sieve(limit: int) -> list[int]:
    """Primes below ``limit``, sieving only numbers coprime to 210."""
    if limit <= 2:
        return []
    composite = bytearray(limit)
    candidates = (block + r for block in count(0, _WHEEL) for r in _RESIDUES)
    for k in candidates:
        if k * k >= limit:
            break
        if k == 1 or composite[k]:
            continue
        for multiple in range(k * k, limit, k):
            if _COPRIME[multiple % _WHEEL]:
                composite[multiple] = 1
    small = [p for p in _WHEEL_PRIMES if p < limit]
    return small + [
        n for n in range(11, limit) if _COPRIME[n % _WHEEL] and not composite[n]
    ]


def simple_sieve(limit: int) -> list[bool]:
    """Primality flags for 0..limit-1."""
    is_prime = [True] * max(limit, 0)
    for n in range(min(limit, 2)):
        is_prime[n] = False
    for i in range(2, limit):
        if i * i >= limit:
            break
        if is_prime[i]:
            is_prime[i * i::i] = [False] * len(range(i * i, limit, i))
    return is_prime


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Primality flags for every value in ``low..high`` inclusive."""
    if low < 0 or high < low:
        raise ValueError("need 0 <= low <= high")
    composite = [False] * (high - low + 1)
    root = isqrt(high) + 1
    base = simple_sieve(root + 1)
    for p in range(2, root + 1):
        if not base[p]:
            continue
        start = max(-(-low // p) * p, 2 * p)
        for value in range(start, high + 1, p):
            composite[value - low] = True
    for value in (0, 1):
        if low <= value <= high:
            composite[value - low] = True
    return [not flag for flag in composite]


def prime_gaps(low: int, high: int) -> tuple[tuple[int, int], tuple[int, int]] | None:
    """Widest and narrowest gaps between consecutive primes in ``low..high``.

    Each gap is ``(smaller_prime, larger_prime)``; the first gap wins ties.
    Returns None when the range holds fewer than two primes.
    """
    flags = segmented_sieve(low, high)
    primes = [value for value, prime in zip(range(low, high + 1), flags) if prime]
    if len(primes) < 2:
        return None
    gaps = list(pairwise(primes))
    widest = max(gaps, key=lambda pair: pair[1] - pair[0])
    narrowest = min(gaps, key=lambda pair: pair[1] - pair[0])
    return widest, narrowest


def phi_mobius(limit: int) -> tuple[list[int], list[int]]:
    """Euler's totient and the Moebius function for 0..limit-1 (index 0 is 0)."""
    if limit <= 0:
        return [], []
    phi = [0] + [1] * (limit - 1)
    mobius = [0] + [1] * (limit - 1)
    is_prime = [True] * limit
    for i in range(2, limit):
        if not is_prime[i]:
            continue
        for j in range(i, limit, i):
            rest, prime_power = j, 1
            while rest % i == 0:
                rest //= i
                prime_power *= i
            phi[j] *= prime_power // i * (i - 1)
            if j != i:
                is_prime[j] = False
            if j % (i * i) == 0:
                mobius[j] = 0
            mobius[j] *= -1
    return phi, mobius