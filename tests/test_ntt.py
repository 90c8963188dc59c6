import random

import pytest

from algobox.ntt import MOD, ModInt, inverse_ntt, multiply, ntt, power


def test_modint_normalises_negative_values():
    assert ModInt(-1).value == MOD - 1


def test_modint_division_inverts_multiplication():
    rng = random.Random(11)
    for _ in range(50):
        a = ModInt(rng.randrange(MOD))
        b = ModInt(rng.randrange(1, MOD))
        assert (a / b) * b == a


def test_modint_fermat():
    assert ModInt(2).pow(MOD - 1) == 1
    assert ModInt(12345) ** (MOD - 1) == ModInt(1)


def test_modint_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        ModInt(5) / ModInt(0)


def test_modint_addition_wraps():
    assert ModInt(MOD - 1) + 1 == ModInt(0)
    assert ModInt(0) - 1 == MOD - 1


def test_transform_round_trip():
    rng = random.Random(5)
    values = [rng.randrange(MOD) for _ in range(64)]
    assert inverse_ntt(ntt(values)) == values


def test_transform_rejects_bad_length():
    with pytest.raises(ValueError):
        ntt([1, 2, 3])


def test_multiply_small_example():
    assert multiply([1, 1], [1, 1]) == [1, 2, 1]


def test_multiply_commutes():
    assert multiply([1, 2, 3], [4, 5]) == multiply([4, 5], [1, 2, 3])


def test_multiply_by_one():
    assert multiply([7, 0, 9], [1]) == [7, 0, 9]


def test_multiply_zero_product_keeps_padding():
    result = multiply([0, 0], [0])
    assert result and all(v == 0 for v in result)


def test_multiply_accepts_modints():
    assert multiply([ModInt(3)], [ModInt(-1)]) == [MOD - 3]


def test_power_matches_repeated_multiplication():
    poly = [1, 3, 2]
    assert power(poly, 3) == multiply(multiply(poly, poly), poly)
    assert power(poly, 4) == multiply(power(poly, 2), power(poly, 2))


def test_power_one_is_identity():
    assert power([4, 5, 6], 1) == [4, 5, 6]


def test_power_rejects_non_positive_exponent():
    with pytest.raises(ValueError):
        power([1, 1], 0)