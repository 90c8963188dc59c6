import pytest

from algobox.hashing import (
    BASE_RANGE,
    DoubleHash,
    SingleHash,
    TwoDHash,
    random_base,
)


def test_random_base_in_range():
    low, high = BASE_RANGE
    assert all(low <= random_base() <= high for _ in range(200))


def test_single_hash_equal_substrings():
    h = SingleHash("abcabcabd", 131)
    assert h.get(0, 2) == h.get(3, 5)
    assert h.get(0, 1) == h.get(6, 7)
    assert h.get(0, 2) != h.get(6, 8)


def test_single_hash_single_char_is_code():
    h = SingleHash("xyz", 311, 1_000_000_007)
    assert h.get(1, 1) == ord("y")


def test_single_hash_independent_of_surrounding_text():
    a = SingleHash("zzhellozz", 997)
    b = SingleHash("hello", 997)
    assert a.get(2, 6) == b.get(0, 4)


def test_single_hash_range_errors():
    h = SingleHash("abc", 257)
    with pytest.raises(IndexError):
        h.get(2, 3)
    with pytest.raises(IndexError):
        h.get(2, 1)


def test_double_hash_matches_with_same_base():
    text = "mississippi"
    a = DoubleHash(text, 1009)
    b = DoubleHash("ssi", 1009)
    assert a.get(2, 4) == b.get(0, 2)
    assert a.get(5, 7) == b.get(0, 2)
    assert a.get(0, 3) != a.get(1, 4)
    assert len(a) == len(text)


def test_double_hash_random_base_consistent():
    h = DoubleHash("abab")
    assert BASE_RANGE[0] <= h.base <= BASE_RANGE[1]
    assert h.get(0, 1) == h.get(2, 3)


GRID = ["abab", "cdcd", "abab", "cdcd"]


def test_two_d_hash_equal_blocks():
    h = TwoDHash(GRID, 263)
    assert h.get(1, 1, 2, 2) == h.get(3, 3, 4, 4)
    assert h.get(1, 1, 2, 2) == h.get(1, 3, 2, 4)
    assert h.get(1, 1, 2, 2) != h.get(1, 2, 2, 3)


def test_two_d_hash_matches_standalone_grid():
    whole = TwoDHash(GRID, 401)
    block = TwoDHash(["ba", "dc"], 401)
    assert whole.get(1, 2, 2, 3) == block.get(1, 1, 2, 2)


def test_two_d_hash_errors():
    with pytest.raises(ValueError):
        TwoDHash(["ab", "c"], 300)
    with pytest.raises(ValueError):
        TwoDHash([], 300)
    h = TwoDHash(GRID, 300)
    with pytest.raises(IndexError):
        h.get(0, 1, 2, 2)
    with pytest.raises(IndexError):
        h.get(1, 1, 5, 2)