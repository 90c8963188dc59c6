import random

import pytest

from algobox.segment_tree import LazySegmentTree, MaxSegmentTree


@pytest.mark.parametrize("merge", [max, min])
def test_lazy_tree_matches_model(merge):
    rng = random.Random(2)
    model = [rng.randint(-50, 50) for _ in range(25)]
    tree = LazySegmentTree.from_values(model, merge)
    for _ in range(300):
        left = rng.randint(1, len(model))
        right = rng.randint(left, len(model))
        if rng.random() < 0.5:
            value = rng.randint(-20, 20)
            tree.update(left, right, value)
            for i in range(left - 1, right):
                model[i] += value
        else:
            assert tree.query(left, right) == merge(model[left - 1:right])


def test_sized_tree_starts_at_zero():
    tree = LazySegmentTree(5, max)
    tree.update(2, 3, 5)
    assert tree.query(1, 5) == 5
    assert tree.query(4, 5) == 0


def test_lazy_tree_rejects_bad_ranges():
    tree = LazySegmentTree(4)
    with pytest.raises(IndexError):
        tree.query(0, 2)
    with pytest.raises(IndexError):
        tree.update(3, 5, 1)
    with pytest.raises(ValueError):
        LazySegmentTree(0)


def _first_at_least(model, value):
    return next((i for i, v in enumerate(model) if v >= value), None)


def test_max_tree_search_matches_model():
    rng = random.Random(9)
    model = [rng.randint(0, 100) for _ in range(30)]
    tree = MaxSegmentTree(model)
    for _ in range(200):
        if rng.random() < 0.4:
            index = rng.randrange(len(model))
            model[index] = rng.randint(0, 100)
            tree.update(index, model[index])
        else:
            threshold = rng.randint(0, 110)
            assert tree.first_at_least(threshold) == _first_at_least(model, threshold)


def test_max_tree_none_when_all_smaller():
    tree = MaxSegmentTree([3, 1, 4])
    assert tree.first_at_least(5) is None
    assert tree.first_at_least(4) == 2


def test_max_tree_errors():
    with pytest.raises(ValueError):
        MaxSegmentTree([])
    tree = MaxSegmentTree([1, 2])
    with pytest.raises(IndexError):
        tree.update(2, 7)