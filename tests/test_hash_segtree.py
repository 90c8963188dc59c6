import pytest

from algobox.hash_segtree import HashNode, HashSegmentTree
from algobox.hashing import DoubleHash


def test_query_matches_double_hash():
    text = "abracadabra"
    tree = HashSegmentTree(text, 1021)
    ref = DoubleHash(text, 1021)
    for start in range(len(text)):
        for end in range(start, len(text)):
            node = tree.query(start, end)
            assert (node.h1, node.h2) == ref.get(start, end)
            assert node.length == end - start + 1


def test_equal_substrings_equal_nodes():
    tree = HashSegmentTree("abcXabc", 733)
    assert tree.query(0, 2) == tree.query(4, 6)
    assert tree.query(0, 2) != tree.query(1, 3)


def test_update_matches_rebuilt_tree():
    tree = HashSegmentTree("hello world", 577)
    tree.update(0, "j")
    tree.update(10, "D")
    fresh = HashSegmentTree("jello worlD", 577)
    assert tree.query(0, 10) == fresh.query(0, 10)
    assert tree.query(3, 9) == fresh.query(3, 9)


def test_node_equality_ignores_length_and_str():
    assert HashNode(1, 5, 6) == HashNode(2, 5, 6)
    assert str(HashNode(3, 4, 5)) == "3 4 5"


def test_errors():
    with pytest.raises(ValueError):
        HashSegmentTree("", 300)
    tree = HashSegmentTree("abc", 300)
    with pytest.raises(IndexError):
        tree.query(1, 3)
    with pytest.raises(IndexError):
        tree.update(3, "a")
    with pytest.raises(ValueError):
        tree.update(0, "ab")