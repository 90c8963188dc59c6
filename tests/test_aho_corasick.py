import pytest

from algobox.aho_corasick import AhoCorasick


def _automaton(patterns):
    ac = AhoCorasick()
    for index, pattern in enumerate(patterns):
        ac.add_pattern(pattern, index)
    ac.build()
    return ac


def _expected(patterns, text):
    return {
        (start + len(p) - 1, idx)
        for idx, p in enumerate(patterns)
        for start in range(len(text))
        if text.startswith(p, start)
    }


@pytest.mark.parametrize(
    "patterns, text",
    [
        (["he", "she", "his", "hers"], "ushers"),
        (["a", "aa", "aaa"], "aaaaa"),
        (["abc", "bc", "c", "d"], "abcabcd"),
        (["xyz"], "abcabc"),
    ],
)
def test_search_finds_all_occurrences(patterns, text):
    ac = _automaton(patterns)
    found = list(ac.search(text))
    assert len(found) == len(set(found))
    assert set(found) == _expected(patterns, text)


def test_ushers_matches():
    ac = _automaton(["he", "she", "his", "hers"])
    assert sorted(ac.search("ushers")) == [(3, 0), (3, 1), (5, 3)]


def test_advance_reaches_same_state_for_same_suffix():
    ac = _automaton(["abc", "bc"])
    state_a = 0
    for char in "xxabc":
        state_a = ac.advance(state_a, char)
    state_b = 0
    for char in "abc":
        state_b = ac.advance(state_b, char)
    assert state_a == state_b
    assert ac.advance(0, "z") == 0


def test_search_builds_automatically():
    ac = AhoCorasick()
    ac.add_pattern("ab", 7)
    assert list(ac.search("cab")) == [(2, 7)]


def test_errors():
    ac = AhoCorasick()
    with pytest.raises(ValueError):
        ac.add_pattern("Ab", 0)
    ac.add_pattern("ab", 0)
    ac.build()
    with pytest.raises(RuntimeError):
        ac.add_pattern("cd", 1)
    with pytest.raises(ValueError):
        ac.advance(0, "!")