# tests/test_case_insensitive.py
# case-insensitive Trie: shared alias nodes, case preservation, conflicts

import pytest

from runetrie import EntryConflictError, Trie, must, new_case_insensitive_trie
from runetrie.core.trie import _case_counterpart


@pytest.fixture
def ci_trie():
    return must(new_case_insensitive_trie, "FoO", "bAr", "buz")


def test_longest_match_preserves_stored_case(ci_trie):
    assert ci_trie.longest_match_prefix_of("fOoo") == ("FoO", True)
    assert ci_trie.longest_match_prefix_of("BaR!") == ("bAr", True)
    assert ci_trie.match_prefix_of("FOOBAR") == ("FoO", True)


def test_match_any_ignores_case(ci_trie):
    for q in ("foo", "FOO", "fOo", "BUZ", "Bar"):
        assert ci_trie.match_any(q), q
    assert not ci_trie.match_any("fo")
    assert not ci_trie.match_any("fooo")


def test_membership_is_case_fold_equality():
    entries = ["Alpha", "beta", "GAMMA", "Ωmega"]
    trie = must(new_case_insensitive_trie, *entries)
    for e in entries:
        assert trie.match_any(e.upper())
        assert trie.match_any(e.lower())
        assert trie.match_any(e.swapcase())
    assert not trie.match_any("alphabet")
    assert not trie.match_any("delta")


@pytest.mark.parametrize(
    "entries, target, want",
    [
        ([], "", False),
        ([], "foo", False),
        (["A"], "A", True),
        (["A", "AA", "AAA"], "AAA", True),
        (["A", "AA", "AAA"], "AAC", True),
        (["AAAA", "ABAA", "ACAA", "ABCA"], "ABC", False),
        (["AAAA", "ABAA", "ACAA", "ABCA"], "abcabc", True),
    ],
)
def test_match_any_prefix_of_table(entries, target, want):
    trie = must(new_case_insensitive_trie, *entries)
    assert trie.match_any_prefix_of(target) is want


def test_empty_trie_empty_input():
    trie = must(new_case_insensitive_trie)
    assert trie.case_insensitive
    assert not trie.match_any("")
    assert not trie.match_any_prefix_of("")
    assert trie.match_prefix_of("") == (None, False)
    assert trie.longest_match_prefix_of("") == (None, False)


def test_alias_keys_share_one_node():
    trie = must(new_case_insensitive_trie, "ab")
    root = trie._root
    assert root.children["a"] is root.children["A"]
    child = root.children["a"]
    assert child.children["b"] is child.children["B"]
    assert child.children["B"].terminal == "ab"


def test_non_letters_are_not_aliased():
    trie = must(new_case_insensitive_trie, "a-1")
    node = trie._root.children["a"]
    assert set(node.children) == {"-"}


def test_unicode_case_mapping():
    trie = must(new_case_insensitive_trie, "Straße", "ÉCOLE")
    assert trie.match_any("école")
    assert trie.match_any("STRAßE")
    # "ß".upper() is "SS": two code points, so no alias edge
    assert not trie.match_any("STRASSE")


def test_case_counterpart():
    assert _case_counterpart("a") == "A"
    assert _case_counterpart("Ä") == "ä"
    assert _case_counterpart("1") is None
    assert _case_counterpart("ß") is None


def test_conflict_on_construction():
    with pytest.raises(EntryConflictError) as info:
        new_case_insensitive_trie("aA", "aa")
    assert info.value.existing == "aA"
    assert info.value.incoming == "aa"


def test_conflict_on_add():
    trie = must(new_case_insensitive_trie)
    with pytest.raises(EntryConflictError):
        trie.add("Aa", "aA")


def test_same_string_twice_is_not_a_conflict():
    trie = must(new_case_insensitive_trie, "Foo")
    trie.add("Foo")
    assert trie.longest_match_prefix_of("FOO") == ("Foo", True)


def test_failed_batch_keeps_earlier_entries():
    trie: Trie = must(new_case_insensitive_trie)
    with pytest.raises(EntryConflictError):
        trie.add("one", "Two", "two", "three")
    assert trie.match_any("one")
    assert trie.match_prefix_of("TWO") == ("Two", True)
    assert not trie.match_any("three")


def test_conflict_is_logged(caplog):
    caplog.set_level("DEBUG", logger="runetrie.core.trie")
    with pytest.raises(EntryConflictError):
        new_case_insensitive_trie("xY", "Xy")
    assert "conflict entry" in caplog.text
