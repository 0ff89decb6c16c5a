import pytest

from cubkit.wordtab import find, find_unquoted, split_words


def test_find_locates_needle():
    text = "hello world"
    pos = find(text, "world", len(text))
    assert text[pos:pos + 5] == "world"


def test_find_returns_first_occurrence():
    text = "abcabc"
    assert find(text, "bc", len(text)) == text.index("bc")


def test_find_missing():
    assert find("abcdef", "xy", 6) == -1


def test_find_needle_longer_than_limit():
    assert find("abcdef", "cd", 1) == -1


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 5) == -1


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = '"ab" ab'
    assert find(text, "ab", len(text)) == text.index("ab")
    assert find_unquoted(text, "ab", len(text)) == text.rindex("ab")


def test_find_unquoted_all_quoted():
    text = '"ab"'
    assert find_unquoted(text, "ab", len(text)) == -1


def test_find_unquoted_respects_limit():
    assert find_unquoted("xx ab", "ab", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []