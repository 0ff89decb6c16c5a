import pytest

from cubkit.strings import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


class TestSplit:
    def test_drops_empty_pieces(self):
        assert split("  hello  world ", " ") == ["hello", "world"]

    def test_no_separator_gives_whole_text(self):
        assert split("hello", ",") == ["hello"]

    def test_only_separators_gives_nothing(self):
        assert split(",,,", ",") == []

    def test_empty_text(self):
        assert split("", ",") == []

    def test_joined_back_has_no_separator_runs(self):
        words = split("a,,b,c,,,d", ",")
        assert ",".join(words) == "a,b,c,d"

    def test_rejects_long_separator(self):
        with pytest.raises(ValueError):
            split("a b", "ab")


class TestStrchr:
    def test_first_occurrence(self):
        assert strchr("banana", "a") == 1

    def test_missing(self):
        assert strchr("banana", "z") is None

    def test_nul_finds_end(self):
        assert strchr("banana", "\0") == len("banana")

    def test_last_occurrence(self):
        assert strrchr("banana", "a") == len("banana") - 1

    def test_rchr_missing(self):
        assert strrchr("banana", "z") is None

    def test_rchr_nul_finds_end(self):
        assert strrchr("abc", "\0") == len("abc")

    def test_chr_and_rchr_agree_on_single(self):
        assert strchr("xyz", "y") == strrchr("xyz", "y")

    def test_rejects_multichar(self):
        with pytest.raises(ValueError):
            strchr("abc", "ab")


class TestStrnstr:
    def test_found_within_length(self):
        assert strnstr("hello world", "world", 11) == 6

    def test_needle_crossing_limit_not_found(self):
        assert strnstr("hello world", "world", 10) is None

    def test_empty_needle(self):
        assert strnstr("abc", "", 0) == 0

    def test_missing(self):
        assert strnstr("abc", "d", 3) is None

    def test_negative_length(self):
        with pytest.raises(ValueError):
            strnstr("abc", "a", -1)


class TestStrncmp:
    def test_equal(self):
        assert strncmp("abc", "abc", 3) == 0

    def test_difference_within_n(self):
        assert strncmp("abc", "abd", 3) == ord("c") - ord("d")

    def test_difference_beyond_n_ignored(self):
        assert strncmp("abc", "abd", 2) == 0

    def test_zero_n(self):
        assert strncmp("a", "b", 0) == 0

    def test_shorter_string_compares_lower(self):
        assert strncmp("ab", "abc", 5) < 0
        assert strncmp("abc", "ab", 5) > 0

    def test_antisymmetric(self):
        assert strncmp("apple", "apply", 5) == -strncmp("apply", "apple", 5)


class TestStrlcpy:
    def test_fits(self):
        assert strlcpy("hello", 10) == ("hello", 5)

    def test_truncates(self):
        copied, total = strlcpy("hello", 3)
        assert copied == "he"
        assert total == len("hello")

    def test_zero_size(self):
        assert strlcpy("hello", 0) == ("", 5)


class TestStrlcat:
    def test_fits(self):
        assert strlcat("foo", "bar", 10) == ("foobar", 6)

    def test_truncates(self):
        result, total = strlcat("foo", "bar", 5)
        assert result == "foo" + "b"
        assert total == len("foobar")

    def test_dst_fills_buffer(self):
        assert strlcat("foobar", "baz", 4) == ("foobar", 4 + len("baz"))

    def test_result_never_exceeds_buffer(self):
        for size in range(1, 12):
            result, _ = strlcat("abc", "defgh", size)
            assert len(result) <= max(size - 1, len("abc"))


class TestJoinTrimSub:
    def test_join(self):
        assert strjoin("foo", "bar") == "foobar"

    def test_join_empty(self):
        assert strjoin("", "x") == "x"

    def test_trim(self):
        assert strtrim("xxhixyx", "xy") == "hi"

    def test_trim_everything(self):
        assert strtrim("aaaa", "a") == ""

    def test_trim_empty_set(self):
        assert strtrim("  a  ", "") == "  a  "

    def test_substr(self):
        assert substr("hello world", 6, 5) == "world"

    def test_substr_past_end(self):
        assert substr("abc", 10, 2) == ""

    def test_substr_length_clipped(self):
        assert substr("abc", 1, 100) == "bc"

    def test_substr_negative_start(self):
        with pytest.raises(ValueError):
            substr("abc", -1, 2)


class TestStrmapi:
    def test_upper(self):
        assert strmapi("abc", lambda i, c: c.upper()) == "ABC"

    def test_index_passed(self):
        seen = []
        strmapi("xyz", lambda i, c: seen.append(i) or c)
        assert seen == [0, 1, 2]

    def test_identity_round_trip(self):
        assert strmapi("hello", lambda i, c: c) == "hello"

    def test_empty(self):
        assert strmapi("", lambda i, c: "z") == ""