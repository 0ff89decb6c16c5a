import string

import pytest

from cubkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


def test_ascii_range_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_boundaries():
    assert is_print(31) is False
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False


def test_printable_set_matches_letters_digits_punctuation_and_space():
    printable = {ch for ch in ASCII if is_print(ch)}
    expected = set(string.ascii_letters + string.digits + string.punctuation + " ")
    assert printable == expected


def test_int_and_str_arguments_agree():
    for ch in ASCII:
        assert is_alnum(ch) == is_alnum(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


@pytest.mark.parametrize(
    "lower, upper", list(zip(string.ascii_lowercase, string.ascii_uppercase))
)
def test_case_conversion_pairs(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(ord(lower)) == ord(upper)
    assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", [c for c in ASCII if c not in string.ascii_letters])
def test_non_letters_are_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_non_ascii_codes_are_unchanged():
    assert to_upper(200) == 200
    assert to_lower(-5) == -5


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")