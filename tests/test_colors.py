import pytest

from cubkit.colors import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_case_is_ignored():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_spaced_and_joined_spellings_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("midnight blue") == lookup_color("midnightblue")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_match(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_grey_extremes():
    assert lookup_color("grey0") == lookup_color("black")
    assert lookup_color("grey100") == lookup_color("white")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_all_values_in_range():
    assert all(-1 <= value <= 0xFFFFFF for value in COLOR_NAMES.values())


def test_every_table_key_looks_up_in_any_case():
    for key, value in COLOR_NAMES.items():
        assert key == key.lower()
        assert lookup_color(key.upper()) == value


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xFFFAFA