import pytest

from cubekit.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("deep sky", 0xBFFF),
        ("gray50", 0x7F7F7F),
        ("light green", 0x90EE90),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


@pytest.mark.parametrize("level", [0, 1, 25, 50, 99, 100])
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


@pytest.mark.parametrize("base", ["snow", "bisque", "azure", "gold", "red", "magenta"])
def test_first_variant_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_spaced_and_joined_names_agree():
    assert lookup_color("misty rose") == lookup_color("mistyrose")
    assert lookup_color("navy blue") == lookup_color("navyblue")


def test_non_ascii_case_not_folded():
    # Only ASCII letters fold; the Kelvin sign must not match "k".
    assert lookup_color("\u212ahaki") is None
    assert lookup_color("KHAKI") == 0xF0E68C