import pytest

from cubekit.rgb import is_not_color, parse_rgb


@pytest.mark.parametrize(
    "parts",
    [["01"], [""], ["1a"], ["-1"], [" 12"], ["\u0661"], ["10", "00", "5"]],
)
def test_is_not_color_rejects(parts):
    assert is_not_color(parts) is True


@pytest.mark.parametrize("parts", [["0"], ["255", "0", "10"], [], ["7"]])
def test_is_not_color_accepts(parts):
    assert is_not_color(parts) is False


def test_parse_black():
    assert parse_rgb(["0", "0", "0"]) == 0


@pytest.mark.parametrize(
    "rgb", [(255, 255, 255), (1, 2, 3), (220, 100, 0), (0, 0, 255), (17, 0, 99)]
)
def test_parse_round_trip(rgb):
    value = parse_rgb([str(c) for c in rgb])
    assert (value >> 16, (value >> 8) & 0xFF, value & 0xFF) == rgb


@pytest.mark.parametrize(
    "parts",
    [
        ["1", "2"],
        ["1", "2", "3", "4"],
        ["256", "0", "0"],
        ["0", "300", "0"],
        ["0", "0", "1000"],
        ["01", "2", "3"],
        ["a", "2", "3"],
        ["", "2", "3"],
    ],
)
def test_parse_rejects(parts):
    with pytest.raises(ValueError):
        parse_rgb(parts)