import pytest

from cubekit.map_check import (
    MapError,
    check_borders,
    check_file,
    check_inside,
    check_map,
    extreme_line_open,
    has_abnormalities,
    invalid,
    middle_line_open,
    not_closed,
    not_solo,
)

SMALL = ["1111\n", "1N01\n", "1111\n"]
WIDE = ["111111\n", "100N01\n", "111111"]


def test_closed_maps_pass_every_check():
    for grid in (SMALL, WIDE):
        assert has_abnormalities(grid) is False
        assert not_closed(grid) is False
        assert not_solo(grid) is False


def test_check_map_accepts_closed_map():
    check_map(SMALL)
    assert not_closed(SMALL) is False


def test_open_right_edge():
    grid = ["1111\n", "1N00\n", "1111\n"]
    assert middle_line_open(grid, 1) is True
    assert not_closed(grid) is True


def test_open_top_row():
    assert extreme_line_open("1101\n") is True
    assert extreme_line_open("1111\n") is False
    assert not_closed(["1101\n", "1N01\n", "1111\n"]) is True


def test_space_next_to_floor_is_open():
    grid = ["111111\n", "10 N01\n", "111111\n"]
    assert check_borders(grid, 1, 1) is True
    assert not_closed(grid) is True


def test_floor_at_row_start_is_open():
    grid = ["1111\n", "0N11\n", "1111\n"]
    assert middle_line_open(grid, 1) is True


def test_empty_middle_row_is_open():
    grid = ["1111\n", "\n", "1111\n"]
    assert middle_line_open(grid, 1) is True


def test_check_inside_interior_cell():
    assert check_inside(WIDE, 1, 2) is False
    assert check_inside(["111111\n", "10N0 1\n", "111111\n"], 1, 3) is True


def test_invalid():
    assert invalid("1", True) is False
    assert invalid("0", True) is True
    assert invalid("N", False) is False
    assert invalid(" ", False) is True
    assert invalid("\n", False) is True


def test_abnormalities():
    assert has_abnormalities(["1111\n", "1X01\n"]) is True
    assert has_abnormalities(["1111\n", ""]) is True
    assert has_abnormalities(["1 1\t1\n"]) is False


def test_not_solo_counts_players():
    assert not_solo(["1111\n", "1NS1\n", "1111\n"]) is True
    assert not_solo(["1111\n", "1001\n", "1111\n"]) is True


@pytest.mark.parametrize(
    "grid",
    [
        ["1111\n", "1Q01\n", "1111\n"],
        ["1111\n", "1N00\n", "1111\n"],
        ["111111\n", "1NS001\n", "111111\n"],
    ],
)
def test_check_map_rejects(grid):
    with pytest.raises(MapError):
        check_map(grid)


def test_check_file():
    assert check_file("maps/level.cub") == "maps/level.cub"
    with pytest.raises(MapError):
        check_file("maps/level.cube")
    with pytest.raises(MapError):
        check_file("cub")