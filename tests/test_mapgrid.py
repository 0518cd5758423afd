import math

import pytest

from cubcaster.config import CubError
from cubcaster.mapgrid import (
    Player,
    border_line,
    check_invalid_characters,
    check_surrounding,
    element_exist,
    fill_spaces,
    find_player,
    is_invalid_border_char,
    validate_border,
    validate_map,
)


@pytest.mark.parametrize(
    "line, expected",
    [("1 0 1", True), ("10X01", False), ("X1111X", True), ("1", True)],
)
def test_border_line(line, expected):
    assert border_line(line) is expected


def test_element_exist():
    assert element_exist("  1  ", 3) is True
    assert element_exist("    1", 2) is False
    assert element_exist("N", 0) is True
    assert element_exist("111", 5) is False
    assert element_exist("111", -1) is False


def test_fill_spaces_example():
    assert fill_spaces(["1 1", "  1 "]) == ["111", "  11"]


def test_fill_spaces_invariants():
    rows = ["   1 0 1  ", "  N    ", "      "]
    result = fill_spaces(rows)
    for before, after in zip(rows, result):
        assert len(after) == len(before)
        leading = len(before) - len(before.lstrip(" "))
        assert after[:leading] == before[:leading]
        assert " " not in after.lstrip(" ")


@pytest.mark.parametrize("char, expected", [("1", False), (" ", False), ("0", True), ("N", True)])
def test_is_invalid_border_char(char, expected):
    assert is_invalid_border_char(char) is expected


def test_check_surrounding():
    rows = ["111", "101", "111"]
    assert check_surrounding(rows, 1, 1) is True
    assert check_surrounding(rows, 1, 0) is False
    assert check_surrounding(rows, 0, 1) is False
    assert check_surrounding(rows, 2, 1) is False
    assert check_surrounding(["111", "101", "1 1"], 1, 1) is False


def test_check_invalid_characters():
    check_invalid_characters(["1 0N"])
    with pytest.raises(CubError, match="Invalid character 'X' in map."):
        check_invalid_characters(["111", "1X1"])


def test_find_player_position():
    player = find_player(["111", "1N1", "111"])
    assert player == Player(pytest.approx(1.5), pytest.approx(2.5), pytest.approx(3 * (math.pi / 2)))


@pytest.mark.parametrize(
    "char, angle",
    [("N", 3 * (math.pi / 2)), ("S", math.pi / 2), ("E", 0.0), ("W", math.pi)],
)
def test_find_player_angle(char, angle):
    assert find_player(["111", f"1{char}1", "111"]).angle == pytest.approx(angle)


@pytest.mark.parametrize("rows", [["111", "101", "111"], ["111", "1NS1", "111"]])
def test_find_player_count(rows):
    with pytest.raises(CubError, match="Invalid player count in map."):
        find_player(rows)


def test_validate_map_builds_grid():
    grid = validate_map(["1111", "1N01", "1111"])
    assert grid.char_at(1, 2) == "N"
    assert grid.char_at(2, 2) == "0"
    assert grid.char_at(0, 1) == "1"
    assert grid.char_at(1, 0) == "1"
    assert grid.char_at(9, 2) == "1"
    assert grid.char_at(-1, 2) == "1"
    assert grid.player.y - 0.5 == 2


def test_validate_map_fills_interior_spaces():
    grid = validate_map(["11111", "1N 01", "11111"])
    assert " " not in grid.rows()[1]
    assert len(grid.rows()) == 3


def test_validate_map_open_edge():
    with pytest.raises(CubError, match="Invalid border at row 2, column 3."):
        validate_map(["111", "10N", "111"])


@pytest.mark.parametrize(
    "rows",
    [
        ["101", "1N1", "111"],
        ["111", "1N1", "101"],
        ["1111", "1N01", "11"],
    ],
)
def test_validate_map_rejects_open_maps(rows):
    with pytest.raises(CubError, match="Invalid border"):
        validate_map(rows)


def test_validate_map_rejects_empty():
    with pytest.raises(CubError, match="Map is not initialized."):
        validate_map([])


def test_validate_border_rejects_empty():
    with pytest.raises(CubError):
        validate_border([])