"""Tests for the jagged grid store."""

import pytest
from gridmark.model import Grid


def test_get_out_of_bounds_returns_empty_without_growing():
    grid = Grid([["a", "b"], ["c"]])

    assert grid.get(0, 5) == ""
    assert grid.get(7, 0) == ""
    assert grid.get(1, 1) == ""
    assert grid.rows == [["a", "b"], ["c"]]


def test_get_returns_cell_text():
    grid = Grid([["a", "b"], ["c"]])
    assert grid.get(0, 1) == "b"
    assert grid.get(1, 0) == "c"


def test_width_is_longest_row():
    assert Grid([["a"], ["b", "c", "d"], []]).width() == 3
    assert Grid().width() == 0


def test_height_counts_rows():
    assert Grid([["a"], [], ["b"]]).height() == 3
    assert Grid().height() == 0


def test_row_length():
    grid = Grid([["a", "b"], []])
    assert grid.row_length(0) == 2
    assert grid.row_length(1) == 0
    assert grid.row_length(5) == 0


def test_ensure_grows_rows_and_cells():
    """Growing to a far cell pads with empty rows and empty cells only."""
    grid = Grid([["a", "b"], ["c"]])

    grid.ensure(3, 2)

    assert grid.rows == [["a", "b"], ["c"], [], ["", "", ""]]


def test_ensure_only_pads_the_addressed_row():
    grid = Grid([["a"], ["b", "c", "d"]])

    grid.ensure(0, 1)

    assert grid.rows == [["a", ""], ["b", "c", "d"]]


def test_ensure_existing_cell_is_noop():
    grid = Grid([["a", "b"]])
    grid.ensure(0, 0)
    assert grid.rows == [["a", "b"]]


def test_set_replaces_exactly():
    grid = Grid([["a", "b"]])
    grid.set(0, 1, " spaced, text ")
    assert grid.rows == [["a", " spaced, text "]]


def test_set_requires_addressable_cell():
    grid = Grid([["a"]])
    with pytest.raises(IndexError):
        grid.set(0, 3, "x")

