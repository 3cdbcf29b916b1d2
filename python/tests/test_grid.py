"""Grid geometry tests."""

from __future__ import annotations

import pytest

from picslide.models.grid import (
    Direction,
    adjacent_positions,
    is_adjacent,
    neighbor,
    to_position,
    to_row_col,
)

SIZES = [2, 3, 4, 5]


def _corners(n: int) -> set[int]:
    return {0, n - 1, n * (n - 1), n * n - 1}


def _on_edge(pos: int, n: int) -> bool:
    r, c = divmod(pos, n)
    return r in (0, n - 1) or c in (0, n - 1)


# -- coordinates --------------------------------------------------------------


@pytest.mark.parametrize("size", SIZES)
def test_row_col_round_trip(size: int) -> None:
    for pos in range(size * size):
        r, c = to_row_col(pos, size)
        assert (r, c) == (pos // size, pos % size)
        assert to_position(r, c, size) == pos


def test_out_of_range_positions_raise() -> None:
    with pytest.raises(ValueError):
        to_row_col(9, 3)
    with pytest.raises(ValueError):
        to_row_col(-1, 3)
    with pytest.raises(ValueError):
        to_position(3, 0, 3)
    with pytest.raises(ValueError):
        is_adjacent(0, 16, 4)


def test_bad_grid_size_raises() -> None:
    with pytest.raises(ValueError):
        adjacent_positions(0, 1)


# -- adjacency ----------------------------------------------------------------


@pytest.mark.parametrize("size", SIZES)
def test_adjacency_is_symmetric(size: int) -> None:
    for a in range(size * size):
        for b in range(size * size):
            assert is_adjacent(a, b, size) == is_adjacent(b, a, size)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_adjacency_counts(size: int) -> None:
    for pos in range(size * size):
        count = len(adjacent_positions(pos, size))
        if pos in _corners(size):
            assert count == 2
        elif _on_edge(pos, size):
            assert count == 3
        else:
            assert count == 4


@pytest.mark.parametrize("size", SIZES)
def test_adjacent_positions_agree_with_is_adjacent(size: int) -> None:
    for a in range(size * size):
        expected = [b for b in range(size * size) if is_adjacent(a, b, size)]
        assert sorted(adjacent_positions(a, size)) == expected


def test_adjacent_positions_order_is_up_down_left_right() -> None:
    assert adjacent_positions(4, 3) == [1, 7, 3, 5]
    assert adjacent_positions(0, 3) == [3, 1]


def test_no_wrap_or_diagonal_adjacency() -> None:
    assert is_adjacent(0, 1, 3)
    assert is_adjacent(0, 3, 3)
    assert not is_adjacent(0, 2, 3)
    assert not is_adjacent(0, 4, 3)  # diagonal
    assert not is_adjacent(2, 3, 3)  # row wrap
    assert not is_adjacent(5, 6, 3)
    assert not is_adjacent(4, 4, 3)


# -- directional lookup -------------------------------------------------------


def test_neighbor_returns_the_tile_that_slides_in() -> None:
    assert neighbor(4, Direction.UP, 3) == 7
    assert neighbor(4, Direction.DOWN, 3) == 1
    assert neighbor(4, Direction.LEFT, 3) == 5
    assert neighbor(4, Direction.RIGHT, 3) == 3


def test_neighbor_off_the_edge_is_none() -> None:
    assert neighbor(0, Direction.DOWN, 3) is None
    assert neighbor(0, Direction.RIGHT, 3) is None
    assert neighbor(8, Direction.UP, 3) is None
    assert neighbor(8, Direction.LEFT, 3) is None
    assert neighbor(2, Direction.LEFT, 3) is None
