"""Input adapter tests: keyboard, click and drag."""

from __future__ import annotations

import pytest

from picslide.engine.gameplay import click, drag, press
from picslide.engine.gamestate import PuzzleState
from picslide.models.grid import Direction
from picslide.models.tile import make_tiles, tiles_from_board

# 3×3, blank (tile 8) in the centre.
CENTRE = [0, 1, 2, 3, 8, 5, 6, 7, 4]
# 3×3, blank in the top-left corner.
CORNER = [8, 1, 2, 3, 4, 5, 6, 7, 0]
SOLVED = list(range(9))


def _state(board: list[int]) -> PuzzleState:
    return PuzzleState(tiles_from_board(board))


# -- keyboard -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("key", "source"),
    [("ArrowUp", 7), ("ArrowDown", 1), ("ArrowLeft", 5), ("ArrowRight", 3)],
)
def test_arrow_keys_slide_the_opposite_neighbour(key: str, source: int) -> None:
    state = _state(CENTRE)
    tile_id = CENTRE[source]
    assert press(state, key)
    assert state.board[4] == tile_id
    assert state.blank_position == source
    assert state.move_count == 1


def test_directions_and_plain_names_work_too() -> None:
    state = _state(CENTRE)
    assert press(state, Direction.UP)
    assert state.blank_position == 7
    assert press(state, "down")
    assert state.blank_position == 4


# An arrow only does nothing when no tile sits on the far side of the blank:
# from the top-left corner that is Down/Right, from the bottom-right Up/Left
# (see "Keyboard boundary example" in DESIGN.md).
@pytest.mark.parametrize(
    ("board", "key"),
    [
        (CORNER, "ArrowDown"),
        (CORNER, "ArrowRight"),
        (SOLVED, "ArrowUp"),
        (SOLVED, "ArrowLeft"),
    ],
)
def test_arrow_with_nothing_to_slide_does_nothing(board: list[int], key: str) -> None:
    state = _state(board)
    assert not press(state, key)
    assert state.board == board
    assert state.move_count == 0


def test_arrow_up_from_top_corner_pulls_the_tile_below() -> None:
    state = _state(CORNER)
    assert press(state, "ArrowUp")
    assert state.blank_position == 3
    assert state.board[0] == 3


def test_unknown_keys_are_ignored() -> None:
    state = _state(CENTRE)
    assert not press(state, "Space")
    assert not press(state, "Enter")
    assert state.move_count == 0


# -- click --------------------------------------------------------------------


def test_click_next_to_blank_moves() -> None:
    state = _state(CENTRE)
    assert click(state, 1)
    assert state.blank_position == 1
    assert state.board[4] == 1
    assert state.selected_position is None


def test_click_elsewhere_toggles_selection() -> None:
    state = _state(CENTRE)
    assert not click(state, 0)
    assert state.selected_position == 0
    assert state.move_count == 0
    assert not click(state, 0)
    assert state.selected_position is None


def test_click_on_blank_selects_it() -> None:
    state = _state(CENTRE)
    assert not click(state, 4)
    assert state.selected_position == 4
    assert state.board == CENTRE


# -- drag ---------------------------------------------------------------------


def test_drag_into_blank_moves() -> None:
    state = PuzzleState(make_tiles(3))
    assert drag(state, 7, 8)
    assert state.blank_position == 7


def test_drag_out_of_blank_moves() -> None:
    state = PuzzleState(make_tiles(3))
    assert drag(state, 8, 5)
    assert state.blank_position == 5


def test_illegal_drags_are_rejected() -> None:
    state = PuzzleState(make_tiles(3))
    assert not drag(state, 0, 1)
    assert not drag(state, 6, 8)
    assert not drag(state, 8, 8)
    assert state.move_count == 0
    assert state.board == list(range(9))


@pytest.mark.parametrize(("start", "end"), [(99, 99), (-1, -1), (8, 9), (9, 8)])
def test_drag_outside_the_grid_raises(start: int, end: int) -> None:
    state = PuzzleState(make_tiles(3))
    with pytest.raises(ValueError):
        drag(state, start, end)
    assert state.move_count == 0
