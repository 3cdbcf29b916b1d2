"""Input adapters: turn clicks, key presses and drags into moves.

Each adapter issues at most one command against a ``PuzzleState`` and
returns whether a move was applied.
"""

from __future__ import annotations

from picslide.engine.gamestate import PuzzleState
from picslide.models.grid import Direction, check_position, is_adjacent, neighbor

# Browser-style key names → direction the tile moves.
_KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def click(state: PuzzleState, position: int) -> bool:
    """Slide the clicked tile into the blank, or toggle its selection."""
    blank = state.blank_position
    if is_adjacent(position, blank, state.grid_size):
        return state.attempt_move(position, blank)
    state.select_tile(position)
    return False


def press(state: PuzzleState, key: str | Direction) -> bool:
    """Slide a tile into the blank in the pressed direction.

    ``ArrowUp`` moves the tile *below* the blank upward. Unknown keys and
    presses toward the grid edge do nothing.
    """
    direction = _KEY_DIRECTIONS.get(key)
    if direction is None:
        return False
    blank = state.blank_position
    source = neighbor(blank, direction, state.grid_size)
    if source is None:
        return False
    return state.attempt_move(source, blank)


def drag(state: PuzzleState, start: int, end: int) -> bool:
    """Apply a drag from one slot to another; dropping in place is a no-op."""
    check_position(start, state.grid_size)
    check_position(end, state.grid_size)
    if start == end:
        return False
    return state.attempt_move(start, end)
