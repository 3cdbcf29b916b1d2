"""Grid geometry for the sliding puzzle.

Slots are numbered in reading order: ``position = row * grid_size + col``.
All functions are pure; out-of-range input raises ``ValueError``.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Direction the *tile* moves (not the blank)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up
# DOWN → tile at (br-1, bc) moves down
# LEFT → tile at (br, bc+1) moves left
# RIGHT→ tile at (br, bc-1) moves right
_SOURCE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- validation ---------------------------------------------------------------


def check_grid_size(grid_size: int) -> None:
    if isinstance(grid_size, bool) or not isinstance(grid_size, int):
        raise ValueError(f"Grid size must be an int, got {grid_size!r}.")
    if grid_size < 2:
        raise ValueError(f"Grid size must be at least 2, got {grid_size}.")


def check_position(position: int, grid_size: int) -> None:
    """Raise ``ValueError`` unless *position* is a slot of the grid."""
    check_grid_size(grid_size)
    if isinstance(position, bool) or not isinstance(position, int):
        raise ValueError(f"Position must be an int, got {position!r}.")
    if not 0 <= position < grid_size * grid_size:
        raise ValueError(
            f"Position {position} is outside a {grid_size}×{grid_size} grid "
            f"(0..{grid_size * grid_size - 1})."
        )


# -- coordinates --------------------------------------------------------------


def to_row_col(position: int, grid_size: int) -> tuple[int, int]:
    check_position(position, grid_size)
    return divmod(position, grid_size)


def to_position(row: int, col: int, grid_size: int) -> int:
    check_grid_size(grid_size)
    if not (0 <= row < grid_size and 0 <= col < grid_size):
        raise ValueError(
            f"Cell ({row}, {col}) is outside a {grid_size}×{grid_size} grid."
        )
    return row * grid_size + col


# -- adjacency ----------------------------------------------------------------


def adjacent_positions(position: int, grid_size: int) -> list[int]:
    """Return the edge-sharing neighbours of *position*.

    Order is always up, down, left, right (missing ones skipped).
    """
    row, col = to_row_col(position, grid_size)
    neighbors: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = row + dr, col + dc
        if 0 <= nr < grid_size and 0 <= nc < grid_size:
            neighbors.append(nr * grid_size + nc)
    return neighbors


def is_adjacent(pos_a: int, pos_b: int, grid_size: int) -> bool:
    """True iff the two slots share an edge (diagonals do not count)."""
    ra, ca = to_row_col(pos_a, grid_size)
    rb, cb = to_row_col(pos_b, grid_size)
    return abs(ra - rb) + abs(ca - cb) == 1


def neighbor(position: int, direction: Direction, grid_size: int) -> int | None:
    """Return the slot whose tile slides into *position* moving *direction*.

    E.g. ``Direction.UP`` returns the slot **below** *position*.
    Returns ``None`` when that slot would fall off the grid.
    """
    row, col = to_row_col(position, grid_size)
    dr, dc = _SOURCE_OFFSETS[Direction(direction)]
    sr, sc = row + dr, col + dc
    if not (0 <= sr < grid_size and 0 <= sc < grid_size):
        return None
    return sr * grid_size + sc
