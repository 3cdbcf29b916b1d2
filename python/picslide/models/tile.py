"""Tile model for the picture puzzle."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from picslide.models.grid import check_grid_size


@dataclass
class Tile:
    """One piece of the picture.

    ``id`` and ``correct_position`` are fixed at creation (and equal);
    only ``current_position`` changes during play. ``content`` is opaque
    to the engine — an image fragment, a label, anything.
    """

    id: int
    current_position: int
    correct_position: int
    content: Any = None
    is_empty: bool = False

    @property
    def is_correct(self) -> bool:
        return self.current_position == self.correct_position


def make_tiles(grid_size: int, contents: Sequence[Any] | None = None) -> list[Tile]:
    """Return the solved tile set for a *grid_size*×*grid_size* puzzle.

    The last tile (``id == grid_size**2 - 1``) is the blank. *contents*,
    when given, supplies one entry per non-blank tile in reading order.

    Example::

        make_tiles(3, contents=[str(i) for i in range(1, 9)])
    """
    check_grid_size(grid_size)
    count = grid_size * grid_size
    if contents is not None and len(contents) != count - 1:
        raise ValueError(
            f"Expected {count - 1} tile contents for a {grid_size}×{grid_size} "
            f"puzzle, got {len(contents)}."
        )

    tiles: list[Tile] = []
    for i in range(count):
        blank = i == count - 1
        tiles.append(
            Tile(
                id=i,
                current_position=i,
                correct_position=i,
                content=None if blank or contents is None else contents[i],
                is_empty=blank,
            )
        )
    return tiles


def tiles_from_board(
    board: Sequence[int], contents: Sequence[Any] | None = None
) -> list[Tile]:
    """Return tiles placed per *board* (tile ids by slot, reading order).

    Example::

        tiles_from_board([0, 1, 2, 3, 4, 5, 6, 8, 7])  # blank one left of home
    """
    grid_size = math.isqrt(len(board))
    if grid_size * grid_size != len(board):
        raise ValueError(f"Board length {len(board)} is not a perfect square.")
    if sorted(board) != list(range(len(board))):
        raise ValueError(f"Board is not a permutation of 0..{len(board) - 1}.")
    tiles = make_tiles(grid_size, contents)
    for slot, tile_id in enumerate(board):
        tiles[tile_id].current_position = slot
    return tiles
