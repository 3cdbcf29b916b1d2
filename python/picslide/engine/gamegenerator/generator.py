"""Generates solvable shuffled puzzles."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import replace

from picslide.engine.gamesolver import Solver
from picslide.models.grid import check_grid_size
from picslide.models.tile import Tile

logger = logging.getLogger(__name__)

# Roughly half of all permutations are solvable, so hitting this means a bug.
MAX_SHUFFLE_ATTEMPTS = 1000


class GameGenerator:
    """Creates solvable, unsolved arrangements by rejection sampling."""

    @staticmethod
    def arrangement(grid_size: int, rng: random.Random | None = None) -> list[int]:
        """Return a random solvable arrangement that is not already solved."""
        check_grid_size(grid_size)
        rng = rng or random.Random()
        board = list(range(grid_size * grid_size))

        for attempt in range(1, MAX_SHUFFLE_ATTEMPTS + 1):
            rng.shuffle(board)
            if Solver.is_solvable(board, grid_size) and not Solver.is_solved(board):
                logger.debug(
                    "Shuffled %dx%d board after %d attempt(s)",
                    grid_size, grid_size, attempt,
                )
                return board

        raise AssertionError(
            f"No solvable {grid_size}×{grid_size} shuffle after "
            f"{MAX_SHUFFLE_ATTEMPTS} attempts."
        )

    @staticmethod
    def shuffle(
        tiles: Sequence[Tile], grid_size: int, rng: random.Random | None = None
    ) -> list[Tile]:
        """Return copies of *tiles* moved to a fresh solvable arrangement."""
        board = GameGenerator.arrangement(grid_size, rng)
        by_id = {t.id: t for t in tiles}
        return sorted(
            (replace(by_id[tile_id], current_position=slot)
             for slot, tile_id in enumerate(board)),
            key=lambda t: t.id,
        )
