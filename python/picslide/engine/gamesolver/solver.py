"""Solvability checks for sliding puzzle arrangements.

An *arrangement* lists, for each slot in reading order, the id of the tile
occupying it. Tile ``grid_size**2 - 1`` is always the blank.
"""

from __future__ import annotations

from collections.abc import Sequence


class Solver:
    """Stateless checker — all methods are static."""

    @staticmethod
    def check_arrangement(arrangement: Sequence[int], grid_size: int) -> None:
        count = grid_size * grid_size
        if len(arrangement) != count:
            raise ValueError(
                f"Expected {count} slots for a {grid_size}×{grid_size} grid, "
                f"got {len(arrangement)}."
            )
        if sorted(arrangement) != list(range(count)):
            raise ValueError(
                f"Arrangement is not a permutation of 0..{count - 1}: "
                f"{list(arrangement)}"
            )

    @staticmethod
    def count_inversions(arrangement: Sequence[int], blank_id: int) -> int:
        """Count out-of-order pairs, ignoring the blank."""
        values = [v for v in arrangement if v != blank_id]
        inversions = 0
        for i in range(len(values) - 1):
            for j in range(i + 1, len(values)):
                if values[i] > values[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(arrangement: Sequence[int], grid_size: int) -> bool:
        """Return True if *arrangement* can reach the solved state.

        Odd grids: the inversion count must be even. Even grids: every
        vertical blank move flips inversion parity, so the inversion count
        plus the number of rows the blank sits above the bottom row must
        be even.
        """
        Solver.check_arrangement(arrangement, grid_size)
        blank_id = grid_size * grid_size - 1
        inversions = Solver.count_inversions(arrangement, blank_id)

        if grid_size % 2 == 1:
            return inversions % 2 == 0

        blank_row_from_bottom = grid_size - arrangement.index(blank_id) // grid_size
        return (inversions + blank_row_from_bottom - 1) % 2 == 0

    @staticmethod
    def is_solved(arrangement: Sequence[int]) -> bool:
        return all(tile_id == slot for slot, tile_id in enumerate(arrangement))
