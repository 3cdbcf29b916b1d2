"""Tracks the live tile arrangement of a puzzle and applies moves."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Sequence
from dataclasses import replace
from enum import StrEnum

from picslide.engine.gamegenerator import GameGenerator
from picslide.models.grid import check_grid_size, check_position, is_adjacent
from picslide.models.tile import Tile

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class PuzzleStatus(StrEnum):
    UNSHUFFLED = "unshuffled"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


class PuzzleState:
    """Holds the tiles, move counter and selection for one puzzle.

    ``tiles`` is always ordered by tile id; ``board`` gives the same tiles
    by slot. Illegal moves are rejected (``attempt_move`` returns False);
    malformed input raises ``ValueError``.

    *on_first_move* fires on the first accepted move after construction,
    ``shuffle`` or ``reset``. *on_solved* fires on every accepted move that
    leaves the puzzle solved.
    """

    def __init__(
        self,
        tiles: Sequence[Tile],
        grid_size: int | None = None,
        *,
        on_first_move: Callback | None = None,
        on_solved: Callback | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if grid_size is None:
            grid_size = math.isqrt(len(tiles))
            if grid_size * grid_size != len(tiles):
                raise ValueError(
                    f"Tile count {len(tiles)} is not a perfect square."
                )
        check_grid_size(grid_size)
        self.grid_size = grid_size
        self.on_first_move = on_first_move
        self.on_solved = on_solved
        self._rng = rng

        self._tiles: list[Tile] = []
        self._slots: list[Tile] = []
        self._load(tiles)
        self._baseline = self._copy_tiles()
        self._moves = 0
        self._selected: int | None = None
        self._armed = True
        self._dealt = not self.is_solved

    # -- loading --------------------------------------------------------------

    def _load(self, tiles: Sequence[Tile]) -> None:
        count = self.grid_size * self.grid_size
        if len(tiles) != count:
            raise ValueError(
                f"Expected {count} tiles for a {self.grid_size}×{self.grid_size} "
                f"puzzle, got {len(tiles)}."
            )
        ordered = sorted((replace(t) for t in tiles), key=lambda t: t.id)
        if [t.id for t in ordered] != list(range(count)):
            raise ValueError(f"Tile ids must be 0..{count - 1}.")
        for t in ordered:
            if t.correct_position != t.id:
                raise ValueError(
                    f"Tile {t.id} has correct_position {t.correct_position}."
                )

        blanks = [t.id for t in ordered if t.is_empty]
        if len(blanks) != 1:
            raise ValueError(f"Expected exactly one blank tile, got {len(blanks)}.")
        if blanks[0] != count - 1:
            raise ValueError(f"The blank must be tile {count - 1}, got {blanks[0]}.")

        slots: list[Tile | None] = [None] * count
        for t in ordered:
            check_position(t.current_position, self.grid_size)
            if slots[t.current_position] is not None:
                raise ValueError(
                    f"Two tiles share position {t.current_position}."
                )
            slots[t.current_position] = t

        self._tiles = ordered
        self._slots = slots  # type: ignore[assignment]

    def _copy_tiles(self) -> list[Tile]:
        return [replace(t) for t in self._tiles]

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> list[Tile]:
        """Copies of the tiles, ordered by id."""
        return self._copy_tiles()

    @property
    def board(self) -> list[int]:
        """Tile ids by slot, in reading order."""
        return [t.id for t in self._slots]

    @property
    def move_count(self) -> int:
        return self._moves

    @property
    def is_solved(self) -> bool:
        return all(t.is_correct for t in self._tiles)

    @property
    def blank_position(self) -> int:
        return self._tiles[-1].current_position

    @property
    def selected_position(self) -> int | None:
        return self._selected

    @property
    def status(self) -> PuzzleStatus:
        if not self.is_solved:
            return PuzzleStatus.IN_PROGRESS
        return PuzzleStatus.SOLVED if self._dealt else PuzzleStatus.UNSHUFFLED

    def tile_at(self, position: int) -> Tile:
        check_position(position, self.grid_size)
        return replace(self._slots[position])

    # -- moves ----------------------------------------------------------------

    def can_swap(self, pos_a: int, pos_b: int) -> bool:
        return is_adjacent(pos_a, pos_b, self.grid_size)

    def attempt_move(self, from_position: int, to_position: int) -> bool:
        """Swap the tiles at two slots if one is the blank and they touch.

        Returns False (state untouched) for an illegal move.
        """
        if not self.can_swap(from_position, to_position):
            logger.debug("Rejected %d -> %d: not adjacent", from_position, to_position)
            return False

        a = self._slots[from_position]
        b = self._slots[to_position]
        if a.is_empty == b.is_empty:
            logger.debug("Rejected %d -> %d: no blank", from_position, to_position)
            return False

        a.current_position, b.current_position = to_position, from_position
        self._slots[from_position], self._slots[to_position] = b, a
        self._moves += 1
        self._selected = None
        self._dealt = True
        logger.debug(
            "Moved %d -> %d (move %d)", from_position, to_position, self._moves
        )

        if self._armed:
            self._armed = False
            if self.on_first_move is not None:
                self.on_first_move()

        if self.is_solved:
            logger.info("Puzzle solved in %d moves", self._moves)
            if self.on_solved is not None:
                self.on_solved()
        return True

    def select_tile(self, position: int) -> None:
        """Toggle the selection marker on *position*."""
        check_position(position, self.grid_size)
        self._selected = None if self._selected == position else position

    # -- lifecycle ------------------------------------------------------------

    def shuffle(self) -> None:
        """Deal a new solvable arrangement and make it the reset baseline."""
        self._load(GameGenerator.shuffle(self._tiles, self.grid_size, self._rng))
        self._baseline = self._copy_tiles()
        self._restart()
        self._dealt = True
        logger.info("Shuffled %dx%d puzzle", self.grid_size, self.grid_size)

    def reset(self, tiles: Sequence[Tile] | None = None) -> None:
        """Restore *tiles* (or the last shuffle) and zero the move count."""
        if tiles is not None:
            self._load(tiles)
            self._baseline = self._copy_tiles()
        else:
            self._load(self._baseline)
        self._restart()
        self._dealt = not self.is_solved

    def restore(
        self, tiles: Sequence[Tile], move_count: int = 0, started: bool = False
    ) -> None:
        """Load a saved game; it also becomes the reset baseline.

        A *started* game does not fire ``on_first_move`` again.
        """
        if move_count < 0:
            raise ValueError(f"Move count must be non-negative, got {move_count}.")
        self.reset(tiles)
        self._moves = move_count
        self._armed = not started
        self._dealt = self._dealt or move_count > 0

    def _restart(self) -> None:
        self._moves = 0
        self._selected = None
        self._armed = True

    def __repr__(self) -> str:
        return (
            f"PuzzleState(grid_size={self.grid_size}, board={self.board}, "
            f"moves={self._moves})"
        )
