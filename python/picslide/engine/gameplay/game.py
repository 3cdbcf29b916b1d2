"""Game session — wires a puzzle to its clock and its history store."""

from __future__ import annotations

import logging
import random
import time
import uuid
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from picslide.engine.gameplay import controls
from picslide.engine.gamestate import PuzzleState
from picslide.models.grid import Direction
from picslide.models.history import CompletedGame, HistoryStore, SavedGame
from picslide.models.tile import make_tiles, tiles_from_board

logger = logging.getLogger(__name__)


class Stopwatch:
    """Pausable elapsed-time counter. Starts stopped."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start_time: float = 0.0
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    def start(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def reset(self, elapsed: float = 0.0) -> None:
        self._elapsed_banked = elapsed
        self._running = False


class GameSession:
    """Orchestrates a single puzzle: moves, timing and completion records."""

    def __init__(
        self,
        grid_size: int,
        *,
        contents: Sequence[Any] | None = None,
        store: HistoryStore | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        deal: bool = True,
    ) -> None:
        self.store = store
        self.timer = Stopwatch(clock)
        self.game_id = uuid.uuid4().hex
        self.started_at = datetime.now().isoformat(timespec="seconds")
        self.completed: CompletedGame | None = None
        self.puzzle = PuzzleState(
            make_tiles(grid_size, contents),
            grid_size,
            on_first_move=self.timer.start,
            on_solved=self._on_solved,
            rng=rng,
        )
        if deal:
            self.puzzle.shuffle()
            logger.info("New %dx%d game %s", grid_size, grid_size, self.game_id)

    @classmethod
    def resume(
        cls,
        saved: SavedGame,
        *,
        contents: Sequence[Any] | None = None,
        store: HistoryStore | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> GameSession:
        """Rebuild a session from a saved snapshot without dealing a new board.

        Raises ``ValueError`` when the snapshot does not describe a valid
        arrangement for its grid.
        """
        session = cls(
            saved.grid, contents=contents, store=store, rng=rng, clock=clock,
            deal=False,
        )
        session.puzzle.restore(
            tiles_from_board(saved.board, contents), saved.moves, saved.started
        )
        session.game_id = saved.game_id
        session.started_at = saved.started_at or session.started_at
        session.timer.reset(saved.time_elapsed)
        if saved.started and not session.puzzle.is_solved:
            session.timer.start()
        logger.info("Resumed %dx%d game %s", saved.grid, saved.grid, saved.game_id)
        return session

    # -- queries --------------------------------------------------------------

    @property
    def grid_size(self) -> int:
        return self.puzzle.grid_size

    @property
    def moves(self) -> int:
        return self.puzzle.move_count

    @property
    def is_won(self) -> bool:
        return self.puzzle.is_solved

    # -- input ----------------------------------------------------------------

    def click(self, position: int) -> bool:
        return controls.click(self.puzzle, position)

    def press(self, key: str | Direction) -> bool:
        return controls.press(self.puzzle, key)

    def drag(self, start: int, end: int) -> bool:
        return controls.drag(self.puzzle, start, end)

    # -- lifecycle ------------------------------------------------------------

    def new_game(self) -> None:
        """Reshuffle the same tiles and start over."""
        self.puzzle.shuffle()
        self.timer.reset()
        self.completed = None
        self.game_id = uuid.uuid4().hex
        self.started_at = datetime.now().isoformat(timespec="seconds")

    def restart(self) -> None:
        """Return to the last shuffle with a fresh clock."""
        self.puzzle.reset()
        self.timer.reset()
        self.completed = None

    def snapshot(self) -> SavedGame:
        return SavedGame(
            game_id=self.game_id,
            grid=self.grid_size,
            board=self.puzzle.board,
            moves=self.moves,
            time_elapsed=self.timer.elapsed,
            started=self.timer.running or self.moves > 0,
            started_at=self.started_at,
            updated_at=datetime.now().isoformat(timespec="seconds"),
        )

    def save(self) -> None:
        if self.store is not None and not self.is_won:
            self.store.save_current(self.snapshot())

    # -- notifications --------------------------------------------------------

    def _on_solved(self) -> None:
        self.timer.pause()
        self.completed = CompletedGame(
            finished_at=datetime.now().isoformat(timespec="seconds"),
            grid=self.grid_size,
            time=round(self.timer.elapsed, 1),
            moves=self.moves,
            game_id=self.game_id,
        )
        if self.store is not None:
            self.store.add_completed(self.completed)
