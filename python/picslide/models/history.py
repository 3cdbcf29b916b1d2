"""Saved-game and completed-game persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

STORE_VERSION = 1


@dataclass
class CompletedGame:
    finished_at: str
    grid: int
    time: float
    moves: int
    game_id: str = ""


@dataclass
class SavedGame:
    """Snapshot of a game in progress.

    ``board`` lists tile ids by slot (reading order).
    """

    game_id: str
    grid: int
    board: list[int]
    moves: int = 0
    time_elapsed: float = 0.0
    started: bool = False
    started_at: str = ""
    updated_at: str = ""


class HistoryStore:
    """Loads and saves the current game and completed games from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._current: SavedGame | None = None
        self._history: list[CompletedGame] = []
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
            if data.get("version") != STORE_VERSION:
                data = self._migrate(data)
            self._history = [CompletedGame(**e) for e in data.get("history", [])]
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.filepath, exc)
            self._current = None
            self._history = []
            return
        try:
            self._current = self._saved_game(data.get("current"))
        except (TypeError, ValueError) as exc:
            logger.warning("Discarding saved game in %s: %s", self.filepath, exc)
            self._current = None

    @staticmethod
    def _saved_game(current: dict | None) -> SavedGame | None:
        if not current:
            return None
        game = SavedGame(**current)
        grid = game.grid
        if isinstance(grid, bool) or not isinstance(grid, int) or grid < 2:
            raise ValueError(f"Saved grid size {grid!r} is invalid.")
        if sorted(game.board) != list(range(grid * grid)):
            raise ValueError(
                f"Saved board {game.board!r} is not a "
                f"{grid}×{grid} arrangement."
            )
        return game

    @staticmethod
    def _migrate(data: dict) -> dict:
        logger.info("Migrating store from version %r", data.get("version"))
        return {
            "version": STORE_VERSION,
            "current": data.get("current"),
            "history": data.get("history", []),
        }

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "version": STORE_VERSION,
            "current": asdict(self._current) if self._current else None,
            "history": [asdict(e) for e in self._history],
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- current game ---------------------------------------------------------

    def save_current(self, game: SavedGame) -> None:
        self._current = game
        self.save()

    def load_current(self) -> SavedGame | None:
        return self._current

    def clear_current(self) -> None:
        self._current = None
        self.save()

    # -- history --------------------------------------------------------------

    def add_completed(self, entry: CompletedGame) -> None:
        """Record a finished game (newest first) and drop the saved game."""
        self._history.insert(0, entry)
        self._current = None
        self.save()

    def history(self, grid: int | None = None) -> list[CompletedGame]:
        if grid is None:
            return list(self._history)
        return [e for e in self._history if e.grid == grid]

    def clear_history(self) -> None:
        self._history = []
        self.save()
