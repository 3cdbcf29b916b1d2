#!/usr/bin/env python3
"""Picture Slide — sliding-tile puzzle in the terminal.

Usage::

    python main.py                # 4×4, resumes a saved game if any
    python main.py -s 3 --seed 7  # reproducible 3×3
    python main.py --history      # view completed games
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from picslide.engine.gameplay import GameSession  # noqa: E402
from picslide.frontend.cli import app as frontend  # noqa: E402
from picslide.models.history import HistoryStore  # noqa: E402

logger = logging.getLogger("picslide")

cli = typer.Typer(add_completion=False)


@cli.command()
def main(
    size: int = typer.Option(
        4, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Where the saved game and history live.",
    ),
    history: bool = typer.Option(
        False, "--history",
        help="Show completed games and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log moves and shuffles to stderr.",
    ),
) -> None:
    """Picture Slide."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    store = HistoryStore(data_dir / "picslide.json")

    if history:
        frontend.show_history(store)
        return

    rng = random.Random(seed) if seed is not None else None
    frontend.run(open_session(store, size, rng))


def open_session(
    store: HistoryStore, size: int, rng: Optional[random.Random] = None
) -> GameSession:
    """Resume the saved game for this grid size, or deal a new one."""
    contents = frontend.tile_labels(size)
    saved = store.load_current()
    if saved is not None and saved.grid == size:
        try:
            return GameSession.resume(
                saved, contents=contents, store=store, rng=rng
            )
        except ValueError as exc:
            logger.warning("Cannot resume game %s: %s", saved.game_id, exc)
            store.clear_current()
    return GameSession(size, contents=contents, store=store, rng=rng)


if __name__ == "__main__":
    cli()
