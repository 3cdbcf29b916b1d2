"""Terminal frontend helpers."""

from __future__ import annotations

import pytest
from rich.console import Console

from picslide.engine.gamestate import PuzzleState
from picslide.frontend.cli.app import render_board, render_history, tile_labels
from picslide.frontend.cli.input_handler import decode, resolve
from picslide.models.history import CompletedGame
from picslide.models.tile import make_tiles


def _text(renderable) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_keys_map_to_actions() -> None:
    assert resolve("w") == "ArrowUp"
    assert resolve("D") == "ArrowRight"
    assert resolve(" ") == "click"
    assert resolve("q") == "quit"
    assert resolve("x") == "x"
    assert resolve("\x07") == ""


def test_board_shows_labels_and_blank() -> None:
    state = PuzzleState(make_tiles(3, tile_labels(3)))
    table = render_board(state, cursor=0)
    assert table.row_count == 3
    text = _text(table)
    for label in tile_labels(3):
        assert label in text
    assert "·" in text


def test_history_table_lists_games() -> None:
    entries = [CompletedGame("2026-01-01T10:00:00", 4, 75.0, 120, "a")]
    text = _text(render_history(entries))
    assert "4×4" in text
    assert "120" in text
    assert "01:15" in text


def _feed(*chars: str):
    pending = list(chars)
    return lambda: pending.pop(0) if pending else None


@pytest.mark.parametrize(
    ("first", "rest", "action"),
    [
        ("\x1b", ("[", "A"), "ArrowUp"),
        ("\x1b", ("[", "D"), "ArrowLeft"),
        ("\x1b", ("[", "Z"), ""),
        ("\x1b", ("[",), ""),
        ("\x1b", (), "quit"),
        ("\xe0", ("H",), "ArrowUp"),
        ("\x00", ("M",), "ArrowRight"),
        ("\xe0", (), ""),
        ("k", (), "cursor-down"),
    ],
)
def test_key_sequences_decode_to_actions(
    first: str, rest: tuple[str, ...], action: str
) -> None:
    assert decode(first, _feed(*rest)) == action
