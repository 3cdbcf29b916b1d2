"""Shuffle generator tests."""

from __future__ import annotations

import random

import pytest

from picslide.engine.gamegenerator import GameGenerator
from picslide.engine.gamesolver import Solver
from picslide.models.tile import make_tiles


@pytest.mark.parametrize("size", [3, 4, 5])
def test_shuffles_are_solvable_and_unsolved(size: int) -> None:
    rng = random.Random(size)
    solved = list(range(size * size))
    for _ in range(1000):
        board = GameGenerator.arrangement(size, rng)
        assert sorted(board) == solved
        assert board != solved
        assert Solver.is_solvable(board, size)


def test_2x2_shuffle_never_returns_solved() -> None:
    rng = random.Random(0)
    for _ in range(200):
        board = GameGenerator.arrangement(2, rng)
        assert board != [0, 1, 2, 3]
        assert Solver.is_solvable(board, 2)


def test_seeded_shuffles_repeat() -> None:
    a = GameGenerator.arrangement(4, random.Random(42))
    b = GameGenerator.arrangement(4, random.Random(42))
    assert a == b


def test_shuffle_keeps_identity_and_content() -> None:
    labels = [chr(ord("a") + i) for i in range(8)]
    tiles = make_tiles(3, labels)
    shuffled = GameGenerator.shuffle(tiles, 3, random.Random(1))

    assert [t.id for t in shuffled] == list(range(9))
    assert [t.content for t in shuffled] == labels + [None]
    assert [t.correct_position for t in shuffled] == list(range(9))
    assert shuffled[-1].is_empty
    assert sorted(t.current_position for t in shuffled) == list(range(9))
    # The input tiles are left alone.
    assert [t.current_position for t in tiles] == list(range(9))


def test_retry_cap_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Solver, "is_solvable", staticmethod(lambda board, size: False))
    with pytest.raises(AssertionError):
        GameGenerator.arrangement(3, random.Random(0))
