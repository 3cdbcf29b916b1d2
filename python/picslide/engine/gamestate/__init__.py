from picslide.engine.gamestate.state import PuzzleState, PuzzleStatus

__all__ = ["PuzzleState", "PuzzleStatus"]
