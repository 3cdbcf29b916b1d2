from picslide.models.grid import Direction
from picslide.models.history import CompletedGame, HistoryStore, SavedGame
from picslide.models.tile import Tile, make_tiles, tiles_from_board

__all__ = [
    "CompletedGame",
    "Direction",
    "HistoryStore",
    "SavedGame",
    "Tile",
    "make_tiles",
    "tiles_from_board",
]
