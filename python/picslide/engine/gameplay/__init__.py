from picslide.engine.gameplay.controls import click, drag, press
from picslide.engine.gameplay.game import GameSession, Stopwatch

__all__ = ["GameSession", "Stopwatch", "click", "drag", "press"]
