from picslide.engine.gamegenerator.generator import MAX_SHUFFLE_ATTEMPTS, GameGenerator

__all__ = ["GameGenerator", "MAX_SHUFFLE_ATTEMPTS"]
