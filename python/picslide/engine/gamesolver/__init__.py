from picslide.engine.gamesolver.solver import Solver

__all__ = ["Solver"]
