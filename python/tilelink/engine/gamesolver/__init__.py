from tilelink.engine.gamesolver.analyzer import BoardAnalyzer
from tilelink.engine.gamesolver.solver import Solver

__all__ = ["BoardAnalyzer", "Solver"]
