"""Chess engine package: material evaluation and minimax search."""

from chesslet.engine.evaluation import PIECE_WEIGHTS, evaluate, material
from chesslet.engine.minimax import MinimaxEngine
from chesslet.engine.search import (
    HIBOUND,
    LOBOUND,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "HIBOUND",
    "LOBOUND",
    "PIECE_WEIGHTS",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "material",
]
