"""Module-level entry point: best move for a FEN from a local Stockfish."""

from __future__ import annotations

from bestmove.infrastructure.engine.stockfish_engine_adapter import StockfishEngineAdapter

_engine_adapter = StockfishEngineAdapter()


def move(fen: str) -> str:
    """Return the engine's move in long algebraic form, or "" on any failure."""
    return _engine_adapter.select_move(fen)
