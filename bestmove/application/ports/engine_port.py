from __future__ import annotations

from abc import ABC, abstractmethod


class EnginePort(ABC):
    """Abstraction for a chess engine capable of choosing moves."""

    @abstractmethod
    def select_move(self, fen: str) -> str:
        """Return the engine's chosen move in UCI notation, or "" when it has none."""

    @abstractmethod
    def engine_path(self) -> str:
        """Return the executable backing this engine."""
