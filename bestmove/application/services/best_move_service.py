from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import chess

from bestmove.application.ports.engine_port import EnginePort
from bestmove.domain.best_move import NO_MOVE
from bestmove.domain.errors import EngineUnavailableError, InvalidFenError


class PositionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


@dataclass
class BestMoveResult:
    fen: str
    move: Optional[str]
    status: PositionStatus


class BestMoveService:
    def __init__(self, engine: EnginePort) -> None:
        self._engine = engine

    async def execute(self, fen: str) -> BestMoveResult:
        board = self._parse(fen)
        status = self._derive_status(board)
        if status is not PositionStatus.IN_PROGRESS:
            return BestMoveResult(board.fen(), None, status)

        move = await asyncio.to_thread(self._engine.select_move, board.fen())
        if not move:
            raise EngineUnavailableError("Engine returned no move for this position.")
        if move == NO_MOVE:
            return BestMoveResult(board.fen(), None, status)
        return BestMoveResult(board.fen(), move, status)

    @staticmethod
    def _parse(fen: str) -> chess.Board:
        try:
            board = chess.Board(fen.strip())
        except ValueError as exc:
            raise InvalidFenError(f"Invalid FEN: {fen}") from exc
        if not board.is_valid():
            raise InvalidFenError(f"Invalid position: {fen} ({board.status()!r})")
        return board

    @staticmethod
    def _derive_status(board: chess.Board) -> PositionStatus:
        if not board.is_game_over(claim_draw=False):
            return PositionStatus.IN_PROGRESS
        if board.is_checkmate():
            return PositionStatus.CHECKMATE
        if board.is_stalemate():
            return PositionStatus.STALEMATE
        return PositionStatus.DRAW
