from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import List

import pytest

from bestmove.application.ports.engine_port import EnginePort

FAKE_ENGINE = Path(__file__).parent / "fakes" / "uci_engine.py"

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
MATE_IN_ONE_FEN = "6k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 1"
PROMOTION_FEN = "8/P6k/8/8/8/8/6K1/8 w - - 0 1"
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
CHECKMATE_FEN = "R5k1/5ppp/8/8/8/8/5PPP/6K1 b - - 1 1"
KINGLESS_FEN = "8/8/8/8/8/8/4P3/8 w - - 0 1"
BACK_RANK_PAWN_FEN = "P3k3/8/8/8/8/8/8/4K3 w - - 0 1"
OPPOSITE_CHECK_FEN = "4k3/8/8/8/8/8/8/4RK2 w - - 0 1"

requires_posix = pytest.mark.skipif(os.name != "posix", reason="fake engines are shell scripts")
requires_stockfish = pytest.mark.skipif(
    shutil.which("stockfish") is None, reason="stockfish is not installed"
)


def open_descriptors() -> int:
    return len(os.listdir("/proc/self/fd"))


requires_procfs = pytest.mark.skipif(
    not os.path.isdir("/proc/self/fd"), reason="needs /proc to count descriptors"
)


class FakeEngine(EnginePort):
    """In-process engine port that replays a fixed reply."""

    def __init__(self, reply: str = "a1a8") -> None:
        self.reply = reply
        self.calls: List[str] = []

    def select_move(self, fen: str) -> str:
        self.calls.append(fen)
        return self.reply

    def engine_path(self) -> str:
        return "/fake/engine"
