from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator, Tuple

DEFAULT_ENGINE_PATHS: Tuple[str, ...] = (
    "/usr/local/bin/stockfish",
    "/app/stockfish",
    "stockfish",
    "/opt/homebrew/bin/stockfish",
)


def _hardware_threads() -> int:
    return max(os.cpu_count() or 1, 1)


@dataclass(frozen=True)
class EngineSettings:
    """Compiled-in knobs for one engine session. Timeouts are in seconds."""

    candidate_paths: Tuple[str, ...] = DEFAULT_ENGINE_PATHS
    threads: int = field(default_factory=_hardware_threads)
    hash_mb: int = 512
    skill_level: int = 20
    multipv: int = 1
    movetime_ms: int = 1000
    handshake_timeout: float = 5.0
    search_timeout: float = 7.0
    teardown_timeout: float = 2.0
    uci_grace: float = 0.1
    poll_interval: float = 0.01
    await_uciok: bool = False

    def options(self) -> Iterator[Tuple[str, int]]:
        yield "Threads", self.threads
        yield "Hash", self.hash_mb
        yield "Skill Level", self.skill_level
        yield "MultiPV", self.multipv
