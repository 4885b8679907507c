from __future__ import annotations

from typing import Optional

from bestmove.application.ports.engine_port import EnginePort
from bestmove.domain.best_move import parse_best_move
from bestmove.domain.errors import EngineError, HandshakeTimeoutError, UnsafeCommandError
from bestmove.infrastructure.engine.discovery import find_engine
from bestmove.infrastructure.engine.settings import EngineSettings
from bestmove.infrastructure.engine.uci_session import UciSession
from bestmove.utils.logger import get_logger

logger = get_logger(__name__)


class StockfishEngineAdapter(EnginePort):
    """Adapter that asks a freshly spawned UCI engine for one move per call."""

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self._settings = settings or EngineSettings()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def engine_path(self) -> str:
        return find_engine(self._settings.candidate_paths)

    def select_move(self, fen: str) -> str:
        try:
            return self._run(fen)
        except EngineError as exc:
            logger.error("%s", exc)
        except Exception:
            logger.exception("Unexpected engine failure")
        return ""

    def _run(self, fen: str) -> str:
        fen = fen.strip()
        if "\n" in fen or "\r" in fen:
            raise UnsafeCommandError("FEN must be a single line")
        path = self.engine_path()
        with UciSession(path, self._settings) as session:
            try:
                session.handshake()
            except HandshakeTimeoutError as exc:
                logger.warning("%s; searching anyway", exc)
            output = session.search(fen)
        return parse_best_move(output)
