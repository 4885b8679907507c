from __future__ import annotations

import os
import shutil
from typing import Iterable, Optional

from bestmove.domain.errors import EngineNotFoundError
from bestmove.infrastructure.engine.settings import DEFAULT_ENGINE_PATHS
from bestmove.utils.logger import get_logger

logger = get_logger(__name__)


def _is_bare_name(candidate: str) -> bool:
    return os.sep not in candidate and (os.altsep is None or os.altsep not in candidate)


def probe(candidate: str) -> Optional[str]:
    """Return an executable path for the candidate, or None.

    Bare names go through the process search path; anything with a directory
    component must be a regular file with execute permission.
    """
    if _is_bare_name(candidate):
        return shutil.which(candidate)
    if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
        return candidate
    return None


def find_engine(candidates: Iterable[str] = DEFAULT_ENGINE_PATHS) -> str:
    probed = []
    for candidate in candidates:
        probed.append(candidate)
        resolved = probe(candidate)
        if resolved:
            logger.debug("Engine found at %s", resolved)
            return resolved
    raise EngineNotFoundError(
        "Could not find stockfish executable in any of the expected paths: "
        + ", ".join(probed)
    )
