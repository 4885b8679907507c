from __future__ import annotations

import logging
import stat
import sys
from pathlib import Path

import pytest

from bestmove.infrastructure.engine.settings import EngineSettings
from tests.engine_helpers import FAKE_ENGINE


@pytest.fixture
def make_engine(tmp_path):
    """Write an executable wrapper that launches the scripted engine in ``mode``."""

    def _make(mode: str = "normal", log: bool = False) -> Path:
        wrapper = tmp_path / f"engine-{mode}"
        args = f'"{sys.executable}" "{FAKE_ENGINE}" {mode}'
        if log:
            log_path = tmp_path / f"engine-{mode}.log"
            args += f' "{log_path}"'
        wrapper.write_text(f"#!/bin/sh\nexec {args}\n", encoding="utf-8")
        wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return wrapper

    return _make


@pytest.fixture
def fast_settings():
    """Short deadlines so failure scenarios finish quickly."""

    def _settings(engine: Path, **overrides) -> EngineSettings:
        values = dict(
            candidate_paths=(str(engine),),
            threads=1,
            movetime_ms=50,
            handshake_timeout=5.0,
            search_timeout=1.5,
            teardown_timeout=1.0,
        )
        values.update(overrides)
        return EngineSettings(**values)

    return _settings


@pytest.fixture
def engine_log(caplog):
    """caplog wired to the package logger, which does not propagate to root."""
    logger = logging.getLogger("bestmove")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
