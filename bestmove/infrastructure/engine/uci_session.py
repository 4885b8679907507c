from __future__ import annotations

import codecs
import os
import subprocess
import time
from contextlib import suppress
from typing import List, Optional

from bestmove.domain.best_move import BESTMOVE_TOKEN
from bestmove.domain.errors import (
    EngineTerminatedError,
    HandshakeTimeoutError,
    SearchTimeoutError,
    SpawnFailedError,
)
from bestmove.infrastructure.engine.settings import EngineSettings
from bestmove.utils.logger import get_logger

logger = get_logger(__name__)

_READ_SIZE = 4096


class UciSession:
    """A single engine child process driven over its stdin/stdout pipes.

    The session owns the process from ``start()`` until ``close()``; use it as a
    context manager so the child is reaped on every exit path. Replies are
    collected line by line into ``buffer``.
    """

    def __init__(self, path: str, settings: Optional[EngineSettings] = None) -> None:
        self.path = path
        self.settings = settings or EngineSettings()
        self.buffer: List[str] = []
        self.started_at: Optional[float] = None
        self._process: Optional[subprocess.Popen] = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""
        self._eof = False
        self._closed = False

    def __enter__(self) -> "UciSession":
        self.start()
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:
        self.close()

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process else None

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode if self._process else None

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.buffer)

    def start(self) -> None:
        if self._process is not None:
            return
        try:
            self._process = subprocess.Popen(
                [self.path],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                bufsize=0,
                close_fds=True,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise SpawnFailedError(f"Failed to start engine {self.path}: {exc}") from exc
        self.started_at = time.monotonic()
        try:
            os.set_blocking(self._process.stdout.fileno(), False)
        except OSError as exc:
            self.close()
            raise SpawnFailedError(f"Failed to configure engine pipe: {exc}") from exc
        logger.debug("Started engine %s (pid %s)", self.path, self._process.pid)

    def send(self, command: str) -> None:
        process = self._require_process()
        payload = memoryview(f"{command}\n".encode("utf-8"))
        try:
            while payload:
                written = process.stdin.write(payload)
                payload = payload[written or 0:]
            process.stdin.flush()
        except (OSError, ValueError) as exc:
            raise EngineTerminatedError(f"Engine stopped accepting commands: {exc}") from exc
        logger.debug(">> %s", command)

    def read_until(self, token: str, timeout: float) -> bool:
        """Collect replies until a line contains ``token``.

        Returns False when the deadline passes or the engine closes its output
        first. Reads never block; idle polls sleep for ``poll_interval``.
        """
        self._require_process()
        deadline = time.monotonic() + max(timeout, 0.0)
        while True:
            lines = self._drain()
            self.buffer.extend(lines)
            if any(token in line for line in lines):
                return True
            if self._eof or time.monotonic() >= deadline:
                return False
            time.sleep(self.settings.poll_interval)

    def handshake(self) -> None:
        settings = self.settings
        deadline = time.monotonic() + settings.handshake_timeout
        self.send("uci")
        if settings.await_uciok:
            self.read_until("uciok", deadline - time.monotonic())
        else:
            time.sleep(settings.uci_grace)
        for name, value in settings.options():
            self.send(f"setoption name {name} value {value}")
        self.send("isready")
        if self.read_until("readyok", deadline - time.monotonic()):
            return
        if self._eof:
            raise EngineTerminatedError("Engine closed its output during the handshake")
        raise HandshakeTimeoutError(
            f"'readyok' not received within {settings.handshake_timeout:g}s"
        )

    def search(self, fen: str) -> str:
        """Run one timed search and return the raw reply text."""
        self.buffer.clear()
        self.send(f"position fen {fen}")
        self.send(f"go movetime {self.settings.movetime_ms}")
        if self.read_until(BESTMOVE_TOKEN, self.settings.search_timeout):
            return self.text
        if self._eof:
            raise EngineTerminatedError("Engine closed its output before 'bestmove'")
        raise SearchTimeoutError(
            f"'bestmove' not received within {self.settings.search_timeout:g}s",
            output=self.text,
        )

    def close(self) -> None:
        """Stop and reap the engine. Safe to call more than once; never raises."""
        process = self._process
        if process is None or self._closed:
            return
        self._closed = True
        with suppress(OSError, ValueError):
            process.stdin.write(b"quit\n")
            process.stdin.flush()
        for stream in (process.stdin, process.stdout):
            with suppress(OSError):
                stream.close()
        with suppress(OSError):
            process.terminate()
        try:
            process.wait(timeout=self.settings.teardown_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("Engine %s ignored SIGTERM; killing it", process.pid)
            with suppress(OSError):
                process.kill()
            process.wait()
        logger.debug("Engine %s reaped with status %s", process.pid, process.returncode)

    def _require_process(self) -> subprocess.Popen:
        if self._process is None or self._closed:
            raise EngineTerminatedError("Engine session is not running")
        return self._process

    def _drain(self) -> List[str]:
        stream = self._process.stdout
        chunks = []
        while True:
            chunk = stream.read(_READ_SIZE)
            if chunk is None:
                break
            if not chunk:
                self._eof = True
                break
            chunks.append(chunk)
        text = self._pending + self._decoder.decode(b"".join(chunks), final=self._eof)
        *lines, self._pending = text.split("\n")
        if self._eof and self._pending:
            lines.append(self._pending)
            self._pending = ""
        return [line.rstrip("\r") for line in lines]
