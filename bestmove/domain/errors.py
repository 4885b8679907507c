from __future__ import annotations


class EngineError(Exception):
    """Base class for failures while talking to the UCI engine."""


class EngineNotFoundError(EngineError):
    """Raised when none of the candidate engine paths is executable."""


class SpawnFailedError(EngineError):
    """Raised when the engine process (or its pipes) cannot be created."""


class EngineTerminatedError(EngineError):
    """Raised when the engine closes its pipes while commands are still pending."""


class UnsafeCommandError(EngineError):
    """Raised when caller input would reach the engine as more than one command."""


class HandshakeTimeoutError(EngineError):
    """Raised when `readyok` is not observed before the handshake deadline."""


class SearchTimeoutError(EngineError):
    """Raised when no `bestmove` line arrives before the search deadline."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class ParseFailureError(EngineError):
    """Raised when the engine output carries no `bestmove` line."""


class PositionError(Exception):
    """Base class for errors surfaced to API callers."""


class InvalidFenError(PositionError):
    """Raised when the submitted FEN cannot be parsed."""


class EngineUnavailableError(PositionError):
    """Raised when the engine produced no move for a playable position."""
