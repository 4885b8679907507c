from __future__ import annotations

import re

from bestmove.domain.errors import ParseFailureError

BESTMOVE_TOKEN = "bestmove"
NO_MOVE = "(none)"

_MOVE_OFFSET = len(BESTMOVE_TOKEN) + 1
_MOVE_PATTERN = re.compile(r"[a-h][1-8][a-h][1-8][qrbn]?")


def parse_best_move(output: str) -> str:
    """Return the move following the first `bestmove` in the engine output.

    The move runs from just after ``bestmove `` up to the next whitespace or
    the end of the output. ``bestmove (none)`` yields ``"(none)"`` unchanged and
    a bare trailing ``bestmove`` yields ``""``. Raises ParseFailureError when
    the output has no `bestmove` at all.
    """
    position = output.find(BESTMOVE_TOKEN)
    if position < 0:
        raise ParseFailureError("'bestmove' not found in engine output")
    tail = output[position + _MOVE_OFFSET:]
    if not tail:
        return ""
    return tail.split(None, 1)[0] if not tail[0].isspace() else ""


def extract_best_move(output: str) -> str:
    try:
        return parse_best_move(output)
    except ParseFailureError:
        return ""


def is_move_token(token: str) -> bool:
    """Long algebraic shape: two squares plus an optional promotion piece."""
    return _MOVE_PATTERN.fullmatch(token) is not None
