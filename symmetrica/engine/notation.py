"""
Move notation.

Cells are written as a column letter followed by a 1-based row ('a1' is
(row 0, col 0)). Moves:

    d5        drop on d5
    e2-g8     jump own stone from e2 to g8
    f6:e5     push the opponent stone on f6 to e5, taking f6
    d5(2)     any move may carry the points it scored
"""
from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .board import MAX_SIZE
from .errors import MalformedMove
from .game import MoveRecord
from .geometry import Position
from .moves import Drop, Jump, Move, Push, check_move_shape

FILES = "abcdefghijklmnopqrs"

_CELL = r"[a-s]\d{1,2}"
_MOVE_RE = re.compile(
    rf"(?P<a>{_CELL})(?:(?P<sep>[-:])(?P<b>{_CELL}))?(?:\((?P<pts>\d+)\))?",
    re.IGNORECASE,
)


def position_to_notation(pos: Position, size: int = MAX_SIZE) -> str:
    r, c = pos
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"Invalid position: {pos}")
    return f"{FILES[c]}{r + 1}"


def notation_to_position(text: str, size: int = MAX_SIZE) -> Position:
    s = text.strip().lower()
    if not re.fullmatch(_CELL, s):
        raise ValueError(f"Invalid notation format: {text!r}")
    c = FILES.index(s[0])
    r = int(s[1:]) - 1
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"Invalid notation: {text!r}")
    return (r, c)


def move_to_notation(move: Move, points: int = 0, size: int = MAX_SIZE) -> str:
    try:
        check_move_shape(move)
    except MalformedMove as e:
        raise ValueError(str(e)) from e
    if isinstance(move, Drop):
        text = position_to_notation(move.target, size)
    elif isinstance(move, Jump):
        text = f"{position_to_notation(move.source, size)}-{position_to_notation(move.target, size)}"
    else:
        text = f"{position_to_notation(move.opponent_pos, size)}:{position_to_notation(move.destination, size)}"
    if points:
        text += f"({points})"
    return text


def notation_to_move(text: str, size: int = MAX_SIZE) -> Tuple[Move, int]:
    """Parse one move; returns the move and its annotated points (0 if none)."""
    m = _MOVE_RE.fullmatch(text.strip())
    if not m:
        raise ValueError(f"Could not parse move: {text!r}")
    a = notation_to_position(m.group("a"), size)
    points = int(m.group("pts")) if m.group("pts") else 0
    sep = m.group("sep")
    if sep is None:
        return Drop(a), points
    b = notation_to_position(m.group("b"), size)
    if sep == "-":
        return Jump(a, b), points
    return Push(a, b), points


def records_to_string(records: Iterable[MoveRecord], size: int = MAX_SIZE) -> str:
    return " ".join(move_to_notation(r.move, r.points, size) for r in records)


def string_to_moves(text: str, size: int = MAX_SIZE) -> List[Move]:
    """Whitespace separated move list; point annotations are dropped."""
    return [notation_to_move(tok, size)[0] for tok in text.split()]


def is_valid_notation(text: str, size: int = MAX_SIZE) -> bool:
    try:
        string_to_moves(text, size)
    except ValueError:
        return False
    return True
