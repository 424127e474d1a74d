from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .board import Board, Occupant, EMPTY
from .errors import MalformedMove, MoveError
from .geometry import Position, is_adjacent_king


@dataclass(frozen=True)
class Drop:
    target: Position


@dataclass(frozen=True)
class Jump:
    source: Position
    target: Position


@dataclass(frozen=True)
class Push:
    opponent_pos: Position
    destination: Position


Move = Union[Drop, Jump, Push]


def validate_drop(board: Board, player: Occupant, target: Position) -> Optional[MoveError]:
    if not board.is_on_board(target):
        return MoveError.INVALID_POSITION
    if not board.is_empty(target):
        return MoveError.CELL_OCCUPIED
    return None


def validate_jump(board: Board, player: Occupant, source: Position, target: Position) -> Optional[MoveError]:
    if not board.is_on_board(source) or not board.is_on_board(target):
        return MoveError.INVALID_POSITION
    if board.get(source) is not player:
        return MoveError.NOT_YOUR_STONE
    # Checked before occupancy: source == target would otherwise always read as occupied.
    if source == target:
        return MoveError.SAME_POSITION
    if not board.is_empty(target):
        return MoveError.CELL_OCCUPIED
    return None


def validate_push(board: Board, player: Occupant, opponent_pos: Position, destination: Position) -> Optional[MoveError]:
    if not board.is_on_board(opponent_pos):
        return MoveError.INVALID_POSITION
    if board.get(opponent_pos) is not player.opponent:
        return MoveError.NOT_OPPONENT_STONE
    if not board.is_on_board(destination):
        return MoveError.OFF_BOARD
    if not is_adjacent_king(opponent_pos, destination):
        return MoveError.NOT_ADJACENT
    if not board.is_empty(destination):
        return MoveError.DESTINATION_OCCUPIED
    return None


def _check_pos(value: object) -> None:
    if (
        not isinstance(value, tuple)
        or len(value) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        raise MalformedMove(f"expected a (row, col) pair of ints, got {value!r}")


def check_move_shape(move: object) -> None:
    """Fail fast on anything that is not a well-formed Drop, Jump or Push."""
    if isinstance(move, Drop):
        _check_pos(move.target)
    elif isinstance(move, Jump):
        _check_pos(move.source)
        _check_pos(move.target)
    elif isinstance(move, Push):
        _check_pos(move.opponent_pos)
        _check_pos(move.destination)
    else:
        raise MalformedMove(f"not a move: {move!r}")


def validate_move(board: Board, player: Occupant, move: Move) -> Optional[MoveError]:
    check_move_shape(move)
    if isinstance(move, Drop):
        return validate_drop(board, player, move.target)
    if isinstance(move, Jump):
        return validate_jump(board, player, move.source, move.target)
    return validate_push(board, player, move.opponent_pos, move.destination)


def apply_move(board: Board, player: Occupant, move: Move) -> Board:
    """Board after a validated `move` by `player`."""
    if isinstance(move, Drop):
        return board.set(move.target, player)
    if isinstance(move, Jump):
        return board.set(move.source, EMPTY).set(move.target, player)
    if isinstance(move, Push):
        return board.set(move.destination, player.opponent).set(move.opponent_pos, player)
    raise MalformedMove(f"not a move: {move!r}")
