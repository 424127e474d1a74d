from __future__ import annotations

from enum import Enum
from typing import Tuple


class MoveError(str, Enum):
    """Reasons a submitted move is rejected. Returned, never raised."""

    INVALID_POSITION = "invalid_position"
    OFF_BOARD = "off_board"
    CELL_OCCUPIED = "cell_occupied"
    DESTINATION_OCCUPIED = "destination_occupied"
    NOT_YOUR_STONE = "not_your_stone"
    NOT_OPPONENT_STONE = "not_opponent_stone"
    SAME_POSITION = "same_position"
    NOT_ADJACENT = "not_adjacent"


class InvalidPositionError(IndexError):
    """Raised by Board accessors for a position outside the grid."""

    def __init__(self, pos: Tuple[int, int], size: int):
        super().__init__(f"position {pos} is outside a {size}x{size} board")
        self.pos = pos
        self.size = size


class EngineContractError(AssertionError):
    """The caller broke the engine contract; not a recoverable game condition."""


class GameAlreadyOver(EngineContractError):
    pass


class MalformedMove(EngineContractError):
    pass
