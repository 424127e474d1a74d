from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from .board import Board, Occupant, dilate
from .geometry import Position


@dataclass(frozen=True)
class Shape:
    color: Occupant
    positions: FrozenSet[Position]

    @property
    def size(self) -> int:
        return len(self.positions)

    @property
    def cells(self) -> Tuple[Position, ...]:
        return tuple(sorted(self.positions))


def component_mask(seed: int, stones: int, size: int) -> int:
    """Grow `seed` through `stones` by king steps until it stops changing."""
    region = seed
    while True:
        grown = dilate(region, size) & stones
        if grown == region:
            return region
        region = grown


def find_shapes(board: Board, color: Occupant) -> List[Shape]:
    """Partition the `color` stones into 8-connected shapes.

    Shapes come out in row-major order of their first stone.
    """
    remaining = board.stones(color)
    shapes: List[Shape] = []
    while remaining:
        seed = remaining & -remaining
        region = component_mask(seed, remaining, board.size)
        remaining &= ~region
        shapes.append(Shape(color, frozenset(board.positions_of(region))))
    return shapes


def shape_at(board: Board, pos: Position) -> Shape | None:
    """The shape containing the stone at `pos`, or None if the cell is empty."""
    color = board.get(pos)
    if color is Occupant.EMPTY:
        return None
    stones = board.stones(color)
    region = component_mask(1 << (pos[0] * board.size + pos[1]), stones, board.size)
    return Shape(color, frozenset(board.positions_of(region)))
