from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .board import Board, Occupant
from .geometry import Position
from .shapes import Shape, find_shapes
from .symmetry import is_symmetric

logger = logging.getLogger(__name__)

DEFAULT_MIN_SHAPE_SIZE = 6


@dataclass(frozen=True)
class ScoringResult:
    points: int = 0
    removed_stones: FrozenSet[Position] = frozenset()
    shapes: Tuple[Shape, ...] = field(default_factory=tuple)

    @property
    def scored(self) -> bool:
        return bool(self.shapes)


def shape_points(shape: Shape, min_shape_size: int = DEFAULT_MIN_SHAPE_SIZE) -> int:
    return shape.size - (min_shape_size - 1)


def evaluate(board: Board, player: Occupant, min_shape_size: int = DEFAULT_MIN_SHAPE_SIZE) -> ScoringResult:
    """Score every symmetric shape of `player` with at least `min_shape_size` stones.

    Only the given colour is looked at. The board is not touched.
    """
    qualifying = tuple(
        s for s in find_shapes(board, player)
        if s.size >= min_shape_size and is_symmetric(s.positions)
    )
    if not qualifying:
        return ScoringResult()
    points = sum(shape_points(s, min_shape_size) for s in qualifying)
    removed = frozenset().union(*(s.positions for s in qualifying))
    logger.debug(
        "%s scores %d from %d shape(s) of sizes %s",
        player.name, points, len(qualifying), [s.size for s in qualifying],
    )
    return ScoringResult(points, removed, qualifying)
