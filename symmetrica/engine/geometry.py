from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Positions are (row, col). Directions are (drow, dcol).
Position = Tuple[int, int]

KING_DIRS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def neighbors8(p: Position, size: int) -> List[Position]:
    """King-move neighbours of `p`, clipped to a size x size board, row-major."""
    r, c = p
    out = []
    for dr, dc in KING_DIRS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            out.append((nr, nc))
    return out


def is_adjacent_king(a: Position, b: Position) -> bool:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1


@dataclass(frozen=True)
class Axis:
    """A line through `point` with direction angle `angle` (radians).

    The angle is measured from the column axis towards the row axis, so the
    unit direction is (sin(angle), cos(angle)) in (row, col) terms.
    `direction` is set when the axis came from exact integer arithmetic.
    """

    point: Tuple[float, float]
    angle: float
    direction: Optional[Tuple[int, int]] = None

    @classmethod
    def through(cls, point: Tuple[float, float], direction: Tuple[int, int]) -> "Axis":
        return cls(point, math.atan2(direction[0], direction[1]), direction)


def reflect(point: Tuple[float, float], axis: Axis) -> Tuple[float, float]:
    """Mirror image of `point` across `axis` (floating point)."""
    dr, dc = math.sin(axis.angle), math.cos(axis.angle)
    pr = point[0] - axis.point[0]
    pc = point[1] - axis.point[1]
    dot = pr * dr + pc * dc
    return (
        axis.point[0] + 2 * dot * dr - pr,
        axis.point[1] + 2 * dot * dc - pc,
    )


def reflect_scaled(p: Tuple[int, int], d: Tuple[int, int]) -> Tuple[int, int]:
    """Exact reflection of `p` across the line through the origin along `d`.

    The result is scaled by |d|^2 so it stays integral:
    |d|^2 * R(p) = 2 (p.d) d - |d|^2 p.
    """
    dd = d[0] * d[0] + d[1] * d[1]
    dot = p[0] * d[0] + p[1] * d[1]
    return (2 * dot * d[0] - dd * p[0], 2 * dot * d[1] - dd * p[1])


def canonical_direction(d: Tuple[int, int]) -> Tuple[int, int]:
    """Reduce a non-zero integer direction by its gcd; first non-zero part positive."""
    g = math.gcd(d[0], d[1])
    if g == 0:
        raise ValueError("zero direction")
    r, c = d[0] // g, d[1] // g
    if r < 0 or (r == 0 and c < 0):
        r, c = -r, -c
    return (r, c)
