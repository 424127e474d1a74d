"""Reflection symmetry of finite lattice point sets.

A reflection that maps a point set onto itself fixes its centroid, so every
axis worth testing passes through the centroid and only its direction is
unknown. Directions are generated from the points themselves:

- a point lying on the axis gives the direction centroid -> point;
- a point mapped onto another point of the same distance from the centroid
  gives the perpendicular bisector of the two.

All arithmetic is on integers. Coordinates are multiplied by the number of
points before subtracting the coordinate sum, which puts the centroid at the
origin without fractions, and reflections are scaled by |d|^2.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .geometry import Axis, Position, canonical_direction, reflect_scaled

logger = logging.getLogger(__name__)

Vec = Tuple[int, int]


def _centered(points: Iterable[Position]) -> Tuple[List[Vec], int, Vec]:
    pts = sorted(set(points))
    if not pts:
        raise ValueError("cannot test symmetry of an empty point set")
    n = len(pts)
    sr = sum(p[0] for p in pts)
    sc = sum(p[1] for p in pts)
    return [(n * r - sr, n * c - sc) for r, c in pts], n, (sr, sc)


def candidate_directions(centered: List[Vec]) -> List[Vec]:
    """Canonical axis directions that could map `centered` onto itself."""
    found: Set[Vec] = set()
    by_norm: Dict[int, List[Vec]] = defaultdict(list)
    for p in centered:
        by_norm[p[0] * p[0] + p[1] * p[1]].append(p)
    for norm, ring in by_norm.items():
        if norm == 0:
            # the centroid itself is fixed by every axis
            continue
        for i, p in enumerate(ring):
            found.add(canonical_direction(p))
            for q in ring[i + 1:]:
                found.add(canonical_direction((p[1] - q[1], q[0] - p[0])))
    return sorted(found)


def mirrors_onto_itself(centered: FrozenSet[Vec], d: Vec) -> bool:
    dd = d[0] * d[0] + d[1] * d[1]
    for p in centered:
        rr, rc = reflect_scaled(p, d)
        if rr % dd or rc % dd or (rr // dd, rc // dd) not in centered:
            return False
    return True


def find_axis(points: Iterable[Position]) -> Optional[Axis]:
    """First reflection axis mapping `points` onto itself, or None."""
    centered, n, (sr, sc) = _centered(points)
    centroid = (sr / n, sc / n)
    if n == 1:
        return Axis.through(centroid, (0, 1))
    pool = frozenset(centered)
    candidates = candidate_directions(centered)
    for tried, d in enumerate(candidates, 1):
        if mirrors_onto_itself(pool, d):
            logger.debug("axis %s through %s after %d candidates", d, centroid, tried)
            return Axis.through(centroid, d)
    logger.debug("no axis among %d candidates for %d points", len(candidates), n)
    return None


def is_symmetric(points: Iterable[Position]) -> bool:
    return find_axis(points) is not None
