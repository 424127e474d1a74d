from __future__ import annotations

import math

import pytest

from symmetrica.engine.geometry import (
    Axis,
    canonical_direction,
    is_adjacent_king,
    neighbors8,
    reflect,
    reflect_scaled,
)


def test_neighbors_clipped_at_corner_and_full_in_middle():
    assert neighbors8((0, 0), 12) == [(0, 1), (1, 0), (1, 1)]
    assert len(neighbors8((5, 5), 12)) == 8
    assert neighbors8((11, 11), 12) == [(10, 10), (10, 11), (11, 10)]


def test_king_adjacency():
    assert is_adjacent_king((3, 3), (4, 4))
    assert is_adjacent_king((3, 3), (3, 2))
    assert not is_adjacent_king((3, 3), (3, 3))
    assert not is_adjacent_king((3, 3), (5, 3))
    assert not is_adjacent_king((3, 3), (5, 5))


def test_float_reflection_across_row_axis_and_diagonal():
    along_cols = Axis((0.0, 0.0), 0.0)
    assert reflect((2.0, 3.0), along_cols) == pytest.approx((-2.0, 3.0))
    diagonal = Axis((0.0, 0.0), math.pi / 4)
    assert reflect((2.0, 3.0), diagonal) == pytest.approx((3.0, 2.0))
    shifted = Axis((1.0, 0.0), 0.0)
    assert reflect((3.0, 5.0), shifted) == pytest.approx((-1.0, 5.0))


def test_scaled_reflection_is_exact():
    assert reflect_scaled((2, 3), (0, 1)) == (-2, 3)
    # direction (1, 2) has |d|^2 = 5
    assert reflect_scaled((3, 1), (1, 2)) == (-5, 15)
    assert reflect_scaled((1, 2), (1, 2)) == (5, 10)


def test_canonical_direction():
    assert canonical_direction((-2, -4)) == (1, 2)
    assert canonical_direction((0, -3)) == (0, 1)
    assert canonical_direction((3, -3)) == (1, -1)
    with pytest.raises(ValueError):
        canonical_direction((0, 0))


def test_axis_through_direction_sets_angle():
    axis = Axis.through((1.0, 1.0), (1, 1))
    assert axis.angle == pytest.approx(math.pi / 4)
    assert axis.direction == (1, 1)
