"""Tests for reflection symmetry detection"""

import math

import pytest

from symmetrica.engine.symmetry import (
    _centered,
    candidate_directions,
    find_axis,
    is_symmetric,
    mirrors_onto_itself,
)

# Mirror image pairs across the line through (0, 0) along (1, 2), plus three
# points on that line. About 63.43 degrees: not a multiple of 15 or 22.5.
OFF_GRID_AXIS = [(0, 0), (1, 2), (2, 4), (3, 1), (-1, 3), (2, -1), (-2, 1)]

T_SHAPE = [(0, 0), (0, 1), (0, 2), (1, 1), (2, 1), (3, 1), (4, 1)]
HOOKED_STICK = [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1), (3, 1), (4, 1)]


class TestSmallSets:
    """Degenerate sizes are always symmetric"""

    def test_single_stone(self):
        assert is_symmetric([(5, 5)])

    def test_two_stones(self):
        assert is_symmetric([(0, 0), (3, 7)])

    def test_collinear_stones(self):
        assert is_symmetric([(0, 0), (1, 2), (2, 4), (5, 10)])
        assert is_symmetric([(4, 0), (4, 1), (4, 2), (4, 3), (4, 4), (4, 5)])

    def test_empty_set_is_an_error(self):
        with pytest.raises(ValueError):
            is_symmetric([])


class TestAxisDirections:
    """Axes in grid, diagonal and off-grid directions"""

    def test_t_shape_has_vertical_axis(self):
        axis = find_axis(T_SHAPE)
        assert axis is not None
        assert axis.direction == (1, 0)
        assert axis.point == pytest.approx((10 / 7, 1.0))

    def test_l_tromino_axis_is_anti_diagonal(self):
        axis = find_axis([(0, 0), (1, 0), (1, 1)])
        assert axis.direction == (1, -1)
        assert axis.angle == pytest.approx(math.atan2(1, -1))

    def test_axis_off_the_usual_angle_table_is_found(self):
        assert is_symmetric(OFF_GRID_AXIS)
        axis = find_axis(OFF_GRID_AXIS)
        # three points have distinct distances from the centroid, so this is the only axis
        assert axis.direction == (1, 2)
        degrees = math.degrees(axis.angle)
        assert degrees % 15 != pytest.approx(0)
        assert degrees % 22.5 != pytest.approx(0)

    def test_translation_does_not_matter(self):
        moved = [(r + 3, c + 3) for r, c in OFF_GRID_AXIS]
        assert find_axis(moved).direction == (1, 2)

    def test_dropping_a_mirror_partner_breaks_symmetry(self):
        broken = [p for p in OFF_GRID_AXIS if p != (-1, 3)]
        assert not is_symmetric(broken)


class TestAsymmetric:
    def test_hooked_stick(self):
        assert find_axis(HOOKED_STICK) is None

    def test_f_pentomino(self):
        assert not is_symmetric([(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)])


def test_blocks_and_rings():
    assert is_symmetric([(r, c) for r in range(2) for c in range(4)])
    ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (1, 1)]
    assert is_symmetric(ring)
    assert is_symmetric([(r, c) for r in range(5) for c in range(5)])


def test_candidates_are_canonical_and_unique():
    centered, n, _ = _centered(OFF_GRID_AXIS)
    cands = candidate_directions(centered)
    assert len(cands) == len(set(cands))
    assert (1, 2) in cands
    for r, c in cands:
        assert r > 0 or (r == 0 and c > 0)
        assert math.gcd(r, c) == 1
    assert mirrors_onto_itself(frozenset(centered), (1, 2))
    assert not mirrors_onto_itself(frozenset(centered), (0, 1))
