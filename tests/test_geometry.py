import math

import numpy as np
import pytest

from mathlite import Vec2, closest_point_on_line_segment, distance, distance_squared


class TestDistance:
    def test_distance(self) -> None:
        assert distance(Vec2(1, 1), Vec2(4, 5)) == 5.0

    def test_distance_squared(self) -> None:
        assert distance_squared(Vec2(1, 1), Vec2(4, 5)) == 25.0

    def test_symmetric(self) -> None:
        a = Vec2(-2, 7)
        b = Vec2(3, 0.5)
        assert distance(a, b) == distance(b, a)

    def test_same_point(self) -> None:
        assert distance(Vec2(2, 2), Vec2(2, 2)) == 0.0


class TestClosestPointOnLineSegment:
    def test_clamped_to_end(self) -> None:
        q = closest_point_on_line_segment(Vec2(0, 0), Vec2(2, 0), Vec2(3, 0.5))
        assert q == Vec2(2, 0)

    def test_clamped_to_start(self) -> None:
        q = closest_point_on_line_segment(Vec2(0, 0), Vec2(2, 0), Vec2(-1, 4))
        assert q == Vec2(0, 0)

    def test_interior_projection(self) -> None:
        q = closest_point_on_line_segment(Vec2(0, 0), Vec2(4, 0), Vec2(1, 3))
        assert q == Vec2(1, 0)

    def test_diagonal_segment(self) -> None:
        q = closest_point_on_line_segment(Vec2(0, 0), Vec2(2, 2), Vec2(2, 0))
        assert q.x == pytest.approx(1.0)
        assert q.y == pytest.approx(1.0)

    def test_point_on_segment(self) -> None:
        q = closest_point_on_line_segment(Vec2(0, 0), Vec2(4, 0), Vec2(3, 0))
        assert q == Vec2(3, 0)

    def test_inputs_not_mutated(self) -> None:
        a, b, p = Vec2(0, 0), Vec2(2, 0), Vec2(3, 0.5)
        closest_point_on_line_segment(a, b, p)
        assert (a, b, p) == (Vec2(0, 0), Vec2(2, 0), Vec2(3, 0.5))

    def test_degenerate_segment_gives_nan(self) -> None:
        # known edge case: a == b divides 0 by 0 and the clamp keeps the NaN
        with np.errstate(invalid='ignore'):
            q = closest_point_on_line_segment(Vec2(1, 1), Vec2(1, 1), Vec2(5, 5))
        assert math.isnan(q.x) and math.isnan(q.y)
