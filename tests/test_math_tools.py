import math

import numpy as np
import pytest

from mathlite import EPSILON, PI, Mat2, Vec2, Vec3, clamp, lerp, real, swap, to_degrees, to_radians


class TestClamp:
    def test_inside_range_unchanged(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_returns_min(self) -> None:
        assert clamp(-5.0, 0.0, 10.0) == 0.0

    def test_above_returns_max(self) -> None:
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_result_uses_real(self) -> None:
        assert type(clamp(15.0, 0.0, 10.0)) is real

    def test_inverted_bounds_follow_branch_order(self) -> None:
        # min is tested first, so a value below min wins even if min > max
        assert clamp(0.0, 5.0, 1.0) == 5.0
        assert clamp(3.0, 5.0, 1.0) == 5.0
        assert clamp(7.0, 5.0, 1.0) == 1.0

    def test_nan_passes_through(self) -> None:
        assert math.isnan(clamp(float("nan"), 0.0, 1.0))


class TestLerp:
    def test_midpoint(self) -> None:
        assert lerp(0.0, 10.0, 0.5) == 5.0

    def test_endpoints(self) -> None:
        assert lerp(0.0, 10.0, 0.0) == 0.0
        assert lerp(0.0, 10.0, 1.0) == 10.0

    def test_extrapolates(self) -> None:
        assert lerp(0.0, 10.0, 2.0) == 20.0
        assert lerp(0.0, 10.0, -0.5) == -5.0


class TestAngles:
    def test_to_radians(self) -> None:
        assert abs(to_radians(180.0) - PI) < EPSILON

    def test_to_degrees(self) -> None:
        assert abs(to_degrees(PI) - real(180.0)) < real(1e-4)


class TestSwap:
    def test_swap_vectors(self) -> None:
        a = Vec2(1, 2)
        b = Vec2(3, 4)
        swap(a, b)
        assert a == Vec2(3, 4)
        assert b == Vec2(1, 2)

    def test_swap_keeps_identity(self) -> None:
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        a_id, b_id = id(a), id(b)
        swap(a, b)
        assert (id(a), id(b)) == (a_id, b_id)
        assert a == Vec3(4, 5, 6)

    def test_swapped_values_are_independent(self) -> None:
        a = Mat2.rotation(1.0)
        b = Mat2()
        swap(a, b)
        b.m00 = real(42.0)
        assert a == Mat2()

    def test_swap_lists(self) -> None:
        a = [1, 2, 3]
        b = [4]
        swap(a, b)
        assert a == [4]
        assert b == [1, 2, 3]

    def test_swap_dicts(self) -> None:
        a = {'k': 1}
        b = {'j': 2}
        swap(a, b)
        assert a == {'j': 2}
        assert b == {'k': 1}

    def test_swap_mixed_types_rejected(self) -> None:
        with pytest.raises(TypeError):
            swap(Vec2(), Vec3())

    @pytest.mark.parametrize("a, b", [(1, 2), (1.5, 2.5), ((1, 2), (3, 4)), ("x", "y"), (real(1.0), real(2.0))])
    def test_swap_immutable_rejected(self, a, b) -> None:
        with pytest.raises(TypeError, match="immutable"):
            swap(a, b)

    def test_swap_arrays(self) -> None:
        a = np.array([1.0, 2.0])
        b = np.array([3.0, 4.0])
        a_id = id(a)
        swap(a, b)
        assert id(a) == a_id
        assert a.tolist() == [3.0, 4.0]
        assert b.tolist() == [1.0, 2.0]

    def test_swap_arrays_shape_mismatch(self) -> None:
        with pytest.raises(ValueError, match="shape"):
            swap(np.zeros(2), np.zeros(3))
