"""
Tests for the explicit integrators.

Both integrators mutate the caller's vectors; the tests check the update
order as well as the values.
"""

import pytest

from mathlite import INTEGRATORS, Vec2, euler, get_integrator, rk2

GRAVITY = Vec2(0, -9.8)


class TestEuler:
    def test_single_step(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(1, 0)
        euler(position, velocity, GRAVITY, 0.1)
        assert velocity.x == pytest.approx(1.0)
        assert velocity.y == pytest.approx(-0.98, rel=1e-6)
        assert position.x == pytest.approx(0.1, rel=1e-6)
        # uses the updated velocity, an explicit Euler step would leave y at 0
        assert position.y == pytest.approx(-0.098, rel=1e-6)

    def test_mutates_in_place(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(1, 0)
        pos_ref, vel_ref = position, velocity
        assert euler(position, velocity, GRAVITY, 0.1) is None
        assert position is pos_ref and velocity is vel_ref

    def test_acceleration_untouched(self) -> None:
        acceleration = Vec2(0, -9.8)
        euler(Vec2(), Vec2(), acceleration, 0.5)
        assert acceleration == Vec2(0, -9.8)

    def test_zero_acceleration_is_uniform_motion(self) -> None:
        position = Vec2(1, 1)
        velocity = Vec2(2, -3)
        for _ in range(4):
            euler(position, velocity, Vec2.zero(), 0.25)
        assert position.x == pytest.approx(3.0)
        assert position.y == pytest.approx(-2.0)
        assert velocity == Vec2(2, -3)

    def test_overshoots_free_fall(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(0, 0)
        for _ in range(10):
            euler(position, velocity, GRAVITY, 0.1)
        # -g * dt^2 * (1 + 2 + ... + 10)
        assert position.y == pytest.approx(-5.39, rel=1e-5)
        assert velocity.y == pytest.approx(-9.8, rel=1e-5)


class TestRK2:
    def test_single_step(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(1, 0)
        rk2(position, velocity, GRAVITY, 0.1)
        assert velocity.y == pytest.approx(-0.98, rel=1e-6)
        assert position.x == pytest.approx(0.1, rel=1e-6)
        assert position.y == pytest.approx(-0.049, rel=1e-6)

    def test_exact_for_constant_acceleration(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(3, 0)
        for _ in range(10):
            rk2(position, velocity, GRAVITY, 0.1)
        # closed form: x = v t, y = -g t^2 / 2
        assert position.x == pytest.approx(3.0, rel=1e-5)
        assert position.y == pytest.approx(-4.9, rel=1e-5)
        assert velocity.y == pytest.approx(-9.8, rel=1e-5)

    def test_mutates_in_place(self) -> None:
        position = Vec2(0, 0)
        velocity = Vec2(1, 0)
        pos_ref = position
        assert rk2(position, velocity, GRAVITY, 0.1) is None
        assert position is pos_ref
        assert not position.is_zero()


class TestIntegratorLookup:
    def test_known_names(self) -> None:
        assert get_integrator('euler') is euler
        assert get_integrator('rk2') is rk2
        assert set(INTEGRATORS) == {'euler', 'rk2'}

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError, match="verlet"):
            get_integrator('verlet')
