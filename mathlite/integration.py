"""
Explicit integrators for a point mass under a given acceleration.

Both functions update the caller's `position` and `velocity` Vec2 objects
in place and return None.
"""
import logging

from .Vec2 import Vec2
from .precision import real

logger = logging.getLogger(__name__)


def euler(position: Vec2, velocity: Vec2, acceleration: Vec2, dt) -> None:
    """
    Semi-implicit (symplectic) Euler: velocity is advanced first and the
    new velocity is used to advance the position.
    """
    velocity += acceleration * dt
    position += velocity * dt


def rk2(position: Vec2, velocity: Vec2, acceleration: Vec2, dt) -> None:
    """
    Midpoint step for constant acceleration: the position advances with the
    half-step velocity, then the velocity takes the full step. Acceleration
    that changes within the step is not sampled again.
    """
    dt = real(dt)
    v_mid = velocity + acceleration * (dt * real(0.5))
    position += v_mid * dt
    velocity += acceleration * dt


INTEGRATORS = {
    'euler': euler,
    'rk2': rk2,
}


def get_integrator(name):
    try:
        integrator = INTEGRATORS[name]
    except KeyError:
        raise KeyError(f"unknown integrator {name!r}, expected one of {sorted(INTEGRATORS)}") from None
    logger.debug("using %s integrator", name)
    return integrator
