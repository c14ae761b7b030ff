import copy

import numpy as np

from .constants import DEG_TO_RAD, RAD_TO_DEG
from .precision import real


def clamp(value, min_value, max_value):
    """Branch chain clamp; no check that min_value <= max_value, NaN passes through."""
    value = real(value)
    if value < min_value:
        return real(min_value)
    if value > max_value:
        return real(max_value)
    return value


def lerp(a, b, t):
    """Unclamped: t outside [0, 1] extrapolates."""
    a = real(a)
    return a + real(t) * (real(b) - a)


def to_radians(degrees):
    return real(degrees) * DEG_TO_RAD


def to_degrees(radians):
    return real(radians) * RAD_TO_DEG


def _assign(target, source):
    if isinstance(target, np.ndarray):
        np.copyto(target, source)
    elif isinstance(target, list):
        target[:] = source
    elif isinstance(target, dict):
        target.clear()
        target.update(source)
    else:
        vars(target).clear()
        vars(target).update(vars(source))


def swap(a, b):
    """
    Exchange the contents of two mutable values of the same type in place,
    through a temporary copy. Works for lists, dicts, numpy arrays of equal
    shape and any object that keeps its state in instance attributes
    (Vec2, Vec3, Mat2, ...).

    Immutable values (ints, floats, tuples, strings, numpy scalars) have no
    contents to overwrite, so they are rejected with TypeError; rebind those
    with `a, b = b, a` instead.
    """
    if type(a) is not type(b):
        raise TypeError(f"cannot swap {type(a).__name__} with {type(b).__name__}")
    if not isinstance(a, (list, dict, np.ndarray)) and not hasattr(a, "__dict__"):
        raise TypeError(f"cannot swap immutable {type(a).__name__} values in place; use a, b = b, a")
    if isinstance(a, np.ndarray) and a.shape != b.shape:
        raise ValueError(f"cannot swap arrays of shape {a.shape} and {b.shape}")
    temp = copy.copy(a)
    _assign(a, b)
    _assign(b, temp)
