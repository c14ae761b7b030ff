from .Vec2 import Vec2
from .math_tools import clamp


def distance(a: Vec2, b: Vec2):
    return (a - b).length()


def distance_squared(a: Vec2, b: Vec2):
    return (a - b).length_sq()


def closest_point_on_line_segment(a: Vec2, b: Vec2, p: Vec2) -> Vec2:
    """
    Closest point to `p` on the segment a-b.

    `p` is projected onto the line through a and b, and the line parameter
    is clamped to [0, 1]. A zero-length segment (a == b) divides 0 by 0;
    the NaN parameter survives the clamp and the result is (nan, nan).
    """
    ab = b - a
    t = (p - a).dot(ab) / ab.length_sq()
    t = clamp(t, 0.0, 1.0)
    return a + ab * t
