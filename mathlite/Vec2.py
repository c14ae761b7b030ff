import numbers

import numpy as np

from .constants import EPSILON
from .formatting import format_components
from .precision import real


class Vec2:
    # numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0):
        self.x = real(x)
        self.y = real(y)

    # ---- factories ----

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0)

    @classmethod
    def up(cls):
        return cls(0.0, 1.0)

    @classmethod
    def down(cls):
        return cls(0.0, -1.0)

    @classmethod
    def left(cls):
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls):
        return cls(1.0, 0.0)

    # ---- operators ----

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        # no zero guard: dividing by 0 gives inf/nan
        scalar = real(scalar)
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def __iadd__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        self.x /= scalar
        self.y /= scalar
        return self

    # ---- math ----

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self):
        return np.sqrt(self.x * self.x + self.y * self.y)

    def length_sq(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        l = self.length()
        if l < EPSILON:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / l, self.y / l)

    def normalize_self(self):
        l = self.length()
        if l < EPSILON:
            self.clear()
            return
        self.x /= l
        self.y /= l

    def perpendicular(self):
        """Rotated 90 degrees counter-clockwise."""
        return Vec2(-self.y, self.x)

    def rotate(self, radians):
        c = np.cos(real(radians))
        s = np.sin(real(radians))
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def project(self, onto):
        """Component of this vector along `onto`."""
        denom = onto.length_sq()
        if denom < EPSILON:
            return Vec2(0.0, 0.0)
        return onto * (self.dot(onto) / denom)

    def reflect(self, normal):
        """`normal` does not need to be unit length."""
        n = normal.normalize()
        return self - n * (real(2.0) * self.dot(n))

    def clear(self):
        self.x = real(0.0)
        self.y = real(0.0)

    def is_zero(self):
        return bool(self.x == 0.0 and self.y == 0.0)

    def is_unit(self):
        return bool(abs(self.length_sq() - real(1.0)) < EPSILON)

    def copy(self):
        return Vec2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return bool(self.x == other.x and self.y == other.y)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2(x={float(self.x)!r}, y={float(self.y)!r})"

    def __str__(self):
        return format_components((self.x, self.y))
