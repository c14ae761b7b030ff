import numbers

import numpy as np

from .constants import EPSILON
from .formatting import format_components
from .precision import real


class Vec3:
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = real(x)
        self.y = real(y)
        self.z = real(z)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls):
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def left(cls):
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls):
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def backward(cls):
        return cls(0.0, 0.0, -1.0)

    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __iadd__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = real(scalar)
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vec3(self.y * other.z - self.z * other.y,
                    self.z * other.x - self.x * other.z,
                    self.x * other.y - self.y * other.x)

    def length(self):
        return np.sqrt(self.length_sq())

    def length_sq(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self):
        l = self.length()
        if l < EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / l, self.y / l, self.z / l)

    def normalize_self(self):
        l = self.length()
        if l < EPSILON:
            self.clear()
            return
        self.x /= l
        self.y /= l
        self.z /= l

    def project(self, onto):
        denom = onto.length_sq()
        if denom < EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return onto * (self.dot(onto) / denom)

    def reflect(self, normal):
        n = normal.normalize()
        return self - n * (real(2.0) * self.dot(n))

    def clear(self):
        self.x = real(0.0)
        self.y = real(0.0)
        self.z = real(0.0)

    def is_zero(self):
        return bool(self.x == 0.0 and self.y == 0.0 and self.z == 0.0)

    def is_unit(self):
        return bool(abs(self.length_sq() - real(1.0)) < EPSILON)

    def copy(self):
        return Vec3(self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec3):
            return False
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f"Vec3(x={float(self.x)!r}, y={float(self.y)!r}, z={float(self.z)!r})"

    def __str__(self):
        return format_components((self.x, self.y, self.z))
