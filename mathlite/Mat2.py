import numpy as np

from .Vec2 import Vec2
from .formatting import format_scalar
from .precision import real


class Mat2:
    """
    Row-major 2x2 matrix:

        | m00 m01 |
        | m10 m11 |

    Defaults to the identity.
    """
    __array_ufunc__ = None

    def __init__(self, m00=1.0, m01=0.0, m10=0.0, m11=1.0):
        self.m00 = real(m00)
        self.m01 = real(m01)
        self.m10 = real(m10)
        self.m11 = real(m11)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def rotation(cls, radians):
        c = np.cos(real(radians))
        s = np.sin(real(radians))
        return cls(c, -s, s, c)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.m00 * other.x + self.m01 * other.y,
                        self.m10 * other.x + self.m11 * other.y)
        if isinstance(other, Mat2):
            # (self * other) applies `other` first
            return Mat2(self.m00 * other.m00 + self.m01 * other.m10,
                        self.m00 * other.m01 + self.m01 * other.m11,
                        self.m10 * other.m00 + self.m11 * other.m10,
                        self.m10 * other.m01 + self.m11 * other.m11)
        return NotImplemented

    def rows(self):
        return ((self.m00, self.m01), (self.m10, self.m11))

    def copy(self):
        return Mat2(self.m00, self.m01, self.m10, self.m11)

    def __eq__(self, other):
        if other is None or not isinstance(other, Mat2):
            return False
        return bool(self.m00 == other.m00 and self.m01 == other.m01
                    and self.m10 == other.m10 and self.m11 == other.m11)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.m00, self.m01, self.m10, self.m11))

    def __repr__(self):
        return f"Mat2(m00={float(self.m00)!r}, m01={float(self.m01)!r}, m10={float(self.m10)!r}, m11={float(self.m11)!r})"

    def __str__(self):
        texts = [format_scalar(v) for row in self.rows() for v in row]
        width = max(len(t) for t in texts) + 3
        return "[[" + ",".join(t.rjust(width) for t in texts[:2]) + "],[" + ",".join(t.rjust(width) for t in texts[2:]) + "]]"
