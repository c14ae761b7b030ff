import math

from .precision import DOUBLE_PRECISION, real

PI = real(math.pi)
TWO_PI = real(2.0) * PI
HALF_PI = real(0.5) * PI
DEG_TO_RAD = PI / real(180.0)
RAD_TO_DEG = real(180.0) / PI

# tolerance for near-zero and near-unit tests
EPSILON = real(1e-12) if DOUBLE_PRECISION else real(1e-6)
