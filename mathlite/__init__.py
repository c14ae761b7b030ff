from .precision import DOUBLE_PRECISION, real
from .constants import DEG_TO_RAD, EPSILON, HALF_PI, PI, RAD_TO_DEG, TWO_PI
from .math_tools import clamp, lerp, swap, to_degrees, to_radians
from .Vec2 import Vec2
from .Vec3 import Vec3
from .Mat2 import Mat2
from .geometry import closest_point_on_line_segment, distance, distance_squared
from .integration import INTEGRATORS, euler, get_integrator, rk2
from .sampling import random_in_unit_disk, random_unit_vec2, uniform
