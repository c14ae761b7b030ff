"""
Random vectors drawn from a caller-owned `random.Random`.

No generator state lives in this module; give each thread its own
generator.
"""
import random

import numpy as np

from .Vec2 import Vec2
from .constants import TWO_PI
from .precision import real


def uniform(rng: random.Random, lo, hi):
    """Uniform scalar in [lo, hi)."""
    return real(rng.uniform(float(lo), float(hi)))


def random_unit_vec2(rng: random.Random) -> Vec2:
    angle = uniform(rng, 0.0, TWO_PI)
    return Vec2(np.cos(angle), np.sin(angle))


def random_in_unit_disk(rng: random.Random) -> Vec2:
    # sqrt keeps the density uniform over the area
    return random_unit_vec2(rng) * np.sqrt(uniform(rng, 0.0, 1.0))
