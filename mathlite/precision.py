"""
Scalar precision shared by every type and constant in the package.

The width is picked once, when this module is first imported, from the
MATHLITE_DOUBLE_PRECISION environment variable. Set it before importing
mathlite; changing it afterwards has no effect.
"""
import logging
import os

import numpy as np

logger = logging.getLogger(__name__)

PRECISION_ENV = "MATHLITE_DOUBLE_PRECISION"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("", "0", "false", "no", "off")


def parse_precision_flag(value):
    """
    Return True for double precision, False for single precision.
    `value` is the raw environment string (or None when unset).
    """
    if value is None:
        return False
    flag = value.strip().lower()
    if flag in _TRUE_VALUES:
        return True
    if flag in _FALSE_VALUES:
        return False
    raise ValueError(f"{PRECISION_ENV} must be one of {_TRUE_VALUES + _FALSE_VALUES[1:]}, got {value!r}")


def scalar_type(double_precision):
    return np.float64 if double_precision else np.float32


DOUBLE_PRECISION = parse_precision_flag(os.environ.get(PRECISION_ENV))
real = scalar_type(DOUBLE_PRECISION)

logger.debug("mathlite scalar type: %s", np.dtype(real).name)
