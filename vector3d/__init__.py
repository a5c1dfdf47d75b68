"""Immutable 3D vector math.

The package exposes a single value type, :class:`Vector3`, together
with its shared constants and the tolerance configuration used by the
approximate comparisons.
"""

from .config import (
    DEFAULT_APPROX_EPSILON,
    DEFAULT_UNIT_EPSILON,
    DEFAULT_ZERO_EPSILON,
    Tolerances,
    load_tolerances,
)
from .vector import UNIT_X, UNIT_Y, UNIT_Z, ZERO, Vector3, rotation_matrix

__all__ = [
    "Vector3",
    "ZERO",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "rotation_matrix",
    "Tolerances",
    "load_tolerances",
    "DEFAULT_UNIT_EPSILON",
    "DEFAULT_APPROX_EPSILON",
    "DEFAULT_ZERO_EPSILON",
]
