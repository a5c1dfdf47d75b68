"""Immutable 3D vector value type.

Every operation is a pure function of its inputs and returns a new
``Vector3`` (or one of the shared constants). Degenerate numeric input
follows IEEE-754: NaN and infinity propagate, and dividing by a zero
scalar yields infinities or NaN instead of raising.

Binary operations are ordinary methods, so they read equally well as
``a.cross(b)`` or ``Vector3.cross(a, b)``.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_APPROX_EPSILON, DEFAULT_UNIT_EPSILON, DEFAULT_ZERO_EPSILON

Row = Tuple[float, float, float]

_DECIMAL_PLACES = 5
# Magnitude at which fixed-point output switches to shortest exponent form.
_FIXED_POINT_LIMIT = 1e21


def _format_component(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= _FIXED_POINT_LIMIT:
        return repr(value)
    # Adding 0.0 folds -0.0 into 0.0 so it prints without a sign.
    return f"{value + 0.0:.{_DECIMAL_PLACES}f}"


def _divide_component(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector.

    Build instances with :meth:`from_components` or :meth:`from_iter`.
    """

    x: float
    y: float
    z: float

    # //1.- Coerce components so integer or numpy input behaves like the float domain.
    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @staticmethod
    def from_components(x: float, y: float, z: float) -> "Vector3":
        return Vector3(x, y, z)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector3":
        components = tuple(float(value) for value in values)
        if len(components) != 3:
            raise ValueError(f"Vector3 requires exactly three components, got {len(components)}")
        return Vector3(*components)

    @staticmethod
    def zero() -> "Vector3":
        return ZERO

    @staticmethod
    def unit_x() -> "Vector3":
        return UNIT_X

    @staticmethod
    def unit_y() -> "Vector3":
        return UNIT_Y

    @staticmethod
    def unit_z() -> "Vector3":
        return UNIT_Z

    @property
    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> "Vector3":
        """Scale every component by ``scalar``."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide(self, scalar: float) -> "Vector3":
        """Divide every component by ``scalar``; a zero scalar gives inf or NaN."""
        return Vector3(
            _divide_component(self.x, scalar),
            _divide_component(self.y, scalar),
            _divide_component(self.z, scalar),
        )

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    # //2.- Operators accept only the operand types the named methods are defined for.
    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: object) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    __neg__ = negate

    def dot(self, other: "Vector3") -> float:
        """Scalar (dot) product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Right-handed vector (cross) product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def direction(self, target: "Vector3", epsilon: float = DEFAULT_UNIT_EPSILON) -> "Vector3":
        """Unit vector pointing from ``self`` toward ``target``."""
        return target.subtract(self).unit(epsilon)

    def distance(self, other: "Vector3") -> float:
        return self.subtract(other).length

    def distance_squared(self, other: "Vector3") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def unit(self, epsilon: float = DEFAULT_UNIT_EPSILON) -> "Vector3":
        """Return the normalized vector.

        A zero-length vector yields the shared ``ZERO`` constant, and a
        vector whose norm is already within ``epsilon`` of one is returned
        as is rather than divided again.
        """

        norm = self.length
        if norm == 0.0:
            return ZERO
        if abs(norm - 1.0) < epsilon:
            return self
        return self.divide(norm)

    def normalize(self, epsilon: float = DEFAULT_UNIT_EPSILON) -> "Vector3":
        return self.unit(epsilon)

    def equals(self, other: "Vector3") -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def approx_equals(self, other: "Vector3", epsilon: float = DEFAULT_APPROX_EPSILON) -> bool:
        """Compare with an absolute tolerance, falling back to a relative one.

        Small components pass when every difference is below ``epsilon``.
        Otherwise each axis is allowed ``epsilon`` scaled by the larger of
        one and the two component magnitudes.
        """

        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        dz = abs(self.z - other.z)

        if dx < epsilon and dy < epsilon and dz < epsilon:
            return True

        scale_x = max(1.0, abs(self.x), abs(other.x))
        scale_y = max(1.0, abs(self.y), abs(other.y))
        scale_z = max(1.0, abs(self.z), abs(other.z))
        return dx <= epsilon * scale_x and dy <= epsilon * scale_y and dz <= epsilon * scale_z

    def is_zero(self, epsilon: float = DEFAULT_ZERO_EPSILON) -> bool:
        return self.length < epsilon

    def angle_to(self, other: "Vector3", normal: Optional["Vector3"] = None) -> float:
        """Angle in radians between ``self`` and ``other``.

        Without ``normal`` the result lies in ``[0, pi]``. With a reference
        normal the angle is negative when the rotation from ``self`` to
        ``other`` runs clockwise about it.
        """

        cross = self.cross(other)
        sign = 1.0
        if normal is not None:
            sign = 1.0 if cross.dot(normal) >= 0.0 else -1.0
        return math.atan2(cross.length * sign, self.dot(other))

    def rotate(
        self,
        axis: "Vector3",
        degrees: float,
        epsilon: float = DEFAULT_UNIT_EPSILON,
    ) -> "Vector3":
        """Rotate around ``axis`` by ``degrees`` using Rodrigues' formula.

        A zero axis is not special-cased; the rotation then reduces to
        scaling by ``cos(angle)``.
        """

        rows = _rodrigues_rows(axis, degrees, epsilon)
        return Vector3(*(row[0] * self.x + row[1] * self.y + row[2] * self.z for row in rows))

    def to_array(self) -> List[float]:
        return [self.x, self.y, self.z]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.to_array(), dtype=np.float64)

    def to_string(self) -> str:
        parts = (_format_component(component) for component in self)
        return "[" + ", ".join(parts) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


def _rodrigues_rows(axis: Vector3, degrees: float, epsilon: float) -> Tuple[Row, Row, Row]:
    angle = degrees * math.pi / 180.0
    a = axis.unit(epsilon)

    s = math.sin(angle)
    c = math.cos(angle)
    t = 1.0 - c
    x, y, z = a.x, a.y, a.z

    return (
        (t * x * x + c, t * x * y - s * z, t * x * z + s * y),
        (t * x * y + s * z, t * y * y + c, t * y * z - s * x),
        (t * x * z - s * y, t * y * z + s * x, t * z * z + c),
    )


def rotation_matrix(
    axis: Vector3,
    degrees: float,
    epsilon: float = DEFAULT_UNIT_EPSILON,
) -> np.ndarray:
    """Return the 3x3 Rodrigues matrix that :meth:`Vector3.rotate` applies."""

    return np.array(_rodrigues_rows(axis, degrees, epsilon), dtype=np.float64)


ZERO = Vector3(0.0, 0.0, 0.0)
UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)
