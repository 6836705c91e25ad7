"""
Domain value types.

Vector, Bounds, Plane, Complex, Rational and their error taxonomy.
"""

from geomath.core.domain.bounds import Bounds, Bounds2, Bounds3
from geomath.core.domain.complex_number import Complex
from geomath.core.domain.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    GeometryError,
    IndexOutOfRange,
    InvalidDenominator,
    NullVectorNormalization,
)
from geomath.core.domain.plane import Plane, Plane2, Plane3
from geomath.core.domain.rational import Rational
from geomath.core.domain.vector import (
    Vector,
    Vector2,
    Vector3,
    Vector4,
    normalize,
    project,
    scalar_project,
)

__all__ = [
    # Vector module
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "normalize",
    "project",
    "scalar_project",
    # Bounds module
    "Bounds",
    "Bounds2",
    "Bounds3",
    # Plane module
    "Plane",
    "Plane2",
    "Plane3",
    # Numbers
    "Complex",
    "Rational",
    # Exceptions
    "GeometryError",
    "DimensionMismatch",
    "DivisionByZero",
    "IndexOutOfRange",
    "InvalidDenominator",
    "NullVectorNormalization",
]
