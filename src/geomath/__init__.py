"""
geomath — геометрические и числовые value-типы

Векторы фиксированной размерности, axis-aligned боксы, плоскости,
комплексные числа и точные дроби. Публичный API реэкспортируется здесь.
"""

from geomath.core.domain import (
    Bounds,
    Bounds2,
    Bounds3,
    Complex,
    DimensionMismatch,
    DivisionByZero,
    GeometryError,
    IndexOutOfRange,
    InvalidDenominator,
    NullVectorNormalization,
    Plane,
    Plane2,
    Plane3,
    Rational,
    Vector,
    Vector2,
    Vector3,
    Vector4,
    normalize,
    project,
    scalar_project,
)
from geomath.core.math import (
    DEFAULT_TOLERANCE,
    MACHINE_EPSILON,
    ComparisonTolerance,
    catmull_rom_interpolate,
    cosine_interpolate,
    cubic_interpolate,
    linear_interpolate,
)

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "normalize",
    "project",
    "scalar_project",
    # Bounds / planes
    "Bounds",
    "Bounds2",
    "Bounds3",
    "Plane",
    "Plane2",
    "Plane3",
    # Numbers
    "Complex",
    "Rational",
    # Errors
    "GeometryError",
    "DimensionMismatch",
    "DivisionByZero",
    "IndexOutOfRange",
    "InvalidDenominator",
    "NullVectorNormalization",
    # Tolerances
    "DEFAULT_TOLERANCE",
    "MACHINE_EPSILON",
    "ComparisonTolerance",
    # Interpolation
    "catmull_rom_interpolate",
    "cosine_interpolate",
    "cubic_interpolate",
    "linear_interpolate",
    "__version__",
]
