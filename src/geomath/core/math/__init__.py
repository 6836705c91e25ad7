"""
Core math modules для geomath

Epsilon-семантика сравнений и интерполяция.
"""

# Numerical Safeguards
from geomath.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MACHINE_EPSILON,
    # Tolerance config
    DEFAULT_TOLERANCE,
    ComparisonTolerance,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    within_machine_epsilon,
    # Validation
    is_valid_float,
    validate_non_negative,
)

# Interpolation
from geomath.core.math.interpolation import (
    catmull_rom_interpolate,
    cosine_interpolate,
    cubic_interpolate,
    linear_interpolate,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MACHINE_EPSILON",
    # Numerical Safeguards — Tolerance config
    "DEFAULT_TOLERANCE",
    "ComparisonTolerance",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
    "within_machine_epsilon",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_non_negative",
    # Interpolation
    "catmull_rom_interpolate",
    "cosine_interpolate",
    "cubic_interpolate",
    "linear_interpolate",
]
