"""
Core math modules для cnum

Float-примитивы и угловая геометрия комплексной плоскости.
"""

# Numerical Safeguards
from src.cnum.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_exact_zero,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Normalization
    normalize_zero,
)

# Angles
from src.cnum.math.angles import (
    DEGREES_FULL_TURN,
    DEGREES_HALF_TURN,
    DEGREES_NEGATIVE_IMAGINARY_AXIS,
    DEGREES_POSITIVE_IMAGINARY_AXIS,
    modulus,
    polar_to_rectangular,
    quadrant_degree,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "is_exact_zero",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Normalization
    "normalize_zero",
    # Angles — Constants
    "DEGREES_FULL_TURN",
    "DEGREES_HALF_TURN",
    "DEGREES_NEGATIVE_IMAGINARY_AXIS",
    "DEGREES_POSITIVE_IMAGINARY_AXIS",
    # Angles — Functions
    "modulus",
    "polar_to_rectangular",
    "quadrant_degree",
]
