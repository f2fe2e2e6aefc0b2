"""
Core math modules

Угловые примитивы и численные алгоритмы с гарантией стабильности у шва ±π.
"""

# Angle Safeguards
from src.core.math.angle_safeguards import (
    # Epsilon constants
    DBL_EPSILON,
    DEFAULT_MAX_ERROR,
    PI,
    TWO_PI,
    # Validation
    is_valid_angle,
    is_valid_float,
    validate_angle,
    # Canonicalization
    antipodal_angle,
    canonicalize_angle,
    # Circular distances
    positive_distance,
    remainder_two_pi,
)

__all__ = [
    # Angle Safeguards — Epsilon constants
    "DBL_EPSILON",
    "DEFAULT_MAX_ERROR",
    "PI",
    "TWO_PI",
    # Angle Safeguards — Validation
    "is_valid_angle",
    "is_valid_float",
    "validate_angle",
    # Angle Safeguards — Canonicalization
    "antipodal_angle",
    "canonicalize_angle",
    # Angle Safeguards — Circular distances
    "positive_distance",
    "remainder_two_pi",
]
