"""
Geometry value objects.

Contains circular-coordinate primitives such as S1Interval.
"""

from src.core.geometry.s1_interval import S1Interval

__all__ = [
    "S1Interval",
]
