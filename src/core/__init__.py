"""
Core geometric primitives and numerical invariants.

This module contains the foundational building blocks that are independent
of any higher-level spherical geometry (caps, rectangles, cells).
"""
