"""
Test suite for the S1 interval library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
