"""
Test suite for float64-error-bounds

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
