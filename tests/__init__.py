"""
Test suite for geomath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
