"""
Test suite for geomkernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
