"""
Test suite for fixvec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
