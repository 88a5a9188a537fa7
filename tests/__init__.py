"""
Test suite for bigcheck

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/property/  : Hypothesis property tests over all representations
"""
