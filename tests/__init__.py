"""
Test suite for cnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
