"""
Test suite for jsdate-interop

Contains:
- tests/unit/          : Unit tests for individual modules
"""
