"""
Test suite for romanum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
