"""
Test suite for the group collections library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
