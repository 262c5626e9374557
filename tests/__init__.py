"""
Test suite for redate

Contains:
- tests/unit/          : Unit tests for individual modules
"""
