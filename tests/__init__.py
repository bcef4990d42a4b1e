"""
Test suite for quadfit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
