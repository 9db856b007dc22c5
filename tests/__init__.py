"""
Test suite for the Gravity bridge denomination scheme

Contains:
- tests/unit/          : Unit tests for individual modules
"""
