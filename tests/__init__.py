"""
Test suite for the polynomial toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
