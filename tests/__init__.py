"""
Test suite for the decimal constant cache

Contains:
- tests/unit/          : Unit tests for individual modules
"""
