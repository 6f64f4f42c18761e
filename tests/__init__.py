"""
Test suite for probability_engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
