"""
Test suite for chinese-rand

Contains:
- tests/unit/          : Unit tests for raw generators, domain values and generators
"""
