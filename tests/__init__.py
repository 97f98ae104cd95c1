"""
Test suite for list-counter

Contains:
- tests/unit/          : Unit tests for numerals, domain models, styles, registry, contracts
"""
