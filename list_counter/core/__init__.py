"""
Core domain models, numeral primitives, and data contracts.

This module contains the building blocks of counter styles that are
independent of any particular registry or style table.
"""
