"""
Core math modules для list_counter

Чистые алгоритмы построения числовых представлений.
"""

from list_counter.core.math.numerals import (
    additive_numeral,
    alphabetic_numeral,
    cyclic_numeral,
    fixed_numeral,
    numeric_numeral,
    symbolic_numeral,
)

__all__ = [
    "cyclic_numeral",
    "fixed_numeral",
    "numeric_numeral",
    "alphabetic_numeral",
    "symbolic_numeral",
    "additive_numeral",
]
