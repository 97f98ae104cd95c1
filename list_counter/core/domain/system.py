"""System — Семейства алгоритмов построения нумерации

CSS Counter Styles Level 3, §3.1.1 (system descriptor):
- cyclic, numeric, fixed, alphabetic, symbolic, additive

Каждая система имеет диапазон по умолчанию (используется, если у стиля
не задан собственный range).
"""

from enum import Enum

from list_counter.core.domain.int_range import IntRange


class System(str, Enum):
    """Система (алгоритм) counter style.

    Default ranges:
    - CYCLIC / NUMERIC / FIXED: (-∞, +∞)
    - ALPHABETIC / SYMBOLIC: [1, +∞)
    - ADDITIVE: [0, +∞)
    """

    # Циклический перебор символов (•, ◦, ▪ ...)
    CYCLIC = "cyclic"
    # Позиционная система счисления (первый символ = 0)
    NUMERIC = "numeric"
    # Однократный проход по символам, далее fallback
    FIXED = "fixed"
    # Биективная система ("колонки таблицы": a..z, aa, ab ...)
    ALPHABETIC = "alphabetic"
    # Циклический перебор с удвоением, утроением символа на каждом круге
    SYMBOLIC = "symbolic"
    # Знаково-аддитивная система (римские цифры)
    ADDITIVE = "additive"

    @property
    def default_range(self) -> IntRange:
        """Диапазон по умолчанию для системы"""
        if self in (System.ALPHABETIC, System.SYMBOLIC):
            return IntRange(min=1)
        if self == System.ADDITIVE:
            return IntRange(min=0)
        return IntRange.infinite()

    @property
    def min_symbols(self) -> int:
        """Минимальное число символов, необходимое алгоритму"""
        if self in (System.NUMERIC, System.ALPHABETIC):
            return 2
        return 1
