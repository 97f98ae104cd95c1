"""Styles — стили нумерации, registry и предопределённые таблицы.

CSS Counter Styles Level 3:
- CounterStyle: движок форматирования (range, fallback, negative, pad)
- NumeralAlgorithm: tagged union алгоритмов шести систем
- CounterStyleRegistry: таблица name → CounterStyle
"""

from .algorithms import (
    AdditiveAlgorithm,
    AdditiveTuple,
    AlphabeticAlgorithm,
    CyclicAlgorithm,
    FixedAlgorithm,
    NumeralAlgorithm,
    NumericAlgorithm,
    SymbolicAlgorithm,
)
from .counter_style import DECIMAL, CounterStyle
from .predefined import PREDEFINED_STYLES_PATH, load_counter_styles, predefined_counter_styles
from .registry import CounterStyleRegistry, RegistryConfig, default_registry

__all__ = [
    # Algorithms
    "NumeralAlgorithm",
    "CyclicAlgorithm",
    "FixedAlgorithm",
    "NumericAlgorithm",
    "AlphabeticAlgorithm",
    "SymbolicAlgorithm",
    "AdditiveAlgorithm",
    "AdditiveTuple",
    # Counter style
    "CounterStyle",
    "DECIMAL",
    # Registry
    "CounterStyleRegistry",
    "RegistryConfig",
    "default_registry",
    # Predefined
    "PREDEFINED_STYLES_PATH",
    "load_counter_styles",
    "predefined_counter_styles",
]
