"""
Contract Validation Module

Модуль для валидации JSON контрактов (таблиц стилей нумерации).
"""

from .validators import (
    ContractValidator,
    CounterStyleTableValidator,
    SchemaLoader,
    validate_counter_style_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CounterStyleTableValidator",
    # Functions
    "validate_counter_style_table",
]
