"""list_counter — счётчики и стили нумерации по модели CSS Counter Styles.

Пример:
    >>> from list_counter import Counter, default_registry
    >>> counter = Counter("item")
    >>> counter.increment(4)
    >>> default_registry().lookup("upper-roman").generate_marker_content(counter.value)
    'IV. '
"""

from list_counter.core.domain import Counter, IntRange, System
from list_counter.styles import (
    DECIMAL,
    CounterStyle,
    CounterStyleRegistry,
    RegistryConfig,
    default_registry,
    load_counter_styles,
    predefined_counter_styles,
)

__all__ = [
    "Counter",
    "IntRange",
    "System",
    "CounterStyle",
    "DECIMAL",
    "CounterStyleRegistry",
    "RegistryConfig",
    "default_registry",
    "load_counter_styles",
    "predefined_counter_styles",
]
