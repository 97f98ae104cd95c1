"""
Domain models and value objects.

Contains fundamental entities like IntRange, System, Counter.
"""

from list_counter.core.domain.counter import Counter
from list_counter.core.domain.int_range import IntRange
from list_counter.core.domain.system import System

__all__ = [
    "Counter",
    "IntRange",
    "System",
]
