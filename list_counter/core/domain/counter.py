"""Counter — Счётчик для автоматической нумерации

CSS Lists Level 3, §4 (auto-numbering)

Хранит целое значение, которое можно увеличивать на произвольный шаг
(в том числе отрицательный). Форматированием не занимается: текущее
значение передаётся в CounterStyle.

Переполнение: Python int имеет произвольную точность, значение
расширяется без ограничений (без насыщения).
"""

from dataclasses import dataclass


@dataclass
class Counter:
    """Именованный изменяемый счётчик.

    Не потокобезопасен: предполагается один writer на счётчик.
    """

    name: str
    value: int = 0

    def increment(self, by_value: int = 1) -> None:
        """Увеличение значения на by_value (по умолчанию 1, может быть < 0)"""
        self.value += by_value

    def reset(self) -> None:
        """Сброс значения в 0"""
        self.value = 0
