"""
IntRange — Включительный диапазон целых чисел

CSS Counter Styles Level 3, §3.1.3 (range descriptor)

Immutable Pydantic модель. Отсутствующая граница (None) означает
бесконечность в соответствующую сторону:
- min=None → -∞
- max=None → +∞
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class IntRange(BaseModel):
    """
    Включительный диапазон [min, max] целых чисел.

    Используется counter style для ограничения значений, которые он
    способен отобразить. Значения вне диапазона уходят в fallback.
    """

    min: Optional[int] = Field(None, description="Нижняя граница (включительно), None = -∞")
    max: Optional[int] = Field(None, description="Верхняя граница (включительно), None = +∞")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "IntRange":
        """Проверка, что min <= max (если обе границы заданы)"""
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"range min {self.min} must be <= max {self.max}")
        return self

    @classmethod
    def infinite(cls) -> "IntRange":
        """Неограниченный диапазон (эквивалентно IntRange())"""
        return cls()

    def within_range(self, value: int) -> bool:
        """
        Проверка попадания значения в диапазон.

        Args:
            value: Проверяемое значение

        Returns:
            True если (min отсутствует или min <= value) и (max отсутствует или max >= value)
        """
        if self.min is not None and self.min > value:
            return False
        if self.max is not None and self.max < value:
            return False

        return True

    def is_infinite(self) -> bool:
        """True если обе границы отсутствуют"""
        return self.min is None and self.max is None
