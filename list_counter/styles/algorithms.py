"""
Algorithms — Алгоритмы нумерации как tagged union

Каждая система (System) представлена собственной immutable Pydantic моделью,
которая хранит только нужные ей данные:
- CyclicAlgorithm / FixedAlgorithm / SymbolicAlgorithm: symbols (>= 1)
- NumericAlgorithm / AlphabeticAlgorithm: symbols (>= 2)
- AdditiveAlgorithm: additive_symbols (>= 1, веса строго убывают)

NumeralAlgorithm — discriminated union по полю `system`. Недопустимые
состояния (например, additive без таблицы весов) не конструируются.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from list_counter.core.domain.system import System
from list_counter.core.math.numerals import (
    additive_numeral,
    alphabetic_numeral,
    cyclic_numeral,
    fixed_numeral,
    numeric_numeral,
    symbolic_numeral,
)


# =============================================================================
# ADDITIVE TUPLE
# =============================================================================


class AdditiveTuple(BaseModel):
    """Пара (weight, symbol) для аддитивной системы"""

    weight: int = Field(..., ge=0, description="Вес символа (>= 0)")
    symbol: str = Field(..., description="Символ, соответствующий весу")

    model_config = {"frozen": True}


# =============================================================================
# SYMBOL-BASED ALGORITHMS
# =============================================================================


class CyclicAlgorithm(BaseModel):
    """Циклическая система (disc, circle, square, disclosure-*)"""

    system: Literal["cyclic"] = "cyclic"
    symbols: tuple[str, ...] = Field(..., min_length=1, description="Символы цикла")

    model_config = {"frozen": True}

    @property
    def kind(self) -> System:
        return System.CYCLIC

    def represent(self, magnitude: int) -> Optional[str]:
        return cyclic_numeral(self.symbols, magnitude)


class FixedAlgorithm(BaseModel):
    """
    Фиксированная система (cjk-earthly-branch, cjk-heavenly-stem).

    first_symbol_value: значение первого символа (CSS `fixed <integer>`).
    """

    system: Literal["fixed"] = "fixed"
    symbols: tuple[str, ...] = Field(..., min_length=1, description="Символы по порядку")
    first_symbol_value: int = Field(1, description="Значение первого символа")

    model_config = {"frozen": True}

    @property
    def kind(self) -> System:
        return System.FIXED

    def represent(self, magnitude: int) -> Optional[str]:
        return fixed_numeral(self.symbols, magnitude, self.first_symbol_value)


class NumericAlgorithm(BaseModel):
    """Позиционная система (decimal, arabic-indic, devanagari, ...)"""

    system: Literal["numeric"] = "numeric"
    symbols: tuple[str, ...] = Field(..., min_length=2, description="Цифры, начиная с нуля")

    model_config = {"frozen": True}

    @property
    def kind(self) -> System:
        return System.NUMERIC

    def represent(self, magnitude: int) -> Optional[str]:
        return numeric_numeral(self.symbols, magnitude)


class AlphabeticAlgorithm(BaseModel):
    """Биективная система (lower-alpha, lower-greek, hiragana, ...)"""

    system: Literal["alphabetic"] = "alphabetic"
    symbols: tuple[str, ...] = Field(..., min_length=2, description="Буквы алфавита")

    model_config = {"frozen": True}

    @property
    def kind(self) -> System:
        return System.ALPHABETIC

    def represent(self, magnitude: int) -> Optional[str]:
        return alphabetic_numeral(self.symbols, magnitude)


class SymbolicAlgorithm(BaseModel):
    """Символьная система (*, **, ***, ...)"""

    system: Literal["symbolic"] = "symbolic"
    symbols: tuple[str, ...] = Field(..., min_length=1, description="Повторяемые символы")

    model_config = {"frozen": True}

    @property
    def kind(self) -> System:
        return System.SYMBOLIC

    def represent(self, magnitude: int) -> Optional[str]:
        return symbolic_numeral(self.symbols, magnitude)


# =============================================================================
# ADDITIVE ALGORITHM
# =============================================================================


class AdditiveAlgorithm(BaseModel):
    """
    Аддитивная система (upper-roman, armenian, georgian, hebrew, ...).

    additive_symbols задаются в порядке строгого убывания весов.
    """

    system: Literal["additive"] = "additive"
    additive_symbols: tuple[AdditiveTuple, ...] = Field(
        ..., min_length=1, description="Пары (weight, symbol) по убыванию weight"
    )

    model_config = {"frozen": True}

    @field_validator("additive_symbols")
    @classmethod
    def validate_descending_weights(
        cls, v: tuple[AdditiveTuple, ...]
    ) -> tuple[AdditiveTuple, ...]:
        """Проверка, что веса строго убывают"""
        for previous, current in zip(v, v[1:]):
            if current.weight >= previous.weight:
                raise ValueError(
                    f"additive weights must be strictly descending: "
                    f"{previous.weight} followed by {current.weight}"
                )
        return v

    @property
    def kind(self) -> System:
        return System.ADDITIVE

    def represent(self, magnitude: int) -> Optional[str]:
        return additive_numeral(
            [(t.weight, t.symbol) for t in self.additive_symbols], magnitude
        )


# =============================================================================
# TAGGED UNION
# =============================================================================


NumeralAlgorithm = Annotated[
    Union[
        CyclicAlgorithm,
        FixedAlgorithm,
        NumericAlgorithm,
        AlphabeticAlgorithm,
        SymbolicAlgorithm,
        AdditiveAlgorithm,
    ],
    Field(discriminator="system"),
]
