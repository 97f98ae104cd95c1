"""
CounterStyle — Стиль нумерации и движок форматирования

CSS Counter Styles Level 3, §3 (defining custom counter styles)
CSS Counter Styles Level 3, §2 (generating a counter representation)

Immutable Pydantic модель: имя, алгоритм системы (NumeralAlgorithm),
negative / prefix / suffix, range, pad и fallback.

Форматирование:
1. Значение вне range → raw-представление fallback стиля (без знака,
   pad, prefix/suffix исходного стиля)
2. Иначе raw-представление abs(value) (повторная проверка range уже
   по модулю значения)
3. value < 0 → pad до (pad_length - len(negative)), затем negative
4. value >= 0 → pad до pad_length

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. generate_counter_content / generate_marker_content не бросают
   исключений ни для какого int
2. Fallback всегда вызывает raw-алгоритм, а не generate_*: оформляет
   результат только внешний стиль
3. Цепочка fallback конечна (циклы разрываются через decimal)
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from pydantic import BaseModel, Field, model_validator

from list_counter.core.domain.int_range import IntRange
from list_counter.core.domain.system import System
from list_counter.core.math.numerals import numeric_numeral
from list_counter.styles.algorithms import AdditiveTuple, NumeralAlgorithm

if TYPE_CHECKING:
    from list_counter.styles.registry import CounterStyleRegistry

logger = logging.getLogger(__name__)

DECIMAL_DIGITS: tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
_FLAT_DESCRIPTORS = ("system", "symbols", "additive_symbols", "first_symbol_value")


# =============================================================================
# HELPERS
# =============================================================================


def _pad_left(text: str, width: int, pad_character: str) -> str:
    """Дополнение слева до width (многосимвольный pad может дать длину > width)"""
    missing = width - len(text)
    if missing <= 0 or not pad_character:
        return text
    return pad_character * missing + text


def _normalize_additive_symbols(value: Any) -> list:
    """Mapping weight → symbol, пары (weight, symbol) или dict → список для AdditiveTuple"""
    if isinstance(value, Mapping):
        return [{"weight": weight, "symbol": symbol} for weight, symbol in value.items()]

    tuples = []
    for item in value:
        if isinstance(item, (AdditiveTuple, Mapping)):
            tuples.append(item)
        else:
            weight, symbol = item
            tuples.append({"weight": weight, "symbol": symbol})
    return tuples


def _system_of(algorithm: Any) -> System:
    if isinstance(algorithm, Mapping):
        return System(algorithm["system"])
    return algorithm.kind


def _terminal_decimal(value: int) -> str:
    """Последний рубеж: десятичное представление без обращения к registry"""
    digits = numeric_numeral(DECIMAL_DIGITS, abs(value))
    return f"-{digits}" if value < 0 else digits


def _resolve_registry(registry: Optional["CounterStyleRegistry"]) -> "CounterStyleRegistry":
    if registry is not None:
        return registry

    from list_counter.styles.registry import default_registry

    return default_registry()


# =============================================================================
# COUNTER STYLE
# =============================================================================


class CounterStyle(BaseModel):
    """
    Именованный стиль нумерации.

    Создаётся через плоский набор дескрипторов (system, symbols,
    additive_symbols, ...) либо готовый algorithm. Неизменяем после
    создания, может разделяться между потоками и registry.
    """

    name: str = Field(..., min_length=1, description="Уникальное имя стиля")
    algorithm: NumeralAlgorithm = Field(..., description="Алгоритм системы нумерации")
    negative: str = Field("-", description="Знак для отрицательных значений")
    prefix: str = Field("", description="Prefix marker content")
    suffix: str = Field(". ", description="Suffix marker content")
    range: IntRange = Field(..., description="Диапазон значений стиля")
    pad_length: int = Field(0, ge=0, description="Минимальная длина (включая negative)")
    pad_character: str = Field("", description="Символ дополнения слева")
    fallback: str = Field("decimal", description="Имя fallback стиля")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def build_algorithm(cls, data: Any) -> Any:
        """
        Сборка algorithm из плоских дескрипторов и range по умолчанию.

        Плоская форма: system, symbols, additive_symbols, first_symbol_value.
        """
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        if "algorithm" in data:
            flat = sorted(key for key in _FLAT_DESCRIPTORS if key in data)
            if flat:
                raise ValueError(f"algorithm cannot be combined with flat descriptors: {flat}")
        else:
            system = System(data.pop("system", System.SYMBOLIC))
            symbols = data.pop("symbols", None) or ()
            additive_symbols = data.pop("additive_symbols", None) or ()
            first_symbol_value = data.pop("first_symbol_value", None)

            if first_symbol_value is not None and system != System.FIXED:
                raise ValueError(
                    f"first_symbol_value applies only to fixed system, got {system.value}"
                )

            if not symbols and not additive_symbols:
                raise ValueError("either symbols or additive_symbols must be non-empty")

            algorithm: dict = {"system": system.value}
            if system == System.ADDITIVE:
                algorithm["additive_symbols"] = _normalize_additive_symbols(additive_symbols)
            else:
                algorithm["symbols"] = list(symbols)
                if first_symbol_value is not None:
                    algorithm["first_symbol_value"] = first_symbol_value
            data["algorithm"] = algorithm

        if data.get("range") is None:
            data["range"] = _system_of(data["algorithm"]).default_range

        return data

    @classmethod
    def define(
        cls,
        *,
        name: str,
        system: Union[System, str] = System.SYMBOLIC,
        negative: str = "-",
        prefix: str = "",
        suffix: str = ". ",
        range: Optional[IntRange] = None,
        pad_length: int = 0,
        pad_character: str = "",
        fallback: str = "decimal",
        symbols: Iterable[str] = (),
        additive_symbols: Any = (),
        first_symbol_value: Optional[int] = None,
    ) -> "CounterStyle":
        """
        Создание стиля по дескрипторам CSS @counter-style.

        Args:
            name: Имя стиля (ключ в registry)
            system: Система нумерации (по умолчанию symbolic)
            negative: Знак для отрицательных значений
            prefix: Prefix marker content
            suffix: Suffix marker content (по умолчанию ". ")
            range: Диапазон; None → range системы по умолчанию
            pad_length: Минимальная длина, включая negative (>= 0)
            pad_character: Символ дополнения слева
            fallback: Имя fallback стиля
            symbols: Символы (все системы, кроме additive)
            additive_symbols: Mapping weight → symbol либо пары (additive)
            first_symbol_value: Значение первого символа (только fixed, None → 1)

        Raises:
            ValidationError: Если дескрипторы нарушают контракт системы
        """
        return cls(
            name=name,
            system=system,
            negative=negative,
            prefix=prefix,
            suffix=suffix,
            range=range,
            pad_length=pad_length,
            pad_character=pad_character,
            fallback=fallback,
            symbols=list(symbols),
            additive_symbols=additive_symbols,
            first_symbol_value=first_symbol_value,
        )

    @property
    def system(self) -> System:
        """Система нумерации стиля"""
        return self.algorithm.kind

    # -------------------------------------------------------------------------
    # Public formatting API
    # -------------------------------------------------------------------------

    def generate_marker_content(
        self, value: int, registry: Optional["CounterStyleRegistry"] = None
    ) -> str:
        """prefix + generate_counter_content(value) + suffix"""
        return f"{self.prefix}{self.generate_counter_content(value, registry)}{self.suffix}"

    def generate_counter_content(
        self, value: int, registry: Optional["CounterStyleRegistry"] = None
    ) -> str:
        """
        Представление значения счётчика (без prefix/suffix).

        Args:
            value: Значение счётчика (любой int)
            registry: Registry для разрешения fallback; None → default_registry()

        Returns:
            Строковое представление (с negative и pad, если применимо)
        """
        registry = _resolve_registry(registry)

        if not self.range.within_range(value):
            return self._fallback_representation(value, registry, (self.name,))

        initial = self._raw(abs(value), registry, (self.name,))

        if value < 0:
            padded = _pad_left(initial, self.pad_length - len(self.negative), self.pad_character)
            return f"{self.negative}{padded}"

        return _pad_left(initial, self.pad_length, self.pad_character)

    def raw_representation(
        self, value: int, registry: Optional["CounterStyleRegistry"] = None
    ) -> str:
        """
        Raw-алгоритм: представление без pad и prefix/suffix.

        Повторно проверяет range (уже для переданного значения) и при
        невозможности представления уходит в fallback.
        """
        return self._raw(value, _resolve_registry(registry), (self.name,))

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _raw(self, value: int, registry: "CounterStyleRegistry", visited: tuple[str, ...]) -> str:
        if self.range.within_range(value):
            text = self.algorithm.represent(abs(value))
            if text is not None:
                # Отрицательное значение доходит сюда только через fallback вне range
                return text if value >= 0 else f"{self.negative}{text}"

        return self._fallback_representation(value, registry, visited)

    def _fallback_representation(
        self, value: int, registry: "CounterStyleRegistry", visited: tuple[str, ...]
    ) -> str:
        style = registry.lookup(self.fallback)

        if style.name in visited:
            logger.warning(
                "Counter style fallback cycle %s -> %s, resolving %d with decimal",
                " -> ".join(visited),
                self.fallback,
                value,
            )
            style = registry.lookup("decimal")
            if style.name in visited:
                return _terminal_decimal(value)

        logger.debug("Counter style %r falls back to %r for %d", self.name, style.name, value)
        return style._raw(value, registry, visited + (style.name,))


# =============================================================================
# BUILT-IN DECIMAL
# =============================================================================


# Гарантированно тотальный стиль: numeric по основанию 10, range (-∞, +∞)
DECIMAL = CounterStyle(name="decimal", system=System.NUMERIC, symbols=list(DECIMAL_DIGITS))
