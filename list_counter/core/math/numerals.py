"""
Numerals — Чистые алгоритмы построения числовых представлений

CSS Counter Styles Level 3, §3.1.1 (counter algorithms)

Модуль содержит по одной функции на каждую систему нумерации:
- cyclic: циклический перебор символов
- fixed: однократный проход по символам
- numeric: позиционная система с основанием n (первый символ = 0)
- alphabetic: биективная система с основанием n (нет символа для 0)
- symbolic: повтор символа на каждом новом круге
- additive: знаково-аддитивное разложение по весам (римские цифры)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. На вход подаётся только неотрицательное значение (знак добавляет CounterStyle)
2. Если система не может представить значение, возвращается None
   (решение о fallback принимает вызывающая сторона)
3. Функции детерминированы и не имеют побочных эффектов
"""

from typing import Optional, Sequence, Tuple


# =============================================================================
# ВАЛИДАЦИЯ ВХОДА
# =============================================================================


def _require_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError(f"numeral value must be non-negative, got {value}")


def _require_symbols(symbols: Sequence[str], minimum: int) -> None:
    if len(symbols) < minimum:
        raise ValueError(f"at least {minimum} symbol(s) required, got {len(symbols)}")


# =============================================================================
# CYCLIC / FIXED
# =============================================================================


def cyclic_numeral(symbols: Sequence[str], value: int) -> str:
    """
    Циклическая система: символы перебираются по кругу.

    CSS Counter Styles §3.1.1.1: symbols[(value - 1) mod n]

    Args:
        symbols: Непустой список символов
        value: Неотрицательное значение

    Returns:
        Один символ из symbols

    Examples:
        >>> cyclic_numeral(["•"], 7)
        '•'
        >>> cyclic_numeral(["a", "b", "c"], 4)
        'a'
    """
    _require_non_negative(value)
    _require_symbols(symbols, 1)
    return symbols[(value - 1) % len(symbols)]


def fixed_numeral(
    symbols: Sequence[str], value: int, first_symbol_value: int = 1
) -> Optional[str]:
    """
    Фиксированная система: каждый символ представляет ровно одно значение.

    CSS Counter Styles §3.1.1.2: символ k представляет first_symbol_value + k.
    Когда символы закончились, значение не представимо.

    Args:
        symbols: Непустой список символов
        value: Неотрицательное значение
        first_symbol_value: Значение первого символа (по умолчанию 1)

    Returns:
        Символ или None, если value вне [first, first + n - 1]
    """
    _require_non_negative(value)
    _require_symbols(symbols, 1)

    offset = value - first_symbol_value
    if 0 <= offset < len(symbols):
        return symbols[offset]
    return None


# =============================================================================
# NUMERIC / ALPHABETIC
# =============================================================================


def numeric_numeral(symbols: Sequence[str], value: int) -> str:
    """
    Позиционная система счисления с основанием n = len(symbols).

    CSS Counter Styles §3.1.1.4: первый символ обозначает 0,
    второй 1 и так далее. Для value = 0 возвращается symbols[0].

    Examples:
        >>> numeric_numeral("0123456789", 2049)
        '2049'
        >>> numeric_numeral(["0", "1"], 5)
        '101'
    """
    _require_non_negative(value)
    _require_symbols(symbols, 2)

    n = len(symbols)
    if value == 0:
        return symbols[0]

    digits = []
    while value != 0:
        digits.append(symbols[value % n])
        value //= n

    return "".join(reversed(digits))


def alphabetic_numeral(symbols: Sequence[str], value: int) -> Optional[str]:
    """
    Биективная система с основанием n ("нумерация колонок таблицы").

    CSS Counter Styles §3.1.1.5: ни один символ не обозначает 0,
    после n символов длина удваивается (a, ..., z, aa, ab, ...).

    Returns:
        Представление или None для value = 0 (ноль не представим)

    Examples:
        >>> alphabetic_numeral("abcdefghijklmnopqrstuvwxyz", 27)
        'aa'
    """
    _require_non_negative(value)
    _require_symbols(symbols, 2)

    if value == 0:
        return None

    n = len(symbols)
    letters = []
    while value != 0:
        value -= 1
        letters.append(symbols[value % n])
        value //= n

    return "".join(reversed(letters))


# =============================================================================
# SYMBOLIC
# =============================================================================


def symbolic_numeral(symbols: Sequence[str], value: int) -> str:
    """
    Символьная система: symbols[(value - 1) mod n], повторённый
    (value // n) + 1 раз.

    Examples:
        >>> symbolic_numeral(["*", "†"], 3)
        '**'
    """
    _require_non_negative(value)
    _require_symbols(symbols, 1)

    n = len(symbols)
    return symbols[(value - 1) % n] * ((value // n) + 1)


# =============================================================================
# ADDITIVE
# =============================================================================


def additive_numeral(tuples: Sequence[Tuple[int, str]], value: int) -> Optional[str]:
    """
    Аддитивная (sign-value) система: значение равно сумме весов символов.

    CSS Counter Styles §3.1.1.6:
    - value = 0: символ с весом 0, если он есть, иначе не представимо
    - иначе: проход по (weight, symbol) в порядке убывания весов (вес 0
      пропускается), символ повторяется remaining // weight раз
    - если веса закончились, а остаток > 0, значение не представимо

    Args:
        tuples: Пары (weight, symbol) в порядке убывания weight
        value: Неотрицательное значение

    Returns:
        Представление или None

    Examples:
        >>> additive_numeral([(10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I")], 19)
        'XIX'
    """
    _require_non_negative(value)
    _require_symbols(tuples, 1)

    if value == 0:
        for weight, symbol in tuples:
            if weight == 0:
                return symbol
        return None

    remaining = value
    parts = []
    for weight, symbol in tuples:
        if weight == 0 or weight > remaining:
            continue

        reps = remaining // weight
        parts.append(symbol * reps)
        remaining -= weight * reps
        if remaining == 0:
            return "".join(parts)

    return None
