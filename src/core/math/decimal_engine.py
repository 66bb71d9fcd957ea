"""
Decimal Engine — граница с arbitrary-precision арифметикой

Тонкая обёртка над модулем decimal:
- parse_decimal: точный разбор литерала (без округления)
- round_decimal: округление по RoundingContext
- significant_digits: число значащих цифр коэффициента

Ошибки движка (decimal.DecimalException) не перехватываются здесь:
решение о том, фатальна ли ошибка, принимает вызывающий код.
"""

import decimal
import re
from decimal import Decimal
from typing import Final

from src.core.domain.rounding import MAX_EXPONENT, MIN_EXPONENT, RoundingContext

# Строгая ASCII-грамматика литерала: без пробелов, "_" и не-ASCII цифр,
# которые Decimal(str) молча принимает
LITERAL_PATTERN: Final[re.Pattern] = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|s?nan\d*)",
    re.ASCII | re.IGNORECASE,
)


def parse_decimal(literal: str) -> Decimal:
    """
    Точный разбор десятичного литерала.

    Литерал сначала сверяется со строгой ASCII-грамматикой (LITERAL_PATTERN).
    Затем разбор выполняется в локальном контексте с включённым trap на
    InvalidOperation, так что некорректная строка всегда даёт exception,
    даже если глобальный контекст потока его отключил.

    Args:
        literal: Строка вида "2.3025850929940456840..."

    Returns:
        Decimal со всеми цифрами литерала

    Raises:
        decimal.InvalidOperation: Если строка не является числом
    """
    if LITERAL_PATTERN.fullmatch(literal) is None:
        raise decimal.InvalidOperation(f"Invalid decimal literal: {literal!r}")

    with decimal.localcontext() as ctx:
        ctx.traps[decimal.InvalidOperation] = True
        return Decimal(literal)


def round_decimal(context: RoundingContext, value: Decimal) -> Decimal:
    """
    Округление value до context.precision значащих цифр.

    Args:
        context: Параметры округления
        value: Исходное значение

    Returns:
        Новый Decimal, округлённый по context

    Raises:
        decimal.Overflow, decimal.Underflow, decimal.Subnormal:
            Если результат выходит за [min_exponent, max_exponent]

    Examples:
        >>> round_decimal(RoundingContext(precision=3), Decimal("2.3025"))
        Decimal('2.30')
        >>> round_decimal(RoundingContext(precision=1), Decimal("0.25"))
        Decimal('0.3')
    """
    return context.to_decimal_context().plus(value)


def significant_digits(value: Decimal) -> int:
    """
    Число значащих цифр коэффициента.

    Ведущие нули не считаются (их нет в коэффициенте), хвостовые считаются:
    Decimal("2.30") имеет 3 значащие цифры. Ноль имеет одну.

    Args:
        value: Конечный Decimal

    Returns:
        len(коэффициента)

    Examples:
        >>> significant_digits(Decimal("0.0012"))
        2
        >>> significant_digits(Decimal("2.30"))
        3
    """
    return len(value.as_tuple().digits)


__all__ = [
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    "parse_decimal",
    "round_decimal",
    "significant_digits",
]
