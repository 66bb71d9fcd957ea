"""
Constant Registry — разбор встроенных литералов в Decimal

Каждый встроенный литерал разбирается ровно один раз, при импорте пакета.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Литерал — данные библиотеки, а не пользовательский ввод
2. Ошибка разбора → ConstantInitializationError (fail-fast): импорт пакета
   констант прерывается, частично инициализированного состояния нет
3. NaN/Infinity не являются допустимыми константами
"""

import logging
from decimal import Decimal, InvalidOperation

from src.core.math.decimal_engine import parse_decimal

logger = logging.getLogger(__name__)

# Сколько символов литерала показывать в сообщениях об ошибке
_LITERAL_PREVIEW_CHARS = 32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConstantInitializationError(RuntimeError):
    """
    Критическая ошибка инициализации встроенной константы.

    Дефект в данных самой библиотеки (некорректный литерал, ошибка
    округления ступени). Вызывающий код не может его исправить, поэтому
    исключение не перехватывается внутри библиотеки и прерывает импорт.
    """
    pass


def _preview(literal: str) -> str:
    if len(literal) <= _LITERAL_PREVIEW_CHARS:
        return repr(literal)
    return f"{literal[:_LITERAL_PREVIEW_CHARS]!r}... ({len(literal)} chars)"


def _fatal(message: str) -> ConstantInitializationError:
    logger.critical(message)
    return ConstantInitializationError(message)


# =============================================================================
# REGISTER CONSTANT
# =============================================================================


def register_constant(literal: str) -> Decimal:
    """
    Разбор встроенного литерала в Decimal.

    Args:
        literal: Десятичный литерал, заданный авторами библиотеки

    Returns:
        Точное значение литерала (без округления)

    Raises:
        ConstantInitializationError: Если литерал не строка, не разбирается
            или задаёт NaN/Infinity

    Examples:
        >>> register_constant("0.125")
        Decimal('0.125')
        >>> register_constant("not-a-number")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ConstantInitializationError: ...
    """
    if not isinstance(literal, str):
        raise _fatal(f"Constant literal must be str, got {type(literal).__name__}")

    try:
        value = parse_decimal(literal)
    except InvalidOperation as e:
        raise _fatal(f"Malformed constant literal {_preview(literal)}") from e

    if not value.is_finite():
        raise _fatal(f"Constant literal {_preview(literal)} is not finite")

    return value
