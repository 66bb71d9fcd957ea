"""Rounding — контекст округления для decimal-движка

Immutable Pydantic модель, описывающая запрос "округлить до N значащих цифр
режимом M в пределах экспонент [min, max]". Переводится в decimal.Context,
который и выполняет округление.
"""

import decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ГРАНИЦЫ ЭКСПОНЕНТ ДВИЖКА
# =============================================================================

# Общий для всего движка диапазон (adjusted) экспонент
MAX_EXPONENT: Final[int] = 100_000
MIN_EXPONENT: Final[int] = -MAX_EXPONENT

# Сигналы, которые при округлении превращаются в exception.
# Inexact/Rounded не ловятся: потеря цифр при округлении ожидаема.
TRAPPED_SIGNALS: Final[tuple] = (
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
    decimal.Underflow,
    decimal.Subnormal,
)


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления.

    Значения совпадают с константами модуля decimal, поэтому передаются
    в decimal.Context без преобразования.
    """

    HALF_UP = decimal.ROUND_HALF_UP
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    DOWN = decimal.ROUND_DOWN
    UP = decimal.ROUND_UP
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR


# =============================================================================
# MODELS
# =============================================================================


class RoundingContext(BaseModel):
    """Параметры одного округления.

    Содержит:
    - precision: число значащих цифр результата (>= 1)
    - rounding: режим округления (default: HALF_UP)
    - min_exponent / max_exponent: допустимый диапазон adjusted экспоненты
    """

    precision: int = Field(..., ge=1, description="Значащие цифры результата")
    rounding: RoundingMode = Field(RoundingMode.HALF_UP, description="Режим округления")
    min_exponent: int = Field(MIN_EXPONENT, le=0, description="Минимальная экспонента")
    max_exponent: int = Field(MAX_EXPONENT, ge=0, description="Максимальная экспонента")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_exponent_range(self) -> "RoundingContext":
        """Диапазон экспонент не может быть пустым."""
        if self.min_exponent > self.max_exponent:
            raise ValueError(
                f"min_exponent {self.min_exponent} must be <= max_exponent {self.max_exponent}"
            )
        return self

    def to_decimal_context(self) -> decimal.Context:
        """
        Построение decimal.Context для этого округления.

        Returns:
            Новый decimal.Context; выход за границы экспонент даёт exception
        """
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding.value,
            Emin=self.min_exponent,
            Emax=self.max_exponent,
            traps=list(TRAPPED_SIGNALS),
        )
