"""Ladder — модели лестницы точностей для кэшированных констант

Лестница (ladder) — последовательность округлённых копий константы
с точностями 1, 2, 4, 8, ... значащих цифр.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LadderBound(str, Enum):
    """Верхняя граница лестницы точностей.

    - LITERAL_LENGTH: длина строки литерала (превышает число значащих цифр
      на количество точек, знаков, ведущих нулей и символов экспоненты;
      лишние ступени совпадают с unrounded и безвредны)
    - SIGNIFICANT_DIGITS: точное число значащих цифр литерала
    """

    LITERAL_LENGTH = "LITERAL_LENGTH"
    SIGNIFICANT_DIGITS = "SIGNIFICANT_DIGITS"


class LadderSnapshot(BaseModel):
    """Диагностическое описание построенного кэша константы."""

    name: str = Field(..., min_length=1, description="Имя константы")
    literal_length: int = Field(..., ge=1, description="Длина строки литерала")
    significant_digits: int = Field(..., ge=1, description="Значащие цифры unrounded")
    tier_precisions: tuple[int, ...] = Field(..., description="Точности ступеней: 1, 2, 4, ...")
    bound: LadderBound = Field(..., description="Политика верхней границы")

    model_config = {"frozen": True}

    @field_validator("tier_precisions")
    @classmethod
    def validate_powers_of_two(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Ступень i обязана иметь точность ровно 2^i"""
        for i, precision in enumerate(v):
            if precision != 1 << i:
                raise ValueError(f"tier {i} must have precision {1 << i}, got {precision}")
        return v

    @property
    def max_tier_precision(self) -> int:
        """Точность самой точной ступени (0 если лестница пуста)"""
        if not self.tier_precisions:
            return 0
        return self.tier_precisions[-1]
