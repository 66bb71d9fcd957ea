"""Конфигурация построения лестницы точностей."""

from dataclasses import dataclass

from src.core.domain.ladder import LadderBound
from src.core.domain.rounding import (
    MAX_EXPONENT,
    MIN_EXPONENT,
    RoundingContext,
    RoundingMode,
)


@dataclass(frozen=True)
class LadderConfig:
    """Конфигурация TieredPrecisionCache.

    Defaults воспроизводят поведение встроенных констант:
    round-half-up, глобальные границы экспонент движка и
    граница лестницы по длине литерала.
    """

    rounding: RoundingMode = RoundingMode.HALF_UP
    min_exponent: int = MIN_EXPONENT
    max_exponent: int = MAX_EXPONENT
    bound: LadderBound = LadderBound.LITERAL_LENGTH

    def __post_init__(self):
        if self.min_exponent > 0:
            raise ValueError(f"min_exponent must be <= 0, got {self.min_exponent}")
        if self.max_exponent < 0:
            raise ValueError(f"max_exponent must be >= 0, got {self.max_exponent}")

    def context_for(self, precision: int) -> RoundingContext:
        """Контекст округления для ступени с заданной точностью."""
        return RoundingContext(
            precision=precision,
            rounding=self.rounding,
            min_exponent=self.min_exponent,
            max_exponent=self.max_exponent,
        )
