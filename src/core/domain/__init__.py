"""
Domain models and value objects.

Contains rounding contexts and precision ladder descriptions.
"""

from src.core.domain.ladder import LadderBound, LadderSnapshot
from src.core.domain.rounding import (
    MAX_EXPONENT,
    MIN_EXPONENT,
    TRAPPED_SIGNALS,
    RoundingContext,
    RoundingMode,
)

__all__ = [
    # Rounding
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    "TRAPPED_SIGNALS",
    "RoundingContext",
    "RoundingMode",
    # Ladder
    "LadderBound",
    "LadderSnapshot",
]
