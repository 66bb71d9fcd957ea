"""
Core math modules

Целочисленные логарифмы и граница с decimal-движком.
"""

# Integer log2 (без float)
from src.core.math.integer_log import ceil_log2, floor_log2

# Decimal engine boundary
from src.core.math.decimal_engine import (
    MAX_EXPONENT,
    MIN_EXPONENT,
    parse_decimal,
    round_decimal,
    significant_digits,
)

__all__ = [
    # Integer log
    "ceil_log2",
    "floor_log2",
    # Decimal engine — Constants
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    # Decimal engine — Functions
    "parse_decimal",
    "round_decimal",
    "significant_digits",
]
