"""
Constants — встроенные десятичные константы и их кэш точностей

Импорт пакета строит все константы; ошибка в данных прерывает импорт.
"""

from src.core.constants.builtin import (
    BUILTIN_CONSTANTS,
    DECIMAL_CBRT_C1,
    DECIMAL_CBRT_C2,
    DECIMAL_CBRT_C3,
    DECIMAL_EIGHT,
    DECIMAL_HALF,
    DECIMAL_INV_LN10,
    DECIMAL_LN10,
    DECIMAL_ONE,
    DECIMAL_ONE_EIGHTH,
    DECIMAL_QUO_C1,
    DECIMAL_QUO_C2,
    DECIMAL_THREE,
    DECIMAL_TWO,
    DECIMAL_ZERO,
)
from src.core.constants.catalog import ConstantCatalog
from src.core.constants.config import LadderConfig
from src.core.constants.registry import ConstantInitializationError, register_constant
from src.core.constants.tiered_cache import CacheState, FrozenCacheError, TieredPrecisionCache

__all__ = [
    # Registry
    "ConstantInitializationError",
    "register_constant",
    # Tiered cache
    "CacheState",
    "FrozenCacheError",
    "LadderConfig",
    "TieredPrecisionCache",
    # Catalog
    "BUILTIN_CONSTANTS",
    "ConstantCatalog",
    # Fixed constants
    "DECIMAL_ZERO",
    "DECIMAL_ONE_EIGHTH",
    "DECIMAL_HALF",
    "DECIMAL_ONE",
    "DECIMAL_TWO",
    "DECIMAL_THREE",
    "DECIMAL_EIGHT",
    "DECIMAL_CBRT_C1",
    "DECIMAL_CBRT_C2",
    "DECIMAL_CBRT_C3",
    # Tiered constants
    "DECIMAL_QUO_C1",
    "DECIMAL_QUO_C2",
    "DECIMAL_LN10",
    "DECIMAL_INV_LN10",
]
