"""
Built-in Constants — встроенные константы движка

Все значения строятся eagerly при импорте модуля. Ошибка в любом литерале
прерывает импорт (ConstantInitializationError), поэтому код, который
успешно импортировал этот модуль, видит только полностью построенные и
замороженные константы.
"""

from decimal import Decimal
from typing import Final

from src.core.constants import literals
from src.core.constants.catalog import ConstantCatalog
from src.core.constants.registry import register_constant
from src.core.constants.tiered_cache import TieredPrecisionCache

# =============================================================================
# КОРОТКИЕ КОНСТАНТЫ (seeds арифметики)
# =============================================================================

DECIMAL_ZERO: Final[Decimal] = register_constant("0")
DECIMAL_ONE_EIGHTH: Final[Decimal] = register_constant("0.125")
DECIMAL_HALF: Final[Decimal] = register_constant("0.5")
DECIMAL_ONE: Final[Decimal] = register_constant("1")
DECIMAL_TWO: Final[Decimal] = register_constant("2")
DECIMAL_THREE: Final[Decimal] = register_constant("3")
DECIMAL_EIGHT: Final[Decimal] = register_constant("8")

# Коэффициенты полинома начального приближения cube root
DECIMAL_CBRT_C1: Final[Decimal] = register_constant(literals.STR_CBRT_C1)
DECIMAL_CBRT_C2: Final[Decimal] = register_constant(literals.STR_CBRT_C2)
DECIMAL_CBRT_C3: Final[Decimal] = register_constant(literals.STR_CBRT_C3)

# =============================================================================
# КЭШИРОВАННЫЕ КОНСТАНТЫ (лестница точностей)
# =============================================================================

# Seeds для reciprocal-деления: 48/17 и 32/17
DECIMAL_QUO_C1: Final[TieredPrecisionCache] = TieredPrecisionCache.build(literals.STR_48_DIV_17)
DECIMAL_QUO_C2: Final[TieredPrecisionCache] = TieredPrecisionCache.build(literals.STR_32_DIV_17)

# ln(10)
DECIMAL_LN10: Final[TieredPrecisionCache] = TieredPrecisionCache.build(literals.STR_LN10)
# 1/ln(10)
DECIMAL_INV_LN10: Final[TieredPrecisionCache] = TieredPrecisionCache.build(literals.STR_INV_LN10)

# =============================================================================
# КАТАЛОГ
# =============================================================================

BUILTIN_CONSTANTS: Final[ConstantCatalog] = ConstantCatalog()

for _name, _value in (
    ("zero", DECIMAL_ZERO),
    ("one_eighth", DECIMAL_ONE_EIGHTH),
    ("half", DECIMAL_HALF),
    ("one", DECIMAL_ONE),
    ("two", DECIMAL_TWO),
    ("three", DECIMAL_THREE),
    ("eight", DECIMAL_EIGHT),
    ("cbrt_c1", DECIMAL_CBRT_C1),
    ("cbrt_c2", DECIMAL_CBRT_C2),
    ("cbrt_c3", DECIMAL_CBRT_C3),
    ("quo_c1", DECIMAL_QUO_C1),
    ("quo_c2", DECIMAL_QUO_C2),
    ("ln10", DECIMAL_LN10),
    ("inv_ln10", DECIMAL_INV_LN10),
):
    BUILTIN_CONSTANTS.register(_name, _value)

BUILTIN_CONSTANTS.freeze()
del _name, _value
