"""
Тесты встроенных констант

Проверяет:
1. Значения коротких констант и коэффициентов cube root
2. Лестницы ln 10, 1/ln 10, 48/17, 32/17
3. Свойства get для всех кэшированных констант
4. Каталог BUILTIN_CONSTANTS заморожен и полон
5. Ошибка в литерале прерывает выполнение модуля builtin
"""

import importlib.util
import sys
from decimal import Decimal, localcontext

import pytest

from src.core.constants import (
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
    CacheState,
    ConstantInitializationError,
    TieredPrecisionCache,
)
from src.core.constants import builtin, literals
from src.core.math.decimal_engine import significant_digits

TIERED = {
    "ln10": DECIMAL_LN10,
    "inv_ln10": DECIMAL_INV_LN10,
    "quo_c1": DECIMAL_QUO_C1,
    "quo_c2": DECIMAL_QUO_C2,
}


# =============================================================================
# ТЕСТЫ: Короткие константы
# =============================================================================


class TestFixedConstants:
    """Короткие константы без лестницы"""

    def test_values(self):
        assert DECIMAL_ZERO == 0
        assert DECIMAL_ONE_EIGHTH == Decimal("0.125")
        assert DECIMAL_HALF == Decimal("0.5")
        assert DECIMAL_ONE == 1
        assert DECIMAL_TWO == 2
        assert DECIMAL_THREE == 3
        assert DECIMAL_EIGHT == 8

    def test_seed_relations(self):
        """1/8 * 8 == 1, 1/2 * 2 == 1"""
        assert DECIMAL_ONE_EIGHTH * DECIMAL_EIGHT == DECIMAL_ONE
        assert DECIMAL_HALF * DECIMAL_TWO == DECIMAL_ONE

    def test_cbrt_coefficients(self):
        assert DECIMAL_CBRT_C1 == Decimal("-0.46946116")
        assert DECIMAL_CBRT_C2 == Decimal("1.072302")
        assert DECIMAL_CBRT_C3 == Decimal("0.3812513")

    def test_cbrt_polynomial_approximates_cube_root(self):
        """c1*x^2 + c2*x + c3 ≈ cbrt(x) на [0.125, 1]"""
        for x, expected in ((DECIMAL_ONE_EIGHTH, Decimal("0.5")), (DECIMAL_ONE, DECIMAL_ONE)):
            approx = DECIMAL_CBRT_C1 * x * x + DECIMAL_CBRT_C2 * x + DECIMAL_CBRT_C3
            assert abs(approx - expected) < Decimal("0.02")


# =============================================================================
# ТЕСТЫ: Кэшированные константы
# =============================================================================


class TestTieredConstants:
    """Лестницы встроенных длинных констант"""

    @pytest.mark.parametrize(
        "name,tiers",
        [("ln10", 12), ("inv_ln10", 12), ("quo_c1", 11), ("quo_c2", 11)],
    )
    def test_frozen_ladder(self, name: str, tiers: int):
        """ln10 (3012 символов) → 1..2048; 48/17 (2001 символ) → 1..1024"""
        cache = TIERED[name]
        assert cache.state is CacheState.FROZEN
        assert len(cache) == tiers
        assert cache.tier_precisions[-1] == 1 << (tiers - 1)

    def test_unrounded_digit_counts(self):
        assert significant_digits(DECIMAL_LN10.unrounded) == 3011
        assert significant_digits(DECIMAL_INV_LN10.unrounded) == 2995
        assert significant_digits(DECIMAL_QUO_C1.unrounded) == 2000
        assert significant_digits(DECIMAL_QUO_C2.unrounded) == 2000

    def test_unrounded_matches_literal(self):
        assert str(DECIMAL_LN10.unrounded) == literals.STR_LN10
        assert str(DECIMAL_INV_LN10.unrounded) == literals.STR_INV_LN10

    def test_known_prefixes(self):
        assert DECIMAL_LN10.get(8) == Decimal("2.3025851")
        assert DECIMAL_INV_LN10.get(8) == Decimal("0.43429448")
        assert DECIMAL_QUO_C1.get(4) == Decimal("2.824")
        assert DECIMAL_QUO_C2.get(4) == Decimal("1.882")

    def test_ln10_times_inverse_is_one(self):
        """ln10 * (1/ln10) ≈ 1 на 100 цифрах"""
        with localcontext() as ctx:
            ctx.prec = 120
            product = DECIMAL_LN10.get(128) * DECIMAL_INV_LN10.get(128)
        assert abs(product - 1) < Decimal("1e-100")

    def test_quo_seeds(self):
        """48/17 и 32/17 совпадают с делением на 500 цифрах"""
        with localcontext() as ctx:
            ctx.prec = 512
            assert DECIMAL_QUO_C1.get(512) == Decimal(48) / Decimal(17)
            assert DECIMAL_QUO_C2.get(512) == Decimal(32) / Decimal(17)

    @pytest.mark.parametrize("name", sorted(TIERED))
    def test_never_under_delivers(self, name: str):
        cache = TIERED[name]
        for precision in range(1, 3100, 7):
            value = cache.get(precision)
            assert significant_digits(value) >= precision or value is cache.unrounded

    @pytest.mark.parametrize("name", sorted(TIERED))
    def test_beyond_ladder(self, name: str):
        cache = TIERED[name]
        top = cache.tier_precisions[-1]
        assert cache.get(top) is cache.tiers[-1]
        assert cache.get(top + 1) is cache.unrounded
        assert cache.get(10_000) is cache.unrounded

    @pytest.mark.parametrize("name", sorted(TIERED))
    def test_monotonic_and_idempotent(self, name: str):
        cache = TIERED[name]
        previous = 0
        for precision in range(0, 2200):
            value = cache.get(precision)
            assert value is cache.get(precision)
            digits = significant_digits(value)
            assert digits >= previous
            previous = digits

    def test_rebuild_is_bit_identical(self):
        rebuilt = TieredPrecisionCache.build(literals.STR_LN10)
        assert [t.as_tuple() for t in rebuilt.tiers] == [t.as_tuple() for t in DECIMAL_LN10.tiers]


# =============================================================================
# ТЕСТЫ: Каталог
# =============================================================================


class TestBuiltinCatalog:
    """BUILTIN_CONSTANTS"""

    def test_frozen(self):
        assert BUILTIN_CONSTANTS.frozen

    def test_names(self):
        assert set(BUILTIN_CONSTANTS.names()) == {
            "zero",
            "one_eighth",
            "half",
            "one",
            "two",
            "three",
            "eight",
            "cbrt_c1",
            "cbrt_c2",
            "cbrt_c3",
            "quo_c1",
            "quo_c2",
            "ln10",
            "inv_ln10",
        }

    def test_entries_are_module_singletons(self):
        assert BUILTIN_CONSTANTS.get("ln10") is DECIMAL_LN10
        assert BUILTIN_CONSTANTS.get("half") is DECIMAL_HALF
        assert BUILTIN_CONSTANTS.get_decimal("inv_ln10", precision=20) is DECIMAL_INV_LN10.get(20)

    def test_snapshots(self):
        snapshots = {s.name: s for s in BUILTIN_CONSTANTS.snapshots()}
        assert set(snapshots) == set(TIERED)
        assert snapshots["ln10"].literal_length == len(literals.STR_LN10)
        assert snapshots["ln10"].max_tier_precision == 2048


# =============================================================================
# ТЕСТЫ: Инициализация модуля
# =============================================================================


def _execute_builtin_module(module_name):
    """Повторное выполнение builtin.py под отдельным именем, без записи в sys.modules."""
    spec = importlib.util.spec_from_file_location(module_name, builtin.__file__)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestModuleInitialization:
    """Ошибка в литерале прерывает импорт модуля встроенных констант"""

    def test_clean_literals_initialize(self):
        module = _execute_builtin_module("builtin_clean_copy")
        assert module.BUILTIN_CONSTANTS.frozen
        assert module.DECIMAL_LN10.tiers == DECIMAL_LN10.tiers

    @pytest.mark.parametrize("bad_literal", ["2.30x", "2.30_25", "NaN"])
    def test_malformed_tiered_literal_aborts_import(self, monkeypatch, bad_literal):
        monkeypatch.setattr(literals, "STR_LN10", bad_literal)
        with pytest.raises(ConstantInitializationError):
            _execute_builtin_module("builtin_broken_ln10")
        assert "builtin_broken_ln10" not in sys.modules

    def test_malformed_fixed_literal_aborts_import(self, monkeypatch):
        monkeypatch.setattr(literals, "STR_CBRT_C2", " 1.072302")
        with pytest.raises(ConstantInitializationError, match="Malformed"):
            _execute_builtin_module("builtin_broken_cbrt")

    def test_published_constants_unaffected(self, monkeypatch):
        """Неудачная инициализация не трогает уже опубликованные константы"""
        monkeypatch.setattr(literals, "STR_LN10", "broken")
        with pytest.raises(ConstantInitializationError):
            _execute_builtin_module("builtin_broken_again")
        assert builtin.DECIMAL_LN10 is DECIMAL_LN10
        assert str(DECIMAL_LN10.unrounded) != "broken"
