"""
Tiered Precision Cache — константа, заранее округлённая до лестницы точностей

Для длинных констант (ln 10, 1/ln 10, seeds Newton-деления) хранит копии,
округлённые до 1, 2, 4, 8, ... значащих цифр. Алгоритмам, которым нужно
8 цифр, не приходится таскать через арифметику все 3000.

Жизненный цикл:
    BUILDING → FROZEN (обратного перехода нет)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. tiers[i] — литерал, округлённый до 2^i значащих цифр (round-half-up)
2. get(p) никогда не возвращает меньше цифр, чем запрошено
   (либо ступень с точностью >= p, либо точное unrounded значение)
3. get(p) возвращает минимальную подходящую ступень
4. После build кэш неизменяем; get не бросает exception для целого p
"""

import logging
from decimal import Decimal, DecimalException
from enum import Enum
from typing import Optional, Sequence

from src.core.constants.config import LadderConfig
from src.core.constants.registry import ConstantInitializationError, register_constant
from src.core.domain.ladder import LadderBound, LadderSnapshot
from src.core.math.decimal_engine import round_decimal, significant_digits
from src.core.math.integer_log import ceil_log2

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    """Состояние кэша."""
    BUILDING = "BUILDING"
    FROZEN = "FROZEN"


class FrozenCacheError(AttributeError):
    """Попытка изменить кэш после заморозки."""
    pass


class TieredPrecisionCache:
    """Лестница округлённых копий одной константы.

    Создаётся только через build(); экземпляр замораживается в конце
    конструктора и далее используется всеми потоками без блокировок.
    """

    __slots__ = ("_unrounded", "_tiers", "_literal_length", "_bound", "_state")

    def __init__(
        self,
        unrounded: Decimal,
        tiers: Sequence[Decimal],
        literal_length: int,
        bound: LadderBound,
    ):
        self._state = CacheState.BUILDING
        self._unrounded = unrounded
        self._tiers = tuple(tiers)
        self._literal_length = literal_length
        self._bound = bound
        self._state = CacheState.FROZEN

    def __setattr__(self, name, value):
        if getattr(self, "_state", None) is CacheState.FROZEN:
            raise FrozenCacheError(f"TieredPrecisionCache is frozen, cannot set {name!r}")
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        raise FrozenCacheError(f"TieredPrecisionCache is frozen, cannot delete {name!r}")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(cls, literal: str, config: Optional[LadderConfig] = None) -> "TieredPrecisionCache":
        """
        Построение кэша из полного литерала.

        Args:
            literal: Полный десятичный литерал константы
            config: Параметры округления и граница лестницы (default: LadderConfig())

        Returns:
            Замороженный TieredPrecisionCache

        Raises:
            ConstantInitializationError: Если литерал некорректен или
                округление какой-либо ступени завершилось ошибкой
        """
        config = config or LadderConfig()
        unrounded = register_constant(literal)
        max_prec = cls._ladder_bound(literal, unrounded, config.bound)

        tiers = []
        p = 1
        while p < max_prec:
            try:
                tiers.append(round_decimal(config.context_for(p), unrounded))
            except DecimalException as e:
                message = (
                    f"Failed to round constant to {p} digits "
                    f"({type(e).__name__}): exponent range "
                    f"[{config.min_exponent}, {config.max_exponent}]"
                )
                logger.critical(message)
                raise ConstantInitializationError(message) from e
            p *= 2

        cache = cls(unrounded, tiers, len(literal), config.bound)
        logger.debug(
            "Built precision ladder: %d tiers up to %d digits (%d-char literal)",
            len(cache),
            cache.tier_precisions[-1] if tiers else 0,
            len(literal),
        )
        return cache

    @staticmethod
    def _ladder_bound(literal: str, unrounded: Decimal, bound: LadderBound) -> int:
        # LITERAL_LENGTH может превышать число цифр из-за точки и знака:
        # лишняя ступень совпадает с unrounded и безвредна
        if bound is LadderBound.SIGNIFICANT_DIGITS:
            return significant_digits(unrounded)
        return len(literal)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, precision: int) -> Decimal:
        """
        Константа с точностью не ниже precision.

        Индекс ступени: i = ceil(log2(precision)). Если такой ступени нет,
        возвращается точное unrounded значение.

        Args:
            precision: Требуемое число значащих цифр (0 и 1 эквивалентны)

        Returns:
            Общий для всех вызывающих неизменяемый Decimal

        Examples:
            >>> cache = TieredPrecisionCache.build("2.302585092994")
            >>> cache.get(3)
            Decimal('2.303')
            >>> cache.get(100)
            Decimal('2.302585092994')
        """
        i = ceil_log2(precision)
        if i >= len(self._tiers):
            return self._unrounded
        return self._tiers[i]

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def unrounded(self) -> Decimal:
        return self._unrounded

    @property
    def tiers(self) -> tuple[Decimal, ...]:
        return self._tiers

    @property
    def tier_precisions(self) -> tuple[int, ...]:
        """Точности ступеней: (1, 2, 4, ...)"""
        return tuple(1 << i for i in range(len(self._tiers)))

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def bound(self) -> LadderBound:
        return self._bound

    def __len__(self) -> int:
        return len(self._tiers)

    def __repr__(self) -> str:
        return (
            f"TieredPrecisionCache(tiers={len(self._tiers)}, "
            f"digits={significant_digits(self._unrounded)}, state={self._state.value})"
        )

    def snapshot(self, name: str) -> LadderSnapshot:
        """
        Диагностическое описание кэша.

        Args:
            name: Имя константы для отчёта

        Returns:
            LadderSnapshot (immutable)
        """
        return LadderSnapshot(
            name=name,
            literal_length=self._literal_length,
            significant_digits=significant_digits(self._unrounded),
            tier_precisions=self.tier_precisions,
            bound=self._bound,
        )
