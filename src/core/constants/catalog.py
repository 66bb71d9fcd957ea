"""
Constant Catalog — именованный каталог встроенных констант

Заполняется при импорте пакета, затем замораживается. Хранит как короткие
константы (Decimal), так и длинные (TieredPrecisionCache).
"""

import logging
from decimal import Decimal
from typing import Iterator, Optional, Union

from src.core.constants.registry import ConstantInitializationError
from src.core.constants.tiered_cache import TieredPrecisionCache
from src.core.domain.ladder import LadderSnapshot

logger = logging.getLogger(__name__)

CatalogEntry = Union[Decimal, TieredPrecisionCache]


class ConstantCatalog:
    """Read-only (после freeze) каталог констант по имени."""

    def __init__(self):
        self._entries: dict[str, CatalogEntry] = {}
        self._frozen = False

    def register(self, name: str, value: CatalogEntry) -> CatalogEntry:
        """
        Регистрация константы под именем.

        Args:
            name: Уникальное имя (например, 'ln10')
            value: Decimal или TieredPrecisionCache

        Returns:
            value (для цепочек присваивания на уровне модуля)

        Raises:
            ConstantInitializationError: Если каталог заморожен, имя занято
                или value неподдерживаемого типа
        """
        if self._frozen:
            raise ConstantInitializationError(f"Catalog is frozen, cannot register {name!r}")
        if name in self._entries:
            raise ConstantInitializationError(f"Constant {name!r} is already registered")
        if not isinstance(value, (Decimal, TieredPrecisionCache)):
            raise ConstantInitializationError(
                f"Constant {name!r} must be Decimal or TieredPrecisionCache, "
                f"got {type(value).__name__}"
            )
        self._entries[name] = value
        return value

    def freeze(self) -> None:
        """Запрет дальнейших регистраций."""
        self._frozen = True
        logger.debug("Constant catalog frozen with %d entries", len(self._entries))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> CatalogEntry:
        """
        Константа по имени.

        Raises:
            KeyError: Если имя не зарегистрировано
        """
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(f"Unknown constant {name!r}") from None

    def get_decimal(self, name: str, precision: Optional[int] = None) -> Decimal:
        """
        Значение константы как Decimal.

        Args:
            name: Имя константы
            precision: Требуемая точность для кэшированных констант.
                None → полное unrounded значение. Для коротких констант
                игнорируется.

        Returns:
            Decimal с точностью не ниже precision

        Raises:
            KeyError: Если имя не зарегистрировано
        """
        entry = self.get(name)
        if isinstance(entry, Decimal):
            return entry
        if precision is None:
            return entry.unrounded
        return entry.get(precision)

    def is_tiered(self, name: str) -> bool:
        return isinstance(self.get(name), TieredPrecisionCache)

    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def snapshots(self) -> list[LadderSnapshot]:
        """Диагностика по всем кэшированным константам."""
        return [
            entry.snapshot(name)
            for name, entry in self._entries.items()
            if isinstance(entry, TieredPrecisionCache)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
