"""
Integer Log — целочисленные логарифмы по основанию 2

Модуль вычисляет floor/ceil log2 без float и без math.log:
- Сначала сдвиг 4-битными блоками (деление на 16)
- Затем 1-битными (деление на 2)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ceil_log2(n) == (n - 1).bit_length() для любого n >= 1
2. Для n <= 1 (включая 0 и отрицательные) результат 0, без exception
3. Никаких операций с плавающей точкой
"""


def floor_log2(n: int) -> int:
    """
    Целочисленный floor(log2(n)).

    Args:
        n: Аргумент (целое)

    Returns:
        floor(log2(n)) для n >= 1; 0 для n <= 1

    Examples:
        >>> floor_log2(1)
        0
        >>> floor_log2(15)
        3
        >>> floor_log2(16)
        4
        >>> floor_log2(1000)
        9
    """
    i = 0
    while n >= 16:
        n //= 16
        i += 4
    while n >= 2:
        n //= 2
        i += 1
    return i


def ceil_log2(n: int) -> int:
    """
    Целочисленный ceil(log2(n)).

    Использует тождество ceil(log2(n)) = 1 + floor(log2(n - 1)) для n > 1.

    Args:
        n: Аргумент (целое)

    Returns:
        Минимальное i такое, что 2^i >= n; 0 для n <= 1

    Examples:
        >>> ceil_log2(0)
        0
        >>> ceil_log2(1)
        0
        >>> ceil_log2(2)
        1
        >>> ceil_log2(20)
        5
        >>> ceil_log2(32)
        5
        >>> ceil_log2(33)
        6
    """
    if n <= 1:
        return 0
    return 1 + floor_log2(n - 1)
