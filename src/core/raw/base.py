"""
RawGenerator - абстракция примитивного источника случайности

Единственный источник энтропии для всех генераторов:
- равномерное целое в замкнутом диапазоне для каждой ширины (u8..u128, i128)
- равномерный bool

Все остальные операции детерминированы при заданных выходах RawGenerator.
Вызов с low > high является нарушением контракта вызывающей стороны
и не проверяется.
"""

from abc import ABC, abstractmethod
from typing import Dict, Final, Tuple

# Замкнутый диапазон (low, high)
IntRange = Tuple[int, int]


# =============================================================================
# ГРАНИЦЫ ЦЕЛОЧИСЛЕННЫХ ТИПОВ
# =============================================================================

U8_MAX: Final[int] = 2**8 - 1
U16_MAX: Final[int] = 2**16 - 1
U32_MAX: Final[int] = 2**32 - 1
U64_MAX: Final[int] = 2**64 - 1
U128_MAX: Final[int] = 2**128 - 1
I128_MIN: Final[int] = -(2**127)
I128_MAX: Final[int] = 2**127 - 1

# Допустимые значения для каждой ширины
INTEGER_WIDTHS: Final[Dict[str, IntRange]] = {
    "u8": (0, U8_MAX),
    "u16": (0, U16_MAX),
    "u32": (0, U32_MAX),
    "u64": (0, U64_MAX),
    "u128": (0, U128_MAX),
    "i128": (I128_MIN, I128_MAX),
}


def check_range_width(value_range: IntRange, width: str) -> None:
    """
    Проверка, что обе границы диапазона представимы в заданной ширине.

    Args:
        value_range: Замкнутый диапазон (low, high)
        width: Имя ширины ('u8', 'u16', ..., 'i128')

    Raises:
        ValueError: Если граница выходит за пределы типа
    """
    type_min, type_max = INTEGER_WIDTHS[width]
    low, high = value_range

    for bound in (low, high):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise ValueError(f"{width} bound must be an integer, got {bound!r}")
        if not type_min <= bound <= type_max:
            raise ValueError(
                f"{width} bound {bound} outside [{type_min}, {type_max}]"
            )


# =============================================================================
# RAW GENERATOR
# =============================================================================


class RawGenerator(ABC):
    """
    Генератор примитивных значений, необходимых ChineseFormatGenerator.

    Реализация может быть любой (стандартный random, детерминированная
    последовательность в тестах, криптографический источник): генераторы
    верхнего уровня зависят только от этого интерфейса.
    """

    @abstractmethod
    def u8(self, value_range: IntRange) -> int:
        """Случайный u8 в заданном диапазоне."""
        ...

    @abstractmethod
    def u16(self, value_range: IntRange) -> int:
        """Случайный u16 в заданном диапазоне."""
        ...

    @abstractmethod
    def u32(self, value_range: IntRange) -> int:
        """Случайный u32 в заданном диапазоне."""
        ...

    @abstractmethod
    def u64(self, value_range: IntRange) -> int:
        """Случайный u64 в заданном диапазоне."""
        ...

    @abstractmethod
    def u128(self, value_range: IntRange) -> int:
        """Случайный u128 в заданном диапазоне."""
        ...

    @abstractmethod
    def i128(self, value_range: IntRange) -> int:
        """Случайный i128 в заданном диапазоне."""
        ...

    @abstractmethod
    def bool(self) -> bool:
        """Случайный bool (вероятность True около 0.5)."""
        ...
