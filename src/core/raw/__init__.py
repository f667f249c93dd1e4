"""
Raw generators - примитивные источники случайности.

RawGenerator определяет контракт, RandomRawGenerator - реализация по умолчанию.
"""

from src.core.raw.base import (
    I128_MAX,
    I128_MIN,
    INTEGER_WIDTHS,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    IntRange,
    RawGenerator,
    check_range_width,
)
from src.core.raw.random_raw import RandomRawGenerator

__all__ = [
    # Width limits
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    "I128_MIN",
    "I128_MAX",
    "INTEGER_WIDTHS",
    # Contract
    "IntRange",
    "RawGenerator",
    "check_range_width",
    # Implementations
    "RandomRawGenerator",
]
