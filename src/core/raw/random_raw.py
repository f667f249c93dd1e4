"""
RandomRawGenerator - реализация RawGenerator на стандартном модуле random

По умолчанию использует глобальное состояние модуля random
(process-wide, воспроизводимо через random.seed). Для изоляции
можно передать собственный экземпляр random.Random.
"""

import random
from typing import Optional

from src.core.raw.base import IntRange, RawGenerator, check_range_width


class RandomRawGenerator(RawGenerator):
    """
    RawGenerator поверх random.

    Пример:
        >>> random.seed(90)
        >>> generator = RandomRawGenerator()
        >>> 0 <= generator.u128((0, 50000)) <= 50000
        True
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Экземпляр random.Random; None означает глобальный модуль random
        """
        self._rng = rng if rng is not None else random

    def _sample(self, value_range: IntRange, width: str) -> int:
        check_range_width(value_range, width)
        low, high = value_range
        return self._rng.randint(low, high)

    def u8(self, value_range: IntRange) -> int:
        return self._sample(value_range, "u8")

    def u16(self, value_range: IntRange) -> int:
        return self._sample(value_range, "u16")

    def u32(self, value_range: IntRange) -> int:
        return self._sample(value_range, "u32")

    def u64(self, value_range: IntRange) -> int:
        return self._sample(value_range, "u64")

    def u128(self, value_range: IntRange) -> int:
        return self._sample(value_range, "u128")

    def i128(self, value_range: IntRange) -> int:
        return self._sample(value_range, "i128")

    def bool(self) -> bool:
        return self._rng.getrandbits(1) == 1
