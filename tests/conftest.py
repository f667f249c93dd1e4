"""Global fixtures for chinese-rand tests."""

import random
from typing import List, Optional, Tuple

import pytest

from src.core.generator import ChineseFormatGenerator
from src.core.raw import IntRange, RandomRawGenerator, RawGenerator


class ScriptedRawGenerator(RawGenerator):
    """
    RawGenerator, возвращающий заранее заданную последовательность выборок.

    Каждый элемент сценария: (метод, диапазон, значение). Диапазон None
    означает "любой". Несовпадение метода или диапазона - ошибка теста.
    """

    def __init__(self, script: List[Tuple[str, Optional[IntRange], object]]):
        self._script = list(script)
        self.calls: List[Tuple[str, Optional[IntRange]]] = []

    @property
    def remaining(self) -> int:
        return len(self._script)

    def _next(self, method: str, value_range: Optional[IntRange]):
        self.calls.append((method, value_range))
        assert self._script, f"Unexpected draw: {method}{value_range}"

        expected_method, expected_range, value = self._script.pop(0)
        assert method == expected_method, f"Expected {expected_method}, got {method}"
        if expected_range is not None:
            assert value_range == expected_range, (
                f"Expected range {expected_range}, got {value_range}"
            )
        return value

    def u8(self, value_range: IntRange) -> int:
        return self._next("u8", value_range)

    def u16(self, value_range: IntRange) -> int:
        return self._next("u16", value_range)

    def u32(self, value_range: IntRange) -> int:
        return self._next("u32", value_range)

    def u64(self, value_range: IntRange) -> int:
        return self._next("u64", value_range)

    def u128(self, value_range: IntRange) -> int:
        return self._next("u128", value_range)

    def i128(self, value_range: IntRange) -> int:
        return self._next("i128", value_range)

    def bool(self) -> bool:
        return self._next("bool", None)


@pytest.fixture
def scripted():
    """Фабрика ChineseFormatGenerator поверх ScriptedRawGenerator."""

    def _make(*script):
        raw = ScriptedRawGenerator(list(script))
        return ChineseFormatGenerator(raw), raw

    return _make


@pytest.fixture
def seeded_generator() -> ChineseFormatGenerator:
    """ChineseFormatGenerator с изолированным random.Random(90)."""
    return ChineseFormatGenerator(RandomRawGenerator(random.Random(90)))
