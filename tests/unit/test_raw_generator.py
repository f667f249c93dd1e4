"""
Тесты для RawGenerator / RandomRawGenerator

Проверяет:
1. Каждая выборка лежит в замкнутом диапазоне для всех ширин
2. Вырожденный диапазон (low == high) всегда возвращает границу
3. Границы вне ширины типа отклоняются
4. Воспроизводимость при одинаковом состоянии источника
"""

import random

import pytest

from src.core.raw import (
    I128_MAX,
    I128_MIN,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    RandomRawGenerator,
    RawGenerator,
    check_range_width,
)


WIDTH_LIMITS = [
    ("u8", 0, U8_MAX),
    ("u16", 0, U16_MAX),
    ("u32", 0, U32_MAX),
    ("u64", 0, U64_MAX),
    ("u128", 0, U128_MAX),
    ("i128", I128_MIN, I128_MAX),
]


# =============================================================================
# RANGE CONTRACT
# =============================================================================


class TestRandomRawGeneratorRanges:
    """Тесты диапазонов выборки"""

    @pytest.fixture
    def raw(self) -> RandomRawGenerator:
        return RandomRawGenerator(random.Random(42))

    def test_is_raw_generator(self, raw: RandomRawGenerator) -> None:
        """RandomRawGenerator реализует RawGenerator"""
        assert isinstance(raw, RawGenerator)

    @pytest.mark.parametrize("width,type_min,type_max", WIDTH_LIMITS)
    def test_full_range_within_bounds(
        self, raw: RandomRawGenerator, width: str, type_min: int, type_max: int
    ) -> None:
        """Выборка по полному диапазону типа остаётся в его границах"""
        sample = getattr(raw, width)
        for _ in range(200):
            v = sample((type_min, type_max))
            assert type_min <= v <= type_max

    @pytest.mark.parametrize("width,type_min,type_max", WIDTH_LIMITS)
    def test_narrow_range_within_bounds(
        self, raw: RandomRawGenerator, width: str, type_min: int, type_max: int
    ) -> None:
        """Узкий диапазон: все значения в [low, high], оба конца достижимы"""
        sample = getattr(raw, width)
        low = max(type_min, 3)
        high = low + 4
        values = {sample((low, high)) for _ in range(500)}
        assert values <= set(range(low, high + 1))
        assert low in values
        assert high in values

    @pytest.mark.parametrize("width,type_min,type_max", WIDTH_LIMITS)
    def test_degenerate_range_returns_bound(
        self, raw: RandomRawGenerator, width: str, type_min: int, type_max: int
    ) -> None:
        """low == high → всегда low"""
        sample = getattr(raw, width)
        for bound in (type_min, type_max):
            for _ in range(10):
                assert sample((bound, bound)) == bound

    def test_negative_i128_range(self, raw: RandomRawGenerator) -> None:
        """i128 поддерживает отрицательные диапазоны"""
        for _ in range(100):
            assert -10 <= raw.i128((-10, -5)) <= -5

    def test_bool_produces_both_values(self, raw: RandomRawGenerator) -> None:
        """bool() возвращает и True, и False"""
        values = {raw.bool() for _ in range(200)}
        assert values == {True, False}


# =============================================================================
# WIDTH VALIDATION
# =============================================================================


class TestWidthValidation:
    """Тесты проверки ширины типа"""

    def test_u8_rejects_256(self) -> None:
        """u8 не принимает границу 256"""
        raw = RandomRawGenerator(random.Random(1))
        with pytest.raises(ValueError, match="u8 bound 256"):
            raw.u8((0, 256))

    def test_unsigned_rejects_negative(self) -> None:
        """Беззнаковые типы не принимают отрицательные границы"""
        raw = RandomRawGenerator(random.Random(1))
        with pytest.raises(ValueError):
            raw.u128((-1, 10))

    def test_i128_rejects_overflow(self) -> None:
        """i128 не принимает 2**127"""
        with pytest.raises(ValueError):
            check_range_width((0, I128_MAX + 1), "i128")

    def test_rejects_non_integer_bound(self) -> None:
        """Границы должны быть целыми (bool не считается)"""
        with pytest.raises(ValueError):
            check_range_width((0, 1.5), "u8")  # type: ignore
        with pytest.raises(ValueError):
            check_range_width((False, 3), "u8")

    def test_accepts_type_limits(self) -> None:
        """Границы типа допустимы"""
        for width, type_min, type_max in WIDTH_LIMITS:
            check_range_width((type_min, type_max), width)


# =============================================================================
# DETERMINISM
# =============================================================================


class TestDeterminism:
    """Тесты воспроизводимости"""

    def test_same_seed_same_sequence(self) -> None:
        """Одинаковый seed → одинаковая последовательность"""
        a = RandomRawGenerator(random.Random(90))
        b = RandomRawGenerator(random.Random(90))

        seq_a = [a.u128((0, 50000)), a.i128((I128_MIN, I128_MAX)), a.u8((0, 9)), a.bool()]
        seq_b = [b.u128((0, 50000)), b.i128((I128_MIN, I128_MAX)), b.u8((0, 9)), b.bool()]

        assert seq_a == seq_b

    def test_module_level_seed(self) -> None:
        """Без rng используется глобальный random (воспроизводим через random.seed)"""
        raw = RandomRawGenerator()

        random.seed(90)
        first = [raw.u64((0, U64_MAX)) for _ in range(5)]

        random.seed(90)
        second = [raw.u64((0, U64_MAX)) for _ in range(5)]

        assert first == second
