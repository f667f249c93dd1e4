"""
Numeric generators - целые, дроби, количества

Все значения получаются прямыми выборками RawGenerator; единственная
проверка вызывающей стороны - нижняя граница знаменателя дроби.
"""

from src.core.domain.numeric import Count, Fraction
from src.core.errors import InvalidLowerBound, valid_by_construction
from src.core.raw.base import IntRange, RawGenerator


class NumericGeneratorMixin:
    """Генерация integer / fraction / count для ChineseFormatGenerator."""

    _raw_generator: RawGenerator

    def integer(self, value_range: IntRange) -> int:
        """
        Случайный i128 в заданном диапазоне.

        Используется и самостоятельно, и как целая часть Decimal.
        """
        return self._raw_generator.i128(value_range)

    def fraction(
        self,
        denominator_range: IntRange,
        numerator_range: IntRange,
    ) -> Fraction:
        """
        Дробь с компонентами в заданных диапазонах.

        Знаменатель выбирается первым (u128), затем числитель (i128).

        Args:
            denominator_range: Диапазон знаменателя; нижняя граница >= 1
            numerator_range: Диапазон числителя

        Returns:
            Fraction

        Raises:
            InvalidLowerBound: Если нижняя граница знаменателя равна 0
                (до какой-либо выборки)
        """
        if denominator_range[0] == 0:
            raise InvalidLowerBound(0)

        denominator = self._raw_generator.u128(denominator_range)
        numerator = self._raw_generator.i128(numerator_range)

        with valid_by_construction("Denominator non-zero by construction"):
            return Fraction.try_new(denominator, numerator)

    def count(self, value_range: IntRange) -> Count:
        """Случайный Count (u128) в заданном диапазоне."""
        return Count(value=self._raw_generator.u128(value_range))
