"""
Digit sequence generators - последовательности цифр и десятичные числа

Длина последовательности выбирается равномерно (u8), затем каждая цифра
выбирается независимо в [0, 9], старшая первой.
"""

from src.core.domain.numeric import Decimal, DigitSequence
from src.core.errors import valid_by_construction
from src.core.raw.base import IntRange, RawGenerator


class DigitSequenceGeneratorMixin:
    """Генерация digit_sequence / decimal для ChineseFormatGenerator."""

    _raw_generator: RawGenerator

    def digit_sequence(self, length_range: IntRange) -> DigitSequence:
        """
        Случайная DigitSequence с длиной в заданном диапазоне.

        Args:
            length_range: Диапазон длины (u8); (0, 0) даёт пустую последовательность

        Returns:
            DigitSequence

        Examples:
            >>> generator.digit_sequence((0, 0))  # doctest: +SKIP
            DigitSequence(digits=())
        """
        length = self._raw_generator.u8(length_range)

        digits = tuple(self._raw_generator.u8((0, 9)) for _ in range(length))

        with valid_by_construction("Digits valid by construction"):
            return DigitSequence(digits=digits)

    def decimal(
        self,
        integer_range: IntRange,
        fractional_length_range: IntRange,
    ) -> Decimal:
        """
        Случайный Decimal.

        Целая часть и дробная часть выбираются независимо:
        сначала integer (i128), затем цифры дробной части.

        Args:
            integer_range: Диапазон целой части (i128)
            fractional_length_range: Диапазон количества цифр после запятой (u8)
        """
        integer = self._raw_generator.i128(integer_range)

        fractional = self.digit_sequence(fractional_length_range)

        with valid_by_construction("Decimal valid by construction"):
            return Decimal(integer=integer, fractional=fractional)
