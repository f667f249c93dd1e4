"""
ChineseFormatGenerator - точка входа генерации

Владеет единственным RawGenerator (передаётся при создании) и предоставляет
все операции генерации напрямую или через производные генераторы
(gregorian), которые только заимствуют RawGenerator.

Пример:
    >>> import random
    >>> from src.core.raw import RandomRawGenerator
    >>> generator = ChineseFormatGenerator(RandomRawGenerator(random.Random(90)))
    >>> generator.integer((90, 90))
    90
"""

from src.core.raw.base import RawGenerator
from src.generation import (
    CurrencyGeneratorMixin,
    DigitSequenceGeneratorMixin,
    NumericGeneratorMixin,
)
from src.gregorian import GregorianGenerator


class ChineseFormatGenerator(
    NumericGeneratorMixin,
    DigitSequenceGeneratorMixin,
    CurrencyGeneratorMixin,
):
    """
    Параметризованная генерация случайных структурированных значений.

    Не потокобезопасен сам по себе: безопасность при общем использовании
    определяется реализацией RawGenerator.
    """

    def __init__(self, raw_generator: RawGenerator):
        """
        Args:
            raw_generator: Источник примитивных случайных значений
        """
        self._raw_generator = raw_generator

    @property
    def raw_generator(self) -> RawGenerator:
        return self._raw_generator

    def gregorian(self) -> GregorianGenerator:
        """
        GregorianGenerator для дат и времени.

        Производный генератор не имеет собственного состояния и использует
        RawGenerator этого контекста.
        """
        return GregorianGenerator(self._raw_generator)
