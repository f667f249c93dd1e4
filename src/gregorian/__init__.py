"""Gregorian - генерация дат и времени по григорианскому календарю.

GregorianGenerator создаётся через ChineseFormatGenerator.gregorian() и хранит
только ссылку на RawGenerator контекста, собственного состояния у него нет.
"""

from src.core.raw.base import RawGenerator

from .date import DEFAULT_YEAR_RANGE, DateDrawState, DateGeneratorMixin, DateParams
from .time import LinearTimeParams, TimeGeneratorMixin


class GregorianGenerator(DateGeneratorMixin, TimeGeneratorMixin):
    """
    Генератор дат и времени.

    Operations:
    - date: Date с rejection sampling
    - linear_time, delta_time: время суток и смещение
    - hour24, hour12, minute, second: отдельные компоненты
    """

    def __init__(self, raw_generator: RawGenerator):
        """
        Args:
            raw_generator: RawGenerator, принадлежащий ChineseFormatGenerator
        """
        self._raw_generator = raw_generator


__all__ = [
    "GregorianGenerator",
    "DateParams",
    "DateDrawState",
    "DEFAULT_YEAR_RANGE",
    "LinearTimeParams",
]
