"""
Time generators - время суток и смещения

Компоненты времени независимы (нет совместных ограничений),
поэтому генерация всегда успешна с первой выборки.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.gregorian import (
    DeltaTime,
    Hour12,
    Hour24,
    LinearTime,
    Minute,
    Second,
)
from src.core.errors import valid_by_construction
from src.core.raw.base import RawGenerator


@dataclass(frozen=True)
class LinearTimeParams:
    """
    Параметры генерации LinearTime.

    day_part: True - часть дня и 12-часовой формат, False - 24-часовой формат
    include_second: Генерировать секунды
    """

    day_part: bool = False
    include_second: bool = False


class TimeGeneratorMixin:
    """Генерация компонентов времени, LinearTime и DeltaTime."""

    _raw_generator: RawGenerator

    def hour24(self) -> Hour24:
        """Случайный Hour24 (0-23)."""
        with valid_by_construction("Hour valid by construction"):
            return Hour24(value=self._raw_generator.u8((0, 23)))

    def hour12(self) -> Hour12:
        """Случайный Hour12 (1-12)."""
        with valid_by_construction("Hour valid by construction"):
            return Hour12(value=self._raw_generator.u8((1, 12)))

    def minute(self) -> Minute:
        with valid_by_construction("Minute valid by construction"):
            return Minute(value=self._raw_generator.u8((0, 59)))

    def second(self) -> Second:
        with valid_by_construction("Second valid by construction"):
            return Second(value=self._raw_generator.u8((0, 59)))

    def linear_time(self, params: LinearTimeParams) -> LinearTime:
        """
        Случайное LinearTime.

        Порядок выборок: час (Hour12 при day_part, иначе Hour24),
        минута, секунда (только если include_second).

        Args:
            params: Флаги day_part и include_second

        Returns:
            LinearTime
        """
        hour = self.hour12() if params.day_part else self.hour24()

        minute = self.minute()

        second: Optional[Second] = self.second() if params.include_second else None

        with valid_by_construction("Linear time valid by construction"):
            return LinearTime(
                day_part=params.day_part,
                hour=hour,
                minute=minute,
                second=second,
            )

    def delta_time(self) -> DeltaTime:
        """
        Случайное DeltaTime: час (1-12) и минута, без части дня.
        """
        hour = self.hour12()

        minute = self.minute()

        with valid_by_construction("Delta time valid by construction"):
            return DeltaTime(hour=hour, minute=minute)
