"""
Date generator - случайные даты с rejection sampling

Каждое поле паттерна выбирается в собственном локально-допустимом диапазоне:
- год: year_range или DEFAULT_YEAR_RANGE
- месяц: 1-12
- день: 1-31
- день недели: 0-6

Комбинация может быть невалидной (например, 31 апреля; без месяца день
проверяется по DEFAULT_REFERENCE_MONTH, поэтому 31 тоже отклоняется). Тогда вся выборка
отбрасывается и все поля выбираются заново, пока DateBuilder не примет дату.

State machine: DRAW → VALIDATE → ACCEPT (при отказе VALIDATE → DRAW).
Ограничения на число попыток нет: доля невалидных комбинаций ограничена
(не более 3 из 31 дней для худшего месяца).

День недели не сверяется с календарной датой.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from pydantic import ValidationError

from src.core.domain.gregorian import Date, DateBuilder, DatePattern, WeekDay, WeekFormat
from src.core.errors import valid_by_construction
from src.core.raw.base import IntRange, RawGenerator

logger = logging.getLogger(__name__)


# Диапазон годов, если year_range не задан
DEFAULT_YEAR_RANGE: Final[IntRange] = (1800, 2140)


@dataclass(frozen=True)
class DateParams:
    """
    Параметры генерации Date.

    pattern: Какие поля присутствуют (например, YEAR_MONTH_DAY)
    year_range: Диапазон годов; None означает DEFAULT_YEAR_RANGE
    formal: Формальная запись (号 вместо 日 после дня)
    week_format: Запись недели; None означает WeekFormat по умолчанию
    """

    pattern: DatePattern
    year_range: Optional[IntRange] = None
    formal: bool = False
    week_format: Optional[WeekFormat] = None


class DateDrawState(str, Enum):
    """Состояние цикла генерации даты"""

    DRAW = "DRAW"
    VALIDATE = "VALIDATE"
    ACCEPT = "ACCEPT"


class DateGeneratorMixin:
    """Генерация date для GregorianGenerator."""

    _raw_generator: RawGenerator

    def date(self, params: DateParams) -> Date:
        """
        Случайная Date по заданным параметрам.

        Дата всегда корректна в григорианском календаре, за исключением
        дня недели (если он есть в паттерне): он выбирается независимо.

        Args:
            params: Паттерн, диапазон годов и флаги форматирования

        Returns:
            Date (вызывающая сторона никогда не видит отказ builder)
        """
        state = DateDrawState.DRAW
        attempt = 0
        builder = DateBuilder()

        while True:
            if state is DateDrawState.DRAW:
                attempt += 1
                builder = self._draw_date_fields(params)
                state = DateDrawState.VALIDATE
            else:
                try:
                    result = builder.build()
                except ValidationError as e:
                    logger.debug(
                        "Date draw #%d rejected: %s", attempt, e.errors()[0]["msg"]
                    )
                    state = DateDrawState.DRAW
                    continue

                state = DateDrawState.ACCEPT
                return result

    def _draw_date_fields(self, params: DateParams) -> DateBuilder:
        """Одна полная выборка всех полей паттерна (без валидации)."""
        pattern = params.pattern

        builder = (
            DateBuilder()
            .with_formal(params.formal)
            .with_week_format(params.week_format or WeekFormat.XING_QI)
        )

        if pattern.has_year:
            year_range = params.year_range or DEFAULT_YEAR_RANGE
            builder = builder.with_year(self._raw_generator.u16(year_range))

        if pattern.has_month:
            builder = builder.with_month(self._raw_generator.u8((1, 12)))

        if pattern.has_day:
            builder = builder.with_day(self._raw_generator.u8((1, 31)))

        if pattern.has_week_day:
            with valid_by_construction("Weekday valid by construction"):
                week_day = WeekDay(self._raw_generator.u8((0, 6)))
            builder = builder.with_week_day(week_day)

        return builder
