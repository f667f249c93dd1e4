"""
Gregorian - даты и время по григорианскому календарю

Immutable Pydantic модели:
- Date (+ DateBuilder): год/месяц/день/день недели, любое непрерывное подмножество
- Hour24, Hour12, Minute, Second: отдельные компоненты времени
- LinearTime: время суток (опционально с частью дня и секундами)
- DeltaTime: смещение относительно часа ("N минут после/до часа")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. День месяца существует в данном месяце (с учётом високосного года)
2. Без года февраль допускает 29 число
3. Без месяца день проверяется по DEFAULT_REFERENCE_MONTH (апрель, 30 дней)
4. День недели не сверяется с календарной датой
"""

import calendar
from enum import Enum, IntEnum
from typing import Final, FrozenSet, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.raw.base import U16_MAX


# =============================================================================
# ENUMS
# =============================================================================


class DateField(str, Enum):
    """Компонент даты"""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEK_DAY = "week_day"


class DatePattern(Enum):
    """
    Набор компонентов, из которых состоит дата.

    Допустимы только непрерывные подпоследовательности
    год → месяц → день → день недели.
    """

    YEAR = (DateField.YEAR,)
    YEAR_MONTH = (DateField.YEAR, DateField.MONTH)
    YEAR_MONTH_DAY = (DateField.YEAR, DateField.MONTH, DateField.DAY)
    YEAR_MONTH_DAY_WEEK_DAY = (
        DateField.YEAR,
        DateField.MONTH,
        DateField.DAY,
        DateField.WEEK_DAY,
    )
    MONTH = (DateField.MONTH,)
    MONTH_DAY = (DateField.MONTH, DateField.DAY)
    MONTH_DAY_WEEK_DAY = (DateField.MONTH, DateField.DAY, DateField.WEEK_DAY)
    DAY = (DateField.DAY,)
    DAY_WEEK_DAY = (DateField.DAY, DateField.WEEK_DAY)
    WEEK_DAY = (DateField.WEEK_DAY,)

    @property
    def fields(self) -> FrozenSet[DateField]:
        return frozenset(self.value)

    @property
    def has_year(self) -> bool:
        return DateField.YEAR in self.value

    @property
    def has_month(self) -> bool:
        return DateField.MONTH in self.value

    @property
    def has_day(self) -> bool:
        return DateField.DAY in self.value

    @property
    def has_week_day(self) -> bool:
        return DateField.WEEK_DAY in self.value

    @classmethod
    def from_fields(cls, fields: FrozenSet[DateField]) -> Optional["DatePattern"]:
        """Паттерн для набора полей; None если набор не образует паттерн"""
        for pattern in cls:
            if pattern.fields == fields:
                return pattern
        return None


class WeekDay(IntEnum):
    """День недели (0 = воскресенье)"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class WeekFormat(str, Enum):
    """Как записывается слово "неделя" (星期 или 周)"""

    XING_QI = "xing_qi"
    ZHOU = "zhou"


# =============================================================================
# CALENDAR HELPERS
# =============================================================================

# Месяц, по которому проверяется день, если месяц в дате не задан
DEFAULT_REFERENCE_MONTH: Final[int] = 4

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(month: int, year: Optional[int] = None) -> int:
    """
    Количество дней в месяце.

    Args:
        month: Месяц 1-12
        year: Год; None означает "любой год" (февраль = 29 дней)

    Returns:
        28-31
    """
    if month == 2 and (year is None or calendar.isleap(year)):
        return 29
    return _DAYS_IN_MONTH[month - 1]


# =============================================================================
# DATE MODEL
# =============================================================================


class Date(BaseModel):
    """
    Дата: непрерывное подмножество год/месяц/день/день недели.

    Immutable модель (frozen=True). Создаётся через DateBuilder.
    """

    year: Optional[int] = Field(None, ge=0, le=U16_MAX, description="Год (u16)")
    month: Optional[int] = Field(None, ge=1, le=12, description="Месяц 1-12")
    day: Optional[int] = Field(None, ge=1, le=31, description="День месяца 1-31")
    week_day: Optional[WeekDay] = Field(None, description="День недели")

    formal: bool = Field(False, description="Формальная запись (号 вместо 日)")
    week_format: WeekFormat = Field(WeekFormat.XING_QI, description="Запись недели")

    model_config = {"frozen": True}

    @field_validator("day")
    @classmethod
    def validate_day_in_month(cls, v: Optional[int], info) -> Optional[int]:
        """
        Проверка, что день существует в месяце (и году, если задан).

        Без месяца день проверяется по DEFAULT_REFERENCE_MONTH.
        """
        if v is None:
            return v

        month = info.data.get("month")
        if month is None:
            if "month" not in info.data:
                return v
            month = DEFAULT_REFERENCE_MONTH

        year = info.data.get("year")
        max_day = days_in_month(month, year)
        if v > max_day:
            raise ValueError(f"day {v} does not exist in month {month} (year={year})")
        return v

    @model_validator(mode="after")
    def validate_pattern(self) -> "Date":
        """Заданные поля должны образовать DatePattern"""
        if self.pattern is None:
            present = sorted(f.value for f in self._present_fields())
            raise ValueError(f"fields {present} do not form a date pattern")
        return self

    def _present_fields(self) -> FrozenSet[DateField]:
        values = {
            DateField.YEAR: self.year,
            DateField.MONTH: self.month,
            DateField.DAY: self.day,
            DateField.WEEK_DAY: self.week_day,
        }
        return frozenset(f for f, value in values.items() if value is not None)

    @property
    def pattern(self) -> Optional[DatePattern]:
        return DatePattern.from_fields(self._present_fields())


class DateBuilder:
    """
    Builder для Date.

    Поля задаются по одному; build() выполняет полную валидацию
    (включая совместную проверку день/месяц/год).
    """

    def __init__(self):
        self._year: Optional[int] = None
        self._month: Optional[int] = None
        self._day: Optional[int] = None
        self._week_day: Optional[WeekDay] = None
        self._formal: bool = False
        self._week_format: WeekFormat = WeekFormat.XING_QI

    def with_year(self, year: int) -> "DateBuilder":
        self._year = year
        return self

    def with_month(self, month: int) -> "DateBuilder":
        self._month = month
        return self

    def with_day(self, day: int) -> "DateBuilder":
        self._day = day
        return self

    def with_week_day(self, week_day: WeekDay) -> "DateBuilder":
        self._week_day = week_day
        return self

    def with_formal(self, formal: bool) -> "DateBuilder":
        self._formal = formal
        return self

    def with_week_format(self, week_format: WeekFormat) -> "DateBuilder":
        self._week_format = week_format
        return self

    def build(self) -> Date:
        """
        Raises:
            ValidationError: Если поля не образуют паттерн или день не существует
        """
        return Date(
            year=self._year,
            month=self._month,
            day=self._day,
            week_day=self._week_day,
            formal=self._formal,
            week_format=self._week_format,
        )


# =============================================================================
# TIME COMPONENTS
# =============================================================================


class Hour24(BaseModel):
    """Час в 24-часовом формате (0-23)"""

    value: int = Field(..., ge=0, le=23)

    model_config = {"frozen": True}


class Hour12(BaseModel):
    """Час в 12-часовом формате (1-12)"""

    value: int = Field(..., ge=1, le=12)

    model_config = {"frozen": True}


class Minute(BaseModel):
    """Минута (0-59)"""

    value: int = Field(..., ge=0, le=59)

    model_config = {"frozen": True}


class Second(BaseModel):
    """Секунда (0-59)"""

    value: int = Field(..., ge=0, le=59)

    model_config = {"frozen": True}


# =============================================================================
# TIME MODELS
# =============================================================================


class LinearTime(BaseModel):
    """
    Время суток.

    day_part=True: 12-часовой формат с частью дня (上午/下午), hour - Hour12.
    day_part=False: 24-часовой формат, hour - Hour24.
    """

    day_part: bool = Field(..., description="Запись с частью дня")
    hour: Union[Hour12, Hour24] = Field(..., description="Час")
    minute: Minute = Field(..., description="Минута")
    second: Optional[Second] = Field(None, description="Секунда (опционально)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_hour_format(self) -> "LinearTime":
        """Формат часа должен соответствовать day_part"""
        expected = Hour12 if self.day_part else Hour24
        if not isinstance(self.hour, expected):
            raise ValueError(
                f"day_part={self.day_part} requires {expected.__name__}, "
                f"got {type(self.hour).__name__}"
            )
        return self


class DeltaTime(BaseModel):
    """Смещение относительно часа: час (1-12) и минута."""

    hour: Hour12 = Field(..., description="Час")
    minute: Minute = Field(..., description="Минута")

    model_config = {"frozen": True}
