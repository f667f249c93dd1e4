"""
Domain models and value objects.

Contains the structured values produced by the generators: numeric values,
Renminbi currency, Gregorian dates and times.
"""

from src.core.domain.currency import (
    CurrencyStyle,
    RenminbiCurrency,
    RenminbiCurrencyBuilder,
)
from src.core.domain.gregorian import (
    Date,
    DateBuilder,
    DateField,
    DatePattern,
    DEFAULT_REFERENCE_MONTH,
    DeltaTime,
    Hour12,
    Hour24,
    LinearTime,
    Minute,
    Second,
    WeekDay,
    WeekFormat,
    days_in_month,
)
from src.core.domain.numeric import Count, Decimal, DigitSequence, Fraction

__all__ = [
    # Numeric
    "DigitSequence",
    "Decimal",
    "Fraction",
    "Count",
    # Currency
    "CurrencyStyle",
    "RenminbiCurrency",
    "RenminbiCurrencyBuilder",
    # Gregorian dates
    "Date",
    "DateBuilder",
    "DateField",
    "DatePattern",
    "WeekDay",
    "WeekFormat",
    "days_in_month",
    "DEFAULT_REFERENCE_MONTH",
    # Gregorian times
    "Hour24",
    "Hour12",
    "Minute",
    "Second",
    "LinearTime",
    "DeltaTime",
]
