"""
Numeric - числовые value objects

DigitSequence, Decimal, Fraction, Count.

Immutable Pydantic модели: каждая проверяет собственные инварианты
при создании и выбрасывает ValidationError для невалидных значений.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.raw.base import I128_MAX, I128_MIN, U128_MAX


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


class DigitSequence(BaseModel):
    """
    Последовательность десятичных цифр (старшая цифра первая).

    Может быть пустой. Ведущие нули сохраняются: это последовательность,
    а не число.
    """

    digits: Tuple[int, ...] = Field(default=(), description="Цифры 0-9")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Каждый элемент должен быть цифрой 0-9"""
        for digit in v:
            if not 0 <= digit <= 9:
                raise ValueError(f"digit {digit} outside [0, 9]")
        return v

    @classmethod
    def from_int(cls, value: int) -> "DigitSequence":
        """
        Последовательность цифр неотрицательного целого.

        Examples:
            >>> str(DigitSequence.from_int(85241))
            '85241'
        """
        if value < 0:
            raise ValueError(f"Cannot build a digit sequence from negative {value}")
        return cls(digits=tuple(int(c) for c in str(value)))

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


# =============================================================================
# DECIMAL
# =============================================================================


class Decimal(BaseModel):
    """Десятичное число: целая часть (i128) и дробная часть (цифры)."""

    integer: int = Field(..., ge=I128_MIN, le=I128_MAX, description="Целая часть")
    fractional: DigitSequence = Field(
        default_factory=DigitSequence, description="Цифры после запятой"
    )

    model_config = {"frozen": True}


# =============================================================================
# FRACTION
# =============================================================================


class Fraction(BaseModel):
    """
    Дробь numerator / denominator.

    Знаменатель - u128, строго положительный.
    """

    denominator: int = Field(..., gt=0, le=U128_MAX, description="Знаменатель (не 0)")
    numerator: int = Field(..., ge=I128_MIN, le=I128_MAX, description="Числитель")

    model_config = {"frozen": True}

    @classmethod
    def try_new(cls, denominator: int, numerator: int) -> "Fraction":
        """
        Создание дроби с валидацией.

        Raises:
            ValidationError: Если знаменатель равен 0 или вне u128
        """
        return cls(denominator=denominator, numerator=numerator)


# =============================================================================
# COUNT
# =============================================================================


class Count(BaseModel):
    """Количество (u128)."""

    value: int = Field(..., ge=0, le=U128_MAX, description="Неотрицательное количество")

    model_config = {"frozen": True}
