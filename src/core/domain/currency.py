"""
Currency - денежные суммы в юанях

RenminbiCurrency: юани (元/块), десятые (角/毛) и сотые (分).
RenminbiCurrencyBuilder: пошаговая сборка с валидацией в build().
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from src.core.raw.base import U64_MAX


# =============================================================================
# ENUMS
# =============================================================================


class CurrencyStyle(str, Enum):
    """Стиль записи суммы"""

    EVERYDAY_FORMAL = "everyday_formal"
    EVERYDAY_INFORMAL = "everyday_informal"
    FINANCIAL = "financial"


# =============================================================================
# RENMINBI MODEL
# =============================================================================


class RenminbiCurrency(BaseModel):
    """
    Сумма в юанях.

    dimes и cents - отдельные цифры 0-9 (по умолчанию 0, т.е. не заданы).
    """

    style: CurrencyStyle = Field(..., description="Стиль записи")
    yuan: int = Field(..., ge=0, le=U64_MAX, description="Целые юани (u64)")
    dimes: int = Field(default=0, ge=0, le=9, description="Десятые (角)")
    cents: int = Field(default=0, ge=0, le=9, description="Сотые (分)")

    model_config = {"frozen": True}


class RenminbiCurrencyBuilder:
    """
    Builder для RenminbiCurrency.

    Поля задаются по одному; build() выполняет валидацию модели.
    """

    def __init__(self):
        self._style: CurrencyStyle = CurrencyStyle.EVERYDAY_FORMAL
        self._yuan: int = 0
        self._dimes: Optional[int] = None
        self._cents: Optional[int] = None

    def with_style(self, style: CurrencyStyle) -> "RenminbiCurrencyBuilder":
        self._style = style
        return self

    def with_yuan(self, yuan: int) -> "RenminbiCurrencyBuilder":
        self._yuan = yuan
        return self

    def with_dimes(self, dimes: int) -> "RenminbiCurrencyBuilder":
        self._dimes = dimes
        return self

    def with_cents(self, cents: int) -> "RenminbiCurrencyBuilder":
        self._cents = cents
        return self

    def build(self) -> RenminbiCurrency:
        """
        Raises:
            ValidationError: Если yuan вне u64 или dimes/cents вне [0, 9]
        """
        return RenminbiCurrency(
            style=self._style,
            yuan=self._yuan,
            dimes=self._dimes if self._dimes is not None else 0,
            cents=self._cents if self._cents is not None else 0,
        )
