"""
Currency generators - случайные суммы в юанях

Порядок выборок: юани (u64), затем 角 (если запрошены), затем 分 (если запрошены).
"""

from dataclasses import dataclass

from src.core.domain.currency import (
    CurrencyStyle,
    RenminbiCurrency,
    RenminbiCurrencyBuilder,
)
from src.core.errors import valid_by_construction
from src.core.raw.base import IntRange, RawGenerator


@dataclass(frozen=True)
class RenminbiParams:
    """Параметры генерации RenminbiCurrency."""

    style: CurrencyStyle
    yuan_range: IntRange
    include_dimes: bool = False  # Генерировать 角
    include_cents: bool = False  # Генерировать 分


class CurrencyGeneratorMixin:
    """Генерация renminbi для ChineseFormatGenerator."""

    _raw_generator: RawGenerator

    def renminbi(self, params: RenminbiParams) -> RenminbiCurrency:
        """
        Случайная RenminbiCurrency.

        Каждая дополнительная единица (角, 分) выбирается в [0, 9] только
        если запрошена; иначе остаётся 0.

        Args:
            params: Стиль, диапазон юаней и флаги дополнительных единиц

        Returns:
            RenminbiCurrency
        """
        builder = (
            RenminbiCurrencyBuilder()
            .with_style(params.style)
            .with_yuan(self._raw_generator.u64(params.yuan_range))
        )

        if params.include_dimes:
            builder = builder.with_dimes(self._raw_generator.u8((0, 9)))

        if params.include_cents:
            builder = builder.with_cents(self._raw_generator.u8((0, 9)))

        with valid_by_construction("Renminbi params correct by construction"):
            return builder.build()
