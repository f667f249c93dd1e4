"""
Generation - генераторы значений поверх RawGenerator.

Каждый модуль добавляет группу операций к ChineseFormatGenerator:
- numeric: integer, fraction, count
- digit_sequences: digit_sequence, decimal
- currency: renminbi
"""

from .currency import CurrencyGeneratorMixin, RenminbiParams
from .digit_sequences import DigitSequenceGeneratorMixin
from .numeric import NumericGeneratorMixin

__all__ = [
    "NumericGeneratorMixin",
    "DigitSequenceGeneratorMixin",
    "CurrencyGeneratorMixin",
    "RenminbiParams",
]
