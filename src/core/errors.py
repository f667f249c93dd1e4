"""
Errors - ошибки генерации

Две категории:
1. InvalidLowerBound - ошибка вызывающей стороны (недопустимая нижняя граница),
   возвращается немедленно как типизированное исключение
2. ConstructionInvariantError - нарушение внутреннего инварианта: builder отклонил
   значения, валидные по построению. Это дефект логики, а не ошибка вызова.
"""

from contextlib import contextmanager
from typing import Iterator


class InvalidLowerBound(ValueError):
    """
    Нижняя граница диапазона недопустима.

    Пример:
        >>> str(InvalidLowerBound(90))
        'Invalid lower bound: 90'
    """

    def __init__(self, bound: int):
        self.bound = bound
        super().__init__(f"Invalid lower bound: {bound}")


class ConstructionInvariantError(AssertionError):
    """Builder отклонил значения, которые валидны по построению."""

    pass


@contextmanager
def valid_by_construction(message: str) -> Iterator[None]:
    """
    Превращает ValueError от builder в ConstructionInvariantError.

    Используется там, где все входы уже ограничены допустимыми диапазонами,
    поэтому отказ builder невозможен при корректной логике.

    Args:
        message: Описание инварианта (например, 'Hour valid by construction')
    """
    try:
        yield
    except ValueError as e:
        raise ConstructionInvariantError(f"{message}: {e}") from e
