# pumpsel/core/errors.py
"""Типизированные ошибки ядра.

Репозиторий кривых и резолвер ничего не перехватывают: любая ошибка
доходит до вызывающего кода одним из этих типов.
"""

from __future__ import annotations

from ..domain.operating_point import RejectReason, Verdict


class PumpSelectorError(Exception):
    """Базовый класс всех ошибок пакета."""


class NotFoundError(PumpSelectorError, LookupError):
    """Насос с таким именем отсутствует в каталоге."""

    def __init__(self, pump_name: str) -> None:
        super().__init__(f"Unknown pump '{pump_name}'")
        self.pump_name = pump_name


class InvalidInputError(PumpSelectorError, ValueError):
    """Недопустимые входные данные рабочей точки; результата нет."""

    def __init__(self, reason: RejectReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason

    @property
    def verdict(self) -> Verdict:
        return Verdict.rejected(self.reason)


class CurveGenerationError(PumpSelectorError, ValueError):
    """Формулы формы дали нечисловые значения (NaN/inf)."""
