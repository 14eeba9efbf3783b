# pumpsel/__init__.py
"""Пакет **pumpsel** (подбор центробежных насосов по характеристикам).

Инициализационный модуль упрощает импорт «ключевых сущностей»
библиотеки для внешних пользователей:

--- from pumpsel import PumpSelector, OperatingPointQuery ---

Экспортируемые объекты перечислены в ``__all__``: это служит
*public API* пакета.
"""

from __future__ import annotations

from .facade.selector import PumpSelector
from .domain.pump_spec import PumpSpec, ValidationPolicy
from .domain.curve_set import CurveSet
from .domain.operating_point import (
    OperatingPointQuery,
    OperatingPointResult,
    Verdict,
    VerdictStatus,
    WarningCode,
)
from .core.errors import InvalidInputError, NotFoundError, PumpSelectorError

__all__ = [
    "PumpSelector",         # фасад: каталог, кривые, рабочая точка
    "PumpSpec",             # паспорт насоса
    "ValidationPolicy",     # пороги предупреждений
    "CurveSet",             # дискретные характеристики H, N, NPSH, η
    "OperatingPointQuery",
    "OperatingPointResult",
    "Verdict",
    "VerdictStatus",
    "WarningCode",
    "PumpSelectorError",
    "NotFoundError",
    "InvalidInputError",
]
