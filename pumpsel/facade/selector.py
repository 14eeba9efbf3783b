# pumpsel/facade/selector.py
"""Высокоуровневый *facade* для слоя интерфейса.

Класс **PumpSelector** собирает каталог, репозиторий кривых и резолвер
рабочей точки в один объект. Интерфейс (окно, веб‑страница, CLI)
получает от него:

1. список насосов и паспортные данные выбранного;
2. характеристики для построения графика (``CurveSet`` или DataFrame);
3. рассчитанную рабочую точку с вердиктом проверки.

Отрисовка и оформление сообщений остаются на стороне интерфейса.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from ..catalog import default_catalog
from ..core.curve_repository import CurveRepository
from ..core.resolver import OperatingPointResolver
from ..domain.curve_set import CurveSet
from ..domain.operating_point import OperatingPointQuery, OperatingPointResult, Verdict
from ..domain.pump_spec import PumpSpec


class PumpSelector:
    """Единая точка входа для внешних пользователей библиотеки."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(self, specs: Optional[Iterable[PumpSpec]] = None) -> None:
        self.repository = CurveRepository(default_catalog() if specs is None else specs)
        self.resolver = OperatingPointResolver(self.repository)

    # ------------------------------------------------------------------
    # Каталог и кривые
    # ------------------------------------------------------------------

    def list_pump_names(self) -> List[str]:
        return self.repository.list_pump_names()

    def pump_info(self, pump_name: str) -> PumpSpec:
        """Паспорт насоса (мощность, обороты, NPSH, КПД)."""
        return self.repository.get_spec(pump_name)

    def get_curve_set(self, pump_name: str) -> CurveSet:
        return self.repository.get_curve_set(pump_name)

    def curves_frame(self, pump_name: str) -> pd.DataFrame:
        return self.get_curve_set(pump_name).to_frame()

    # ------------------------------------------------------------------
    # Рабочая точка
    # ------------------------------------------------------------------

    def resolve(self, query: OperatingPointQuery) -> OperatingPointResult:
        return self.resolver.resolve(query)

    def resolve_point(
        self, pump_name: str, flow: float, head: Optional[float] = None
    ) -> OperatingPointResult:
        """То же, что ``resolve``, без ручного создания запроса."""
        return self.resolver.resolve(OperatingPointQuery(pump_name, flow, head))

    def check(self, query: OperatingPointQuery) -> Verdict:
        return self.resolver.check(query)

    def resolve_many(
        self,
        pump_name: str,
        flows: Iterable[float],
        head: Optional[float] = None,
    ) -> pd.DataFrame:
        """Таблица рабочих точек для ряда расходов (одна строка – один Q)."""
        records = [
            self.resolve_point(pump_name, q, head).as_record() for q in flows
        ]
        return pd.DataFrame.from_records(records)
