# pumpsel/domain/curve_set.py
"""Дискретные характеристики насоса, построенные по его паспорту.

Пять синхронизированных кортежей одной длины:

* **flow** – расход Q (м³/ч), строго возрастает, первая точка равна 0;
* **head** – напор H (м);
* **power** – потребляемая мощность N (CV);
* **npsh** – требуемый кавитационный запас (м);
* **efficiency** – КПД η (%), при Q = 0 строго равен нулю.

Кортежи выбраны намеренно: потребители получают данные только для
чтения, а репозиторий может отдавать один и тот же объект всем.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from .. import constants


@dataclass(frozen=True, slots=True)
class CurveSet:
    """Контейнер характеристик H(Q), N(Q), NPSH(Q), η(Q)."""

    pump_name: str
    flow: Tuple[float, ...]
    head: Tuple[float, ...]
    power: Tuple[float, ...]
    npsh: Tuple[float, ...]
    efficiency: Tuple[float, ...]

    def __post_init__(self) -> None:
        n = len(self.flow)
        if n == 0:
            raise ValueError("Curve set must contain at least one sample.")
        if not (n == len(self.head) == len(self.power) == len(self.npsh) == len(self.efficiency)):
            raise ValueError("All curve sequences must have equal length.")
        if self.flow[0] != 0:
            raise ValueError("Flow samples must start at zero.")
        if any(b <= a for a, b in zip(self.flow, self.flow[1:])):
            raise ValueError("Flow samples must be strictly increasing.")
        if self.efficiency[0] != 0:
            raise ValueError("Efficiency at zero flow must be zero.")

    # ------------------------------------------------------------------
    # Справочные величины
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.flow)

    @property
    def max_flow(self) -> float:
        return self.flow[-1]

    @property
    def max_head(self) -> float:
        return max(self.head)

    @property
    def min_head(self) -> float:
        return min(self.head)

    @property
    def bep_flow(self) -> float:
        """Расход сеточной точки с наибольшим КПД."""
        best = max(range(len(self.efficiency)), key=self.efficiency.__getitem__)
        return self.flow[best]

    def bounds(self) -> dict[str, Tuple[float, float]]:
        """(min, max) каждой характеристики – для масштабирования осей."""
        return {
            "flow": (self.flow[0], self.flow[-1]),
            "head": (self.min_head, self.max_head),
            "power": (min(self.power), max(self.power)),
            "npsh": (min(self.npsh), max(self.npsh)),
            "efficiency": (min(self.efficiency), max(self.efficiency)),
        }

    def to_frame(self) -> pd.DataFrame:
        """Таблица характеристик (одна строка – одна точка сетки)."""
        return pd.DataFrame(
            {
                constants.COL_FLOW: self.flow,
                constants.COL_HEAD: self.head,
                constants.COL_POWER: self.power,
                constants.COL_NPSH: self.npsh,
                constants.COL_EFFICIENCY: self.efficiency,
            }
        )
