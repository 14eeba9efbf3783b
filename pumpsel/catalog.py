# pumpsel/catalog.py
"""Встроенный каталог насосов.

Коэффициенты форм подобраны по каталожным кривым производителя; для
«Bomba Trabalho» напор в конце диапазона уходит ниже нуля, поэтому
отрицательный заданный напор для неё допустим (работа на всасывание).
"""

from __future__ import annotations

from typing import Tuple

from .domain.pump_spec import (
    CurveShape,
    HeadShape,
    NpshShape,
    PowerShape,
    PumpSpec,
    ValidationPolicy,
)

BC21_3CV = PumpSpec(
    name="BC-21 R 1/2 (3 CV)",
    rated_power_cv=3,
    rated_rpm=3500,
    rated_npsh_m=2.87,
    rated_efficiency_percent=57.05,
    shape=CurveShape(
        max_flow=42,
        bep_flow=25,
        head=HeadShape(shutoff_head=32, end_head=0, reference_flow=45, exponent=1.8),
        power=PowerShape(c0=0.8, c1=2.2 / 42, c2=0.001),
        npsh=NpshShape(c0=1.5, c1=2.5 / 42, c2=0.0008),
        samples=80,
    ),
)

BC21_4CV = PumpSpec(
    name="BC-21 R 1/2 (4 CV)",
    rated_power_cv=4,
    rated_rpm=3500,
    rated_npsh_m=2.87,
    rated_efficiency_percent=54.68,
    shape=CurveShape(
        max_flow=50,
        bep_flow=30,
        head=HeadShape(shutoff_head=42, end_head=0, reference_flow=55, exponent=1.8),
        power=PowerShape(c0=1.2, c1=2.8 / 50, c2=0.0008),
        npsh=NpshShape(c0=1.8, c1=2.2 / 50, c2=0.0006),
        samples=80,
    ),
)

# Мощность: 12 + (46.5 − 12)·(0.3·n + 0.7·n²), n = Q / 500
# NPSH до 300 м³/ч: 15 + 10·(0.4·n + 0.6·n²), n = Q / 300
BOMBA_TRABALHO = PumpSpec(
    name="Bomba Trabalho",
    rated_power_cv=46.5,
    rated_rpm=1700,
    rated_npsh_m=25,
    rated_efficiency_percent=75,
    shape=CurveShape(
        max_flow=500,
        bep_flow=300,
        head=HeadShape(shutoff_head=200, end_head=-10, reference_flow=500, exponent=1.5),
        power=PowerShape(c0=12, c1=34.5 * 0.3 / 500, c2=34.5 * 0.7 / 500**2),
        npsh=NpshShape(
            c0=15,
            c1=10 * 0.4 / 300,
            c2=10 * 0.6 / 300**2,
            peak_flow=300,
            drop=1.5,
        ),
        samples=100,
    ),
    policy=ValidationPolicy(allow_negative_head=True),
)


def default_catalog() -> Tuple[PumpSpec, ...]:
    """Каталог в порядке отображения в списке выбора."""
    return (BC21_3CV, BC21_4CV, BOMBA_TRABALHO)
