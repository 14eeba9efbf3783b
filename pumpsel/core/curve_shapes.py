# pumpsel/core/curve_shapes.py
"""Аналитические формы характеристик насоса.

Каждая функция принимает массив расходов ``q`` (м³/ч) и параметры формы
из паспорта, а возвращает массив той же длины. ``build_curve_set``
собирает из них готовый :class:`CurveSet`.
"""

from __future__ import annotations

import logging

import numpy as np

from .errors import CurveGenerationError
from ..domain.curve_set import CurveSet
from ..domain.pump_spec import CurveShape, HeadShape, NpshShape, PowerShape, PumpSpec

logger = logging.getLogger(__name__)


def flow_grid(shape: CurveShape) -> np.ndarray:
    """Равномерная сетка расходов 0 … Q_max из ``shape.samples`` точек."""
    return np.linspace(0.0, shape.max_flow, shape.samples)


def head_curve(q: np.ndarray, shape: HeadShape) -> np.ndarray:
    """H(Q) = H0 + (H_end − H0)·(Q / Q_ref)^n – монотонно невозрастающая."""
    ratio = q / shape.reference_flow
    return shape.shutoff_head + (shape.end_head - shape.shutoff_head) * ratio**shape.exponent


def power_curve(q: np.ndarray, shape: PowerShape) -> np.ndarray:
    """N(Q) = c0 + c1·Q + c2·Q²."""
    return shape.c0 + shape.c1 * q + shape.c2 * q * q


def npsh_curve(q: np.ndarray, shape: NpshShape, max_flow: float) -> np.ndarray:
    """Квадратичный рост, после ``peak_flow`` – плавный спад (не ниже 0)."""
    rise = shape.c0 + shape.c1 * q + shape.c2 * q * q
    peak = shape.peak_flow
    if peak is None or peak >= max_flow:
        return np.maximum(rise, 0.0)

    at_peak = shape.c0 + shape.c1 * peak + shape.c2 * peak * peak
    m = (q - peak) / (max_flow - peak)
    fall = at_peak - shape.drop * (0.6 * m + 0.4 * m * m)
    return np.maximum(np.where(q <= peak, rise, fall), 0.0)


def efficiency_curve(q: np.ndarray, bep_flow: float, rated_efficiency: float) -> np.ndarray:
    """η(Q) = η_ном·x·(2 − x), x = Q / Q_bep.

    Парабола проходит через ноль при Q = 0 и достигает η_ном ровно в
    точке BEP; справа от неё спадает, отрицательные значения срезаются.
    """
    x = q / bep_flow
    return np.clip(rated_efficiency * x * (2.0 - x), 0.0, rated_efficiency)


def build_curve_set(spec: PumpSpec) -> CurveSet:
    """Построить все четыре характеристики насоса по его паспорту."""
    shape = spec.shape
    q = flow_grid(shape)

    curves = {
        "head": head_curve(q, shape.head),
        "power": power_curve(q, shape.power),
        "npsh": npsh_curve(q, shape.npsh, shape.max_flow),
        "efficiency": efficiency_curve(q, shape.bep_flow, spec.rated_efficiency_percent),
    }
    for label, values in curves.items():
        if not np.all(np.isfinite(values)):
            raise CurveGenerationError(
                f"Non-finite {label} values generated for pump '{spec.name}'"
            )

    logger.debug(
        "pump=%s samples=%d Qmax=%.1f H0=%.2f Hend=%.2f",
        spec.name,
        len(q),
        shape.max_flow,
        curves["head"][0],
        curves["head"][-1],
    )

    return CurveSet(
        pump_name=spec.name,
        flow=tuple(q.tolist()),
        head=tuple(curves["head"].tolist()),
        power=tuple(curves["power"].tolist()),
        npsh=tuple(curves["npsh"].tolist()),
        efficiency=tuple(curves["efficiency"].tolist()),
    )
