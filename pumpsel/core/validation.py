# pumpsel/core/validation.py
"""Проверка правдоподобия рабочей точки.

Правила – обычные функции ``rule(ctx) -> Iterable[Advisory]``, собранные
в упорядоченный список ``RULES``. Вердикт содержит предупреждения ровно
в порядке правил; ни одно правило не прерывает расчёт. Отказ
(``Rejected``) формируется раньше, в резолвере, при ошибке ввода.

Пороги берутся из :class:`ValidationPolicy` конкретного насоса.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence

from ..domain.curve_set import CurveSet
from ..domain.operating_point import Advisory, Verdict, WarningCode
from ..domain.pump_spec import PumpSpec, ValidationPolicy


@dataclass(frozen=True, slots=True)
class PointContext:
    """Всё, что нужно правилам: ввод, интерполяция, кривые, паспорт."""

    flow: float
    head: Optional[float]
    resolved_head: float
    efficiency: float
    curves: CurveSet
    spec: PumpSpec

    @property
    def policy(self) -> ValidationPolicy:
        return self.spec.policy


Rule = Callable[[PointContext], Iterable[Advisory]]


# ---------------------------------------------------------------------------
# Диапазоны расхода и напора
# ---------------------------------------------------------------------------


def flow_range(ctx: PointContext) -> Iterator[Advisory]:
    q_max = ctx.curves.max_flow
    if ctx.flow > q_max * (1 + ctx.policy.flow_far_margin):
        yield Advisory(WarningCode.FLOW_FAR_ABOVE_RANGE, ctx.flow, q_max)
    elif ctx.flow > q_max:
        yield Advisory(WarningCode.FLOW_ABOVE_RANGE, ctx.flow, q_max)


def head_range(ctx: PointContext) -> Iterator[Advisory]:
    if ctx.head is None:
        return
    h_max = ctx.curves.max_head
    if ctx.head > h_max * (1 + ctx.policy.head_far_margin):
        yield Advisory(WarningCode.HEAD_FAR_ABOVE_RANGE, ctx.head, h_max)
    elif ctx.head > h_max:
        yield Advisory(WarningCode.HEAD_ABOVE_RANGE, ctx.head, h_max)


def low_flow(ctx: PointContext) -> Iterator[Advisory]:
    limit = ctx.curves.max_flow * ctx.policy.low_flow_fraction
    if 0 < ctx.flow < limit:
        yield Advisory(WarningCode.FLOW_UNUSUALLY_LOW, ctx.flow, limit)


def low_head(ctx: PointContext) -> Iterator[Advisory]:
    if ctx.head is None:
        return
    limit = abs(ctx.curves.max_head) * ctx.policy.low_head_fraction
    if 0 < ctx.head < limit:
        yield Advisory(WarningCode.HEAD_UNUSUALLY_LOW, ctx.head, limit)


# ---------------------------------------------------------------------------
# Расстояние до характеристики H(Q)
# ---------------------------------------------------------------------------


def far_from_curve(ctx: PointContext) -> Iterator[Advisory]:
    """|H_зад − H(Q)| > max(|H(Q)|·доля, минимальный допуск)."""
    if ctx.head is None or ctx.head <= 0:
        return
    tolerance = max(
        abs(ctx.resolved_head) * ctx.policy.head_tolerance_fraction,
        ctx.policy.head_tolerance_min,
    )
    if abs(ctx.head - ctx.resolved_head) > tolerance:
        yield Advisory(WarningCode.FAR_FROM_CURVE, ctx.head, ctx.resolved_head)


# ---------------------------------------------------------------------------
# Режимные сообщения
# ---------------------------------------------------------------------------


def special_conditions(ctx: PointContext) -> Iterator[Advisory]:
    if ctx.flow == 0 and ctx.head == 0:
        yield Advisory(WarningCode.PUMP_STOPPED)
    elif ctx.flow == 0:
        yield Advisory(WarningCode.SHUTOFF)
    elif ctx.head == 0:
        yield Advisory(WarningCode.FREE_DISCHARGE)


def suction_operation(ctx: PointContext) -> Iterator[Advisory]:
    # до сюда отрицательный напор доходит только при allow_negative_head
    if ctx.head is not None and ctx.head < 0:
        yield Advisory(WarningCode.NEGATIVE_HEAD_SUCTION, ctx.head)


def low_efficiency(ctx: PointContext) -> Iterator[Advisory]:
    # при Q = 0 КПД всегда ноль, об этом уже сообщает SHUTOFF / PUMP_STOPPED
    if ctx.flow <= 0:
        return
    rated = ctx.spec.rated_efficiency_percent
    if ctx.efficiency < rated * ctx.policy.low_efficiency_fraction:
        yield Advisory(WarningCode.LOW_EFFICIENCY, ctx.efficiency, rated)


RULES: Sequence[Rule] = (
    flow_range,
    head_range,
    low_flow,
    low_head,
    far_from_curve,
    special_conditions,
    suction_operation,
    low_efficiency,
)


def evaluate(ctx: PointContext, rules: Sequence[Rule] = RULES) -> Verdict:
    """Применить правила по порядку и собрать вердикт."""
    advisories = [advisory for rule in rules for advisory in rule(ctx)]
    return Verdict.from_advisories(advisories)
