# pumpsel/core/resolver.py
"""Расчёт рабочей точки насоса по его характеристикам.

Порядок работы ``OperatingPointResolver.resolve``:

1. Получить кривые насоса из :class:`CurveRepository`
   (``NotFoundError``, если насоса нет в каталоге).
2. Проверить ввод: расход – конечное число ≥ 0; напор (если задан) –
   конечное число, ≥ 0 для насосов без разрешения на отрицательный
   напор. Ошибка → ``InvalidInputError``, результат не формируется.
3. При Q = 0 взять значения первой точки сетки, КПД принудительно 0.
4. Иначе интерполировать H, N, NPSH и η при заданном Q.
5. Прогнать правила ``core.validation`` и собрать вердикт.

Резолвер не хранит состояния между вызовами; единственное
разделяемое состояние – кэш репозитория.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

from .curve_repository import CurveRepository
from .errors import InvalidInputError
from .interpolation import Interpolator, default_interp
from .validation import RULES, PointContext, Rule, evaluate
from ..domain.operating_point import (
    OperatingPointQuery,
    OperatingPointResult,
    RejectReason,
    Verdict,
)
from ..domain.pump_spec import PumpSpec

logger = logging.getLogger(__name__)


def _to_float(value: object, reason: RejectReason, label: str) -> float:
    """Конечное число с плавающей точкой или ``InvalidInputError``.

    Строки и ``bool`` не принимаются: разбор ввода – забота интерфейса.
    """
    if isinstance(value, (str, bytes, bool)):
        number = math.nan
    else:
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            number = math.nan
    if not math.isfinite(number):
        raise InvalidInputError(reason, f"{label} must be a finite number, got {value!r}")
    return number


def check_input(query: OperatingPointQuery, spec: PumpSpec) -> Tuple[float, Optional[float]]:
    """Вернуть (Q, H) как float или поднять ``InvalidInputError``."""
    flow = _to_float(query.flow, RejectReason.NON_NUMERIC_FLOW, "Flow")
    if flow < 0:
        raise InvalidInputError(RejectReason.NEGATIVE_FLOW, f"Flow cannot be negative ({flow})")
    if query.head is None:
        return flow, None

    head = _to_float(query.head, RejectReason.NON_NUMERIC_HEAD, "Head")
    if head < 0 and not spec.policy.allow_negative_head:
        raise InvalidInputError(
            RejectReason.NEGATIVE_HEAD,
            f"Head cannot be negative for pump '{spec.name}' ({head})",
        )
    return flow, head


class OperatingPointResolver:
    """Интерполяция и проверка рабочей точки для насоса из каталога."""

    def __init__(
        self,
        repository: CurveRepository,
        interp: Interpolator = default_interp,
        rules: Sequence[Rule] = RULES,
    ) -> None:
        self.repository = repository
        self.interp = interp
        self.rules = rules

    # ------------------------------------------------------------------
    # Публичные методы
    # ------------------------------------------------------------------

    def resolve(self, query: OperatingPointQuery) -> OperatingPointResult:
        """Рассчитать рабочую точку; ошибки ввода поднимаются исключением."""
        spec, curves = self.repository.get_entry(query.pump_name)
        flow, head = check_input(query, spec)

        if flow == 0:
            resolved_head = curves.head[0]
            power = curves.power[0]
            npsh = curves.npsh[0]
            efficiency = 0.0
        else:
            resolved_head = self.interp(flow, curves.flow, curves.head)
            power = self.interp(flow, curves.flow, curves.power)
            npsh = self.interp(flow, curves.flow, curves.npsh)
            efficiency = self.interp(flow, curves.flow, curves.efficiency)

        ctx = PointContext(
            flow=flow,
            head=head,
            resolved_head=resolved_head,
            efficiency=efficiency,
            curves=curves,
            spec=spec,
        )
        verdict = evaluate(ctx, self.rules)

        logger.debug(
            "pump=%s Q=%.3f H=%.3f N=%.3f η=%.2f NPSH=%.3f verdict=%s",
            spec.name,
            flow,
            resolved_head,
            power,
            efficiency,
            npsh,
            verdict.status.name,
        )

        return OperatingPointResult(
            pump_name=spec.name,
            flow=flow,
            resolved_head=resolved_head,
            power=power,
            efficiency=efficiency,
            npsh=npsh,
            verdict=verdict,
            user_head=head,
        )

    def check(self, query: OperatingPointQuery) -> Verdict:
        """Только вердикт: ошибка ввода возвращается как ``Rejected``.

        ``NotFoundError`` по-прежнему поднимается – это не вопрос ввода
        рабочей точки, а неверный выбор насоса.
        """
        try:
            return self.resolve(query).verdict
        except InvalidInputError as exc:
            return exc.verdict
