# pumpsel/domain/operating_point.py
"""Запрос рабочей точки, результат её расчёта и вердикт проверки.

Предупреждения передаются **кодами** (``WarningCode``) с числовыми
подробностями, а не готовыми строками: текст сообщений формирует слой
представления (см. ``facade.messages``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Tuple

from .. import constants


class WarningCode(Enum):
    """Коды предупреждений, в порядке применения правил проверки."""

    FLOW_FAR_ABOVE_RANGE = "flow_far_above_range"
    FLOW_ABOVE_RANGE = "flow_above_range"
    HEAD_FAR_ABOVE_RANGE = "head_far_above_range"
    HEAD_ABOVE_RANGE = "head_above_range"
    FLOW_UNUSUALLY_LOW = "flow_unusually_low"
    HEAD_UNUSUALLY_LOW = "head_unusually_low"
    FAR_FROM_CURVE = "far_from_curve"
    PUMP_STOPPED = "pump_stopped"
    SHUTOFF = "shutoff"
    FREE_DISCHARGE = "free_discharge"
    NEGATIVE_HEAD_SUCTION = "negative_head_suction"
    LOW_EFFICIENCY = "low_efficiency"

    @property
    def informational(self) -> bool:
        """Режимные сообщения, а не признаки неправдоподобной точки."""
        return self in _INFORMATIONAL


_INFORMATIONAL = frozenset(
    {
        WarningCode.PUMP_STOPPED,
        WarningCode.SHUTOFF,
        WarningCode.FREE_DISCHARGE,
        WarningCode.NEGATIVE_HEAD_SUCTION,
        WarningCode.LOW_EFFICIENCY,
    }
)


class RejectReason(Enum):
    """Причины отказа в расчёте (ошибка входных данных)."""

    NEGATIVE_FLOW = auto()
    NEGATIVE_HEAD = auto()
    NON_NUMERIC_FLOW = auto()
    NON_NUMERIC_HEAD = auto()


class VerdictStatus(Enum):
    OK = auto()
    WARNING = auto()
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class Advisory:
    """Одно предупреждение: код + значение, вызвавшее его, + ориентир.

    ``reference`` – например, ожидаемый по кривой напор для
    ``FAR_FROM_CURVE`` или верхняя граница сетки для ``FLOW_ABOVE_RANGE``.
    """

    code: WarningCode
    value: Optional[float] = None
    reference: Optional[float] = None


@dataclass(frozen=True, slots=True)
class Verdict:
    """Итог проверки: Ok / Warning(список) / Rejected(причина)."""

    status: VerdictStatus
    warnings: Tuple[Advisory, ...] = ()
    reason: Optional[RejectReason] = None

    def __post_init__(self) -> None:
        if self.status is VerdictStatus.OK and (self.warnings or self.reason):
            raise ValueError("An Ok verdict carries neither warnings nor a reason.")
        if self.status is VerdictStatus.WARNING and (not self.warnings or self.reason):
            raise ValueError("A Warning verdict needs at least one advisory.")
        if self.status is VerdictStatus.REJECTED and (self.reason is None or self.warnings):
            raise ValueError("A Rejected verdict needs a reason and no advisories.")

    # --- конструкторы ---
    @classmethod
    def ok(cls) -> "Verdict":
        return cls(VerdictStatus.OK)

    @classmethod
    def warning(cls, advisories: Iterable[Advisory]) -> "Verdict":
        return cls(VerdictStatus.WARNING, tuple(advisories))

    @classmethod
    def rejected(cls, reason: RejectReason) -> "Verdict":
        return cls(VerdictStatus.REJECTED, reason=reason)

    @classmethod
    def from_advisories(cls, advisories: Iterable[Advisory]) -> "Verdict":
        advisories = tuple(advisories)
        return cls.warning(advisories) if advisories else cls.ok()

    # --- удобства ---
    @property
    def is_ok(self) -> bool:
        return self.status is VerdictStatus.OK

    @property
    def is_rejected(self) -> bool:
        return self.status is VerdictStatus.REJECTED

    @property
    def codes(self) -> Tuple[WarningCode, ...]:
        return tuple(a.code for a in self.warnings)

    def __contains__(self, code: object) -> bool:
        return code in self.codes


@dataclass(frozen=True, slots=True)
class OperatingPointQuery:
    """Ввод пользователя: насос, расход Q и (необязательно) напор H."""

    pump_name: str
    flow: float
    head: Optional[float] = None


@dataclass(frozen=True, slots=True)
class OperatingPointResult:
    """Интерполированные по характеристикам величины в рабочей точке."""

    pump_name: str
    flow: float
    resolved_head: float
    power: float
    efficiency: float
    npsh: float
    verdict: Verdict
    user_head: Optional[float] = None

    def as_record(self) -> dict:
        """Строка отчёта (ключи – подписи столбцов из ``constants``)."""
        return {
            constants.COL_FLOW: self.flow,
            constants.COL_USER_HEAD: self.user_head,
            constants.COL_HEAD: self.resolved_head,
            constants.COL_POWER: self.power,
            constants.COL_NPSH: self.npsh,
            constants.COL_EFFICIENCY: self.efficiency,
            constants.COL_VERDICT: self.verdict.status.name,
            constants.COL_WARNINGS: ", ".join(c.value for c in self.verdict.codes),
        }
