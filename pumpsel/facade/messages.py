# pumpsel/facade/messages.py
"""Тексты предупреждений для слоя интерфейса.

Ядро возвращает только коды (``WarningCode``/``RejectReason``);
здесь они превращаются в строки на нужном языке.
"""

from __future__ import annotations

from typing import Dict, List

from ..domain.operating_point import Advisory, RejectReason, Verdict, WarningCode

_ADVISORIES: Dict[str, Dict[WarningCode, str]] = {
    "en": {
        WarningCode.FLOW_FAR_ABOVE_RANGE: "Flow far above rated range (max {reference:.1f} m³/h).",
        WarningCode.FLOW_ABOVE_RANGE: "Flow above recommended range (max {reference:.1f} m³/h).",
        WarningCode.HEAD_FAR_ABOVE_RANGE: "Head far above curve range (max {reference:.1f} m).",
        WarningCode.HEAD_ABOVE_RANGE: "Head above recommended range (max {reference:.1f} m).",
        WarningCode.FLOW_UNUSUALLY_LOW: "Flow unusually low, check pump suitability.",
        WarningCode.HEAD_UNUSUALLY_LOW: "Head unusually low, check pump suitability.",
        WarningCode.FAR_FROM_CURVE: (
            "Specified point far from characteristic curve "
            "(expected head {reference:.2f} m)."
        ),
        WarningCode.PUMP_STOPPED: "Pump stopped.",
        WarningCode.SHUTOFF: "Shutoff condition, valve closed.",
        WarningCode.FREE_DISCHARGE: "Free discharge condition, no pressure.",
        WarningCode.NEGATIVE_HEAD_SUCTION: "Negative head (suction operation), check installation.",
        WarningCode.LOW_EFFICIENCY: "Low efficiency at this point ({value:.1f} %).",
    },
    "pt": {
        WarningCode.FLOW_FAR_ABOVE_RANGE: "Vazão muito alta para esta bomba (máx. {reference:.1f} m³/h).",
        WarningCode.FLOW_ABOVE_RANGE: "Vazão acima da faixa recomendada (máx. {reference:.1f} m³/h).",
        WarningCode.HEAD_FAR_ABOVE_RANGE: "Altura muito alta para esta bomba (máx. {reference:.1f} m).",
        WarningCode.HEAD_ABOVE_RANGE: "Altura acima da faixa recomendada (máx. {reference:.1f} m).",
        WarningCode.FLOW_UNUSUALLY_LOW: "Vazão muito baixa - verifique adequação.",
        WarningCode.HEAD_UNUSUALLY_LOW: "Altura muito baixa - verifique adequação.",
        WarningCode.FAR_FROM_CURVE: (
            "O ponto especificado está distante da curva característica "
            "(altura esperada {reference:.2f} m)."
        ),
        WarningCode.PUMP_STOPPED: "Condição de parada total - bomba desligada.",
        WarningCode.SHUTOFF: "Condição de shutoff - válvula fechada.",
        WarningCode.FREE_DISCHARGE: "Condição de descarga livre - sem pressão.",
        WarningCode.NEGATIVE_HEAD_SUCTION: "Operação com altura negativa (sucção) - verificar instalação.",
        WarningCode.LOW_EFFICIENCY: "Rendimento baixo neste ponto ({value:.1f} %).",
    },
}

_REJECTIONS: Dict[str, Dict[RejectReason, str]] = {
    "en": {
        RejectReason.NEGATIVE_FLOW: "Flow cannot be negative.",
        RejectReason.NEGATIVE_HEAD: "Head cannot be negative for this pump.",
        RejectReason.NON_NUMERIC_FLOW: "Invalid flow value.",
        RejectReason.NON_NUMERIC_HEAD: "Invalid head value.",
    },
    "pt": {
        RejectReason.NEGATIVE_FLOW: "Vazão não pode ser negativa.",
        RejectReason.NEGATIVE_HEAD: "Altura não pode ser negativa para esta bomba.",
        RejectReason.NON_NUMERIC_FLOW: "Valor de vazão inválido.",
        RejectReason.NON_NUMERIC_HEAD: "Valor de altura inválido.",
    },
}


def _table(tables: Dict[str, dict], lang: str) -> dict:
    try:
        return tables[lang]
    except KeyError:
        raise ValueError(f"Unsupported language '{lang}'") from None


def format_advisory(advisory: Advisory, lang: str = "en") -> str:
    template = _table(_ADVISORIES, lang)[advisory.code]
    return template.format(value=advisory.value, reference=advisory.reference)


def format_verdict(verdict: Verdict, lang: str = "en") -> List[str]:
    """Список строк для строки состояния; пустой для Ok."""
    if verdict.is_rejected:
        return [_table(_REJECTIONS, lang)[verdict.reason]]
    return [format_advisory(a, lang) for a in verdict.warnings]
