# pumpsel/core/curve_repository.py
"""Репозиторий характеристик: имя насоса → :class:`CurveSet`.

Кривые строятся лениво при первом обращении и кэшируются целиком
(все пять массивов сразу). Кэш хранит пару *(паспорт, кривые)*: если
паспорт в каталоге заменён через ``register``, старые кривые
отбрасываются и строятся заново.

Чтение из кэша не блокируется; построение и замена записей идут под
замком, поэтому в многопоточном сервере каждый ``CurveSet`` строится
один раз и подменяется атомарно.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .curve_shapes import build_curve_set
from .errors import NotFoundError
from ..domain.curve_set import CurveSet
from ..domain.pump_spec import PumpSpec

logger = logging.getLogger(__name__)

CurveBuilder = Callable[[PumpSpec], CurveSet]


class CurveRepository:
    """Каталог паспортов насосов с кэшем построенных характеристик."""

    def __init__(
        self,
        specs: Iterable[PumpSpec] = (),
        builder: CurveBuilder = build_curve_set,
    ) -> None:
        self._specs: Dict[str, PumpSpec] = {}
        self._cache: Dict[str, Tuple[PumpSpec, CurveSet]] = {}
        self._lock = threading.Lock()
        self._builder = builder

        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate pump name '{spec.name}' in catalog.")
            self._specs[spec.name] = spec

    # ------------------------------------------------------------------
    # Каталог
    # ------------------------------------------------------------------

    def list_pump_names(self) -> List[str]:
        """Имена насосов в порядке регистрации."""
        return list(self._specs)

    def __contains__(self, pump_name: object) -> bool:
        return pump_name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def get_spec(self, pump_name: str) -> PumpSpec:
        try:
            return self._specs[pump_name]
        except (KeyError, TypeError):
            raise NotFoundError(pump_name) from None

    def register(self, spec: PumpSpec) -> None:
        """Добавить насос или заменить паспорт существующего."""
        with self._lock:
            replaced = spec.name in self._specs
            self._specs[spec.name] = spec
            self._cache.pop(spec.name, None)
        if replaced:
            logger.info("Pump '%s' spec replaced; cached curves dropped.", spec.name)

    # ------------------------------------------------------------------
    # Характеристики
    # ------------------------------------------------------------------

    def get_curve_set(self, pump_name: str) -> CurveSet:
        """Вернуть (и при необходимости построить) кривые насоса."""
        return self.get_entry(pump_name)[1]

    def get_entry(self, pump_name: str) -> Tuple[PumpSpec, CurveSet]:
        """Паспорт и построенные по нему кривые – одной согласованной парой."""
        spec = self.get_spec(pump_name)
        entry = self._cache.get(pump_name)
        if entry is not None and entry[0] is spec:
            return entry

        with self._lock:
            # Паспорт мог смениться, пока ждали замок
            spec = self.get_spec(pump_name)
            entry = self._cache.get(pump_name)
            if entry is None or entry[0] is not spec:
                logger.debug("Building curves for pump '%s'", pump_name)
                entry = (spec, self._builder(spec))
                self._cache[pump_name] = entry
            return entry

    def invalidate(self, pump_name: Optional[str] = None) -> None:
        """Сбросить кэш одного насоса (или всех, если имя не задано)."""
        with self._lock:
            if pump_name is None:
                self._cache.clear()
                logger.info("Curve cache cleared.")
                return
            if pump_name not in self._specs:
                raise NotFoundError(pump_name)
            self._cache.pop(pump_name, None)
        logger.info("Curve cache for pump '%s' invalidated.", pump_name)

    def is_cached(self, pump_name: str) -> bool:
        entry = self._cache.get(pump_name)
        return entry is not None and entry[0] is self._specs.get(pump_name)
