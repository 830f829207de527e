"""
Контейнер результатов моделирования.

Хранит временные ряды показаний компонентов и метаданные запуска
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

# Показания, общие для всех компонентов
BASE_QUANTITIES = ("voltage", "current", "temperature", "power", "burned")

# Дополнительные показания по видам устройств
EXTRA_QUANTITIES = {
    "led": ("brightness",),
    "motor": ("rpm",),
    "capacitor": ("charge",),
    "switch": ("is_open",),
}


@dataclass
class SimulationResults:
    """Результаты одного прогона моделирования"""

    #Время
    t: np.ndarray

    #Ряды показаний: component_id -> величина -> массив [N]
    traces: Dict[str, Dict[str, np.ndarray]]

    #Вид компонента: component_id -> "resistor", "led", ...
    kinds: Dict[str, str]

    #Метаданные
    scenario_name: str = ""
    solver_name: str = ""

    # Дополнительные данные (для расширения)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def N(self) -> int:
        return len(self.t)

    @property
    def component_ids(self) -> list[str]:
        return list(self.traces)

    def trace(self, component_id: str, quantity: str) -> np.ndarray:
        try:
            return self.traces[component_id][quantity]
        except KeyError:
            raise KeyError(
                f"No trace '{quantity}' for component '{component_id}'"
            ) from None

    def label(self, component_id: str) -> str:
        """Подпись компонента из сценария (или его id)"""
        for name, cid in self.extra.get("labels", {}).items():
            if cid == component_id:
                return name
        return component_id

    def by_label(self, name: str, quantity: str) -> np.ndarray:
        return self.trace(self.extra["labels"][name], quantity)

    def final(self, component_id: str) -> Dict[str, float]:
        """Последние записанные значения всех величин компонента"""
        return {q: arr[-1].item() for q, arr in self.traces[component_id].items()}

    def burned_components(self) -> list[str]:
        return [cid for cid, tr in self.traces.items() if tr["burned"].any()]

    def burn_time(self, component_id: str) -> Optional[float]:
        """Момент первого выгорания или None"""
        burned = self.trace(component_id, "burned")
        if not burned.any():
            return None
        return float(self.t[int(np.argmax(burned))])

    def steady_state_slice(self, fraction: float = 0.75) -> slice:
        """Срез для анализа установившегося режима (последние 25% данных)"""
        idx = int(fraction * self.N)
        return slice(idx, None)

    def summary(self) -> str:
        """Краткая сводка установившегося режима по компонентам"""
        ss = self.steady_state_slice()
        lines = [
            f"  Сценарий: {self.scenario_name}",
            f"  Солвер: {self.solver_name}",
        ]
        if self.N == 0:
            lines.append("  Точек: 0")
            return "\n".join(lines)

        lines.append(f"  Точек: {self.N}, t = [{self.t[0]:.3f} .. {self.t[-1]:.3f}] с")
        for cid, tr in self.traces.items():
            line = (
                f"  {self.label(cid)}: U = {np.mean(tr['voltage'][ss]):.4g} В, "
                f"I = {np.mean(tr['current'][ss]):.4g} А, "
                f"T = {tr['temperature'][-1]:.1f} °C"
            )
            if "rpm" in tr:
                line += f", n = {np.mean(tr['rpm'][ss]):.0f} об/мин"
            if "brightness" in tr:
                line += f", яркость = {np.mean(tr['brightness'][ss]):.2f}"
            if tr["burned"].any():
                line += f", ВЫГОРЕЛ при t = {self.burn_time(cid):.3f} с"
            lines.append(line)
        return "\n".join(lines)


class ResultsRecorder:
    """Накопитель отсчётов по ходу моделирования"""

    def __init__(self):
        self._t: list[float] = []
        self._rows: Dict[str, Dict[str, list]] = {}
        self._kinds: Dict[str, str] = {}

    def record(self, t: float, components) -> None:
        self._t.append(t)
        n_prev = len(self._t) - 1
        for component in components:
            cid = component.id
            kind = component.kind.value
            readouts = component.readouts()
            if cid not in self._rows:
                # Компонент добавлен во время прогона: дополняем начало NaN
                quantities = BASE_QUANTITIES + EXTRA_QUANTITIES.get(kind, ())
                self._rows[cid] = {q: [np.nan] * n_prev for q in quantities}
                self._kinds[cid] = kind
            for q, values in self._rows[cid].items():
                values.append(readouts[q])

    def build(self, scenario_name: str = "", solver_name: str = "") -> SimulationResults:
        n = len(self._t)
        traces = {}
        for cid, rows in self._rows.items():
            traces[cid] = {}
            for q, values in rows.items():
                values = values + [np.nan] * (n - len(values))
                dtype = bool if q in ("burned", "is_open") else float
                if dtype is bool:
                    values = [bool(v) if v == v else False for v in values]
                traces[cid][q] = np.asarray(values, dtype=dtype)
        return SimulationResults(
            t=np.asarray(self._t, dtype=float),
            traces=traces,
            kinds=dict(self._kinds),
            scenario_name=scenario_name,
            solver_name=solver_name,
        )
