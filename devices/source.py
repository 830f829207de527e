"""
Источник постоянного напряжения (батарея).

Вывод 0 - плюс, вывод 1 - минус. Для узлового анализа источник
представлен эквивалентом Нортона: проводимость 1/R_int и ток E/R_int
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind


class Battery(Component):
    """Батарея с внутренним сопротивлением"""

    kind = ComponentKind.SOURCE
    width = 80.0
    height = 50.0

    def __init__(
        self,
        voltage: float = 9.0,
        internal_resistance: float = 0.1,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if internal_resistance < 0.0:
            raise ValueError(
                f"internal_resistance must be >= 0, got {internal_resistance}."
            )
        super().__init__(position, rotation, thermal)
        self._voltage = float(voltage)
        self.internal_resistance = float(internal_resistance)

    @property
    def nominal_voltage(self) -> float:
        return self._voltage

    def set_voltage(self, voltage: float) -> None:
        self._voltage = float(voltage)

    def resistance(self) -> float:
        return np.inf if self.is_burned else self.internal_resistance

    def voltage(self) -> float:
        return 0.0 if self.is_burned else self._voltage

    def emf(self) -> float:
        return self.voltage()

    def current(self) -> float:
        # Ток ветви записывает драйвер после решения: он выходит из
        # вывода 0 и входит в вывод 1
        return self.terminals[1].current

    def update(self, dt: float) -> None:
        current = abs(self.current())
        self.power_dissipation = current * current * self.internal_resistance
        self._update_temperature(dt)
