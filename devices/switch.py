"""
Однополюсный выключатель (SPST)
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind


class Switch(Component):
    """Выключатель: почти ноль в замкнутом состоянии, 1 ГОм в разомкнутом"""

    kind = ComponentKind.SWITCH

    def __init__(
        self,
        is_open: bool = True,
        closed_resistance: float = 0.01,
        open_resistance: float = 1e9,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if closed_resistance <= 0.0:
            raise ValueError(
                f"closed_resistance must be > 0, got {closed_resistance}."
            )
        super().__init__(position, rotation, thermal)
        self.is_open = bool(is_open)
        self.closed_resistance = float(closed_resistance)
        self.open_resistance = float(open_resistance)

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def set_open(self, is_open: bool) -> None:
        self.is_open = bool(is_open)

    def resistance(self) -> float:
        if self.is_burned:
            return np.inf
        return self.open_resistance if self.is_open else self.closed_resistance

    def voltage(self) -> float:
        return self.terminal_voltage()

    def current(self) -> float:
        if self.is_open or self.is_burned:
            return 0.0
        return self.voltage() / self.closed_resistance

    def update(self, dt: float) -> None:
        current = self.current()
        self.power_dissipation = current * current * self.closed_resistance
        self._update_temperature(dt)
        self._set_terminal_currents(current)

    def _extra_readouts(self) -> dict:
        return {"is_open": self.is_open}
