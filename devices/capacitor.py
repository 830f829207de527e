"""
Конденсатор с эквивалентным последовательным сопротивлением (ESR).

В узловом анализе конденсатор - это ESR последовательно с ЭДС Q/C
(сопутствующая модель явного метода Эйлера). После решения ток через
ESR интегрируется в заряд:

    I = (V_a - V_b - Q/C) / ESR
    Q += I * dt

Превышение заряда V_rated * C пробивает конденсатор, заряд сбрасывается
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind


class Capacitor(Component):
    """Конденсатор"""

    kind = ComponentKind.CAPACITOR
    width = 50.0
    height = 50.0

    def __init__(
        self,
        capacitance: float = 1e-4,
        rated_voltage: float = 25.0,
        esr: float = 0.1,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if capacitance <= 0.0:
            raise ValueError(f"capacitance must be > 0, got {capacitance}.")
        if esr <= 0.0:
            raise ValueError(f"esr must be > 0, got {esr}.")
        super().__init__(position, rotation, thermal)
        self.capacitance = float(capacitance)
        self.rated_voltage = float(rated_voltage)
        self.esr = float(esr)
        self.charge = 0.0

    @property
    def max_charge(self) -> float:
        return self.rated_voltage * self.capacitance

    def resistance(self) -> float:
        return np.inf if self.is_burned else self.esr

    def voltage(self) -> float:
        return self.charge / self.capacitance

    def emf(self) -> float:
        return self.voltage()

    def current(self) -> float:
        return self.terminals[0].current

    def update(self, dt: float) -> None:
        current = 0.0
        if not self.is_burned:
            current = (self.terminal_voltage() - self.voltage()) / self.esr
            self.charge += current * dt

            # Пробой
            if abs(self.charge) > self.max_charge:
                self.burn()
                self.charge = 0.0
                current = 0.0

        self._set_terminal_currents(current)
        self.power_dissipation = current * current * self.esr
        self._update_temperature(dt)

    def _extra_readouts(self) -> dict:
        return {"charge": self.charge}
