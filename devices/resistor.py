"""
Резистор с номинальной мощностью рассеяния.

Перегрузка по мощности более чем вдвое сверх номинала приводит
к выгоранию: сопротивление становится бесконечным
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind

MIN_RESISTANCE = 0.1

BAND_COLORS = (
    "black", "brown", "red", "orange", "yellow",
    "green", "blue", "violet", "gray", "white",
)


class Resistor(Component):
    """Линейный резистор"""

    kind = ComponentKind.RESISTOR
    width = 70.0
    height = 30.0
    max_temperature = 200.0

    def __init__(
        self,
        resistance: float = 1000.0,
        rated_power: float = 0.25,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if resistance <= 0.0:
            raise ValueError(f"resistance must be > 0, got {resistance}.")
        if rated_power <= 0.0:
            raise ValueError(f"rated_power must be > 0, got {rated_power}.")
        super().__init__(position, rotation, thermal)
        self._resistance = float(resistance)
        self.rated_power = float(rated_power)

    @property
    def nominal_resistance(self) -> float:
        return self._resistance

    def set_resistance(self, resistance: float) -> None:
        self._resistance = max(MIN_RESISTANCE, float(resistance))

    def resistance(self) -> float:
        return np.inf if self.is_burned else self._resistance

    def voltage(self) -> float:
        return self.terminal_voltage()

    def current(self) -> float:
        if self.is_burned:
            return 0.0
        return self.voltage() / self._resistance

    def update(self, dt: float) -> None:
        current = self.current()
        self.power_dissipation = current * current * self._resistance

        # Перегрузка по мощности
        if self.power_dissipation > 2.0 * self.rated_power:
            self.burn()

        self._update_temperature(dt)
        self._set_terminal_currents(current)

    def color_bands(self) -> list[str]:
        """Цветовая маркировка: две цифры, множитель, допуск 5%"""
        if self._resistance < 10.0:
            # Две значащие цифры, множитель x0.1 (золотая полоса)
            digit1, digit2 = divmod(min(int(round(self._resistance * 10)), 99), 10)
            return [BAND_COLORS[digit1], BAND_COLORS[digit2], "gold", "gold"]
        value = int(np.floor(self._resistance))
        exponent = int(np.floor(np.log10(value)))
        mantissa = value // 10 ** (exponent - 1)
        digit1, digit2 = divmod(mantissa, 10)
        multiplier = min(max(0, exponent - 1), len(BAND_COLORS) - 1)
        return [BAND_COLORS[digit1], BAND_COLORS[digit2], BAND_COLORS[multiplier], "gold"]

    def _extra_readouts(self) -> dict:
        return {"rated_power": self.rated_power}
