"""
Светодиод.

Кусочная модель диода:
  - V >= Vf      : открыт, R = R_f, I = (V - Vf) / R_f
  - 0 < V < Vf   : сопротивление растёт экспоненциально, R = R_f * exp(5 (Vf - V))
  - V <= 0       : обратное смещение, R = R_rev
Ток ограничен current_limit * I_max (1.5 по умолчанию). Ток выше 2 * I_max сжигает диод
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind

# Цвет -> (hex, прямое напряжение, В)
LED_COLORS = {
    "red": ("#ff0000", 2.0),
    "green": ("#00ff00", 2.2),
    "blue": ("#0000ff", 3.2),
    "yellow": ("#ffff00", 2.1),
    "white": ("#ffffff", 3.4),
}

SUBTHRESHOLD_SLOPE = 5.0    # 1/В
BURNOUT_FACTOR = 2.0


class LED(Component):
    """Светодиод с яркостью, пропорциональной току"""

    kind = ComponentKind.LED
    width = 40.0
    height = 40.0
    max_temperature = 125.0

    def __init__(
        self,
        color: str = "red",
        forward_resistance: float = 10.0,
        reverse_resistance: float = 1e6,
        max_current: float = 0.03,
        current_limit: float = 1.5,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if forward_resistance <= 0.0:
            raise ValueError(
                f"forward_resistance must be > 0, got {forward_resistance}."
            )
        if max_current <= 0.0:
            raise ValueError(f"max_current must be > 0, got {max_current}.")
        super().__init__(position, rotation, thermal)
        self.color, (self.hex_color, self.forward_voltage) = self._lookup_color(color)
        self.forward_resistance = float(forward_resistance)
        self.reverse_resistance = float(reverse_resistance)
        self.max_current = float(max_current)
        self.current_limit = float(current_limit)
        self.brightness = 0.0

    @staticmethod
    def _lookup_color(color: str):
        key = color.lower()
        if key not in LED_COLORS:
            key = "red"
        return key, LED_COLORS[key]

    def resistance(self) -> float:
        if self.is_burned:
            return np.inf
        v = self.voltage()
        if v >= self.forward_voltage:
            return self.forward_resistance
        if v > 0.0:
            return self.forward_resistance * float(
                np.exp((self.forward_voltage - v) * SUBTHRESHOLD_SLOPE)
            )
        return self.reverse_resistance

    def voltage(self) -> float:
        return self.terminal_voltage()

    def _conduction_current(self) -> float:
        v = self.voltage()
        if v < self.forward_voltage:
            return 0.0
        return (v - self.forward_voltage) / self.forward_resistance

    def current(self) -> float:
        if self.is_burned:
            return 0.0
        return min(self._conduction_current(), self.current_limit * self.max_current)

    def update(self, dt: float) -> None:
        current = self.current()

        if current > 0.0 and not self.is_burned:
            self.brightness = min(current / self.max_current, 1.0)
        else:
            self.brightness = 0.0

        self.power_dissipation = self.voltage() * current

        # Перегрузка по току
        if current > BURNOUT_FACTOR * self.max_current:
            self.burn()
            self.brightness = 0.0

        self._update_temperature(dt)
        self._set_terminal_currents(current)

    def _extra_readouts(self) -> dict:
        return {
            "brightness": self.brightness,
            "color": self.color,
            "forward_voltage": self.forward_voltage,
        }
