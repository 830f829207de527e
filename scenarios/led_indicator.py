"""
Сценарий: светодиод с токоограничивающим резистором.
"""
from __future__ import annotations

from circuit.simulator import CircuitSimulator
from devices import LED, Battery, Resistor
from devices.base import Component
from .base import Scenario


class LedIndicatorScenario(Scenario):
    """Батарея -> резистор -> светодиод -> батарея"""

    def __init__(
        self,
        color: str = "red",
        voltage: float = 9.0,
        series_resistance: float = 220.0,
        t_end: float = 0.5,
    ):
        self.color = color
        self.voltage = voltage
        self.series_resistance = series_resistance
        self.t_end = t_end

    def name(self) -> str:
        return "СВЕТОДИОДНЫЙ ИНДИКАТОР"

    def build(self, sim: CircuitSimulator) -> dict[str, Component]:
        battery = sim.add_component(Battery(self.voltage, position=(100.0, 100.0)))
        resistor = sim.add_component(Resistor(self.series_resistance, position=(250.0, 100.0)))
        led = sim.add_component(LED(self.color, position=(400.0, 100.0)))
        sim.connect(battery, 0, resistor, 0)
        sim.connect(resistor, 1, led, 0)
        sim.connect(led, 1, battery, 1)
        return {"battery": battery, "resistor": resistor, "led": led}

    def describe(self) -> str:
        return (
            f"{self.name()}: {self.color}, E = {self.voltage:.1f} В, "
            f"R = {self.series_resistance:.0f} Ом"
        )
