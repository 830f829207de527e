"""
Сценарии: батарея и резистор в одном контуре.
"""
from __future__ import annotations

from circuit.simulator import CircuitSimulator
from devices import Battery, Resistor
from devices.base import Component
from .base import Scenario


class SeriesResistorScenario(Scenario):
    """
    Батарея 9 В (R_int = 0.1 Ом) на резистор 1 кОм.

    Установившийся ток по Нортону: E / (R + R_int)
    """

    def __init__(
        self,
        voltage: float = 9.0,
        resistance: float = 1000.0,
        rated_power: float = 0.25,
        t_end: float = 0.5,
    ):
        self.voltage = voltage
        self.resistance = resistance
        self.rated_power = rated_power
        self.t_end = t_end

    def name(self) -> str:
        return "БАТАРЕЯ + РЕЗИСТОР"

    def build(self, sim: CircuitSimulator) -> dict[str, Component]:
        battery = sim.add_component(Battery(self.voltage, position=(100.0, 100.0)))
        resistor = sim.add_component(Resistor(
            self.resistance, rated_power=self.rated_power, position=(250.0, 100.0),
        ))
        sim.connect(battery, 0, resistor, 0)
        sim.connect(resistor, 1, battery, 1)
        return {"battery": battery, "resistor": resistor}

    def expected_current(self) -> float:
        return self.voltage / (self.resistance + 0.1)

    def describe(self) -> str:
        return (
            f"{self.name()}: E = {self.voltage:.1f} В, "
            f"R = {self.resistance:.0f} Ом, t_end = {self.t_end:.2f} с"
        )


class ResistorOverloadScenario(SeriesResistorScenario):
    """
    Перегрузка резистора 1/4 Вт: 9 В на 100 Ом дают 0.81 Вт > 2 * 0.25 Вт.
    Резистор выгорает на первом шаге и размыкает цепь
    """

    def __init__(self, voltage: float = 9.0, resistance: float = 100.0, t_end: float = 0.2):
        super().__init__(voltage=voltage, resistance=resistance, t_end=t_end)

    def name(self) -> str:
        return "ПЕРЕГРУЗКА РЕЗИСТОРА"
