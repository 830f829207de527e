"""
Сценарий: заряд конденсатора через резистор.
"""
from __future__ import annotations

from circuit.simulator import CircuitSimulator
from devices import Battery, Capacitor, Resistor, Switch
from devices.base import Component
from .base import Action, Scenario


class CapacitorChargeScenario(Scenario):
    """
    RC-цепь: батарея -> выключатель -> резистор -> конденсатор.

    Выключатель замыкается в момент t_close, напряжение на конденсаторе
    стремится к E с постоянной времени tau = (R + R_int + R_sw + ESR) * C
    """

    def __init__(
        self,
        voltage: float = 9.0,
        resistance: float = 1000.0,
        capacitance: float = 1e-4,
        t_close: float = 0.05,
        t_end: float = 1.0,
    ):
        self.voltage = voltage
        self.resistance = resistance
        self.capacitance = capacitance
        self.t_close = t_close
        self.t_end = t_end
        self._switch: Switch | None = None

    def name(self) -> str:
        return "ЗАРЯД КОНДЕНСАТОРА"

    @property
    def tau(self) -> float:
        return (self.resistance + 0.1 + 0.01 + 0.1) * self.capacitance

    def build(self, sim: CircuitSimulator) -> dict[str, Component]:
        battery = sim.add_component(Battery(self.voltage, position=(100.0, 100.0)))
        switch = sim.add_component(Switch(is_open=True, position=(200.0, 100.0)))
        resistor = sim.add_component(Resistor(self.resistance, position=(300.0, 100.0)))
        capacitor = sim.add_component(Capacitor(self.capacitance, position=(400.0, 100.0)))
        sim.connect(battery, 0, switch, 0)
        sim.connect(switch, 1, resistor, 0)
        sim.connect(resistor, 1, capacitor, 0)
        sim.connect(capacitor, 1, battery, 1)
        self._switch = switch
        return {
            "battery": battery,
            "switch": switch,
            "resistor": resistor,
            "capacitor": capacitor,
        }

    def actions(self) -> list[tuple[float, Action]]:
        def close(sim: CircuitSimulator) -> None:
            self._switch.set_open(False)

        return [(self.t_close, close)]

    def describe(self) -> str:
        return (
            f"{self.name()}: E = {self.voltage:.1f} В, R = {self.resistance:.0f} Ом, "
            f"C = {self.capacitance * 1e6:.0f} мкФ, tau = {self.tau * 1e3:.0f} мс"
        )
