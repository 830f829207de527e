"""
Сценарий: пуск двигателя постоянного тока от батареи.
"""
from __future__ import annotations

from circuit.simulator import CircuitSimulator
from devices import Battery, Motor, Switch
from devices.base import Component
from .base import Action, Scenario


class MotorStartScenario(Scenario):
    """
    Прямой пуск двигателя.

    Ротор стартует с n = 0, выключатель замыкается в t_close.
    При t_open (если задан) питание снимается и ротор выбегает
    """

    def __init__(
        self,
        voltage: float = 9.0,
        t_close: float = 0.1,
        t_open: float | None = None,
        t_end: float = 3.0,
    ):
        self.voltage = voltage
        self.t_close = t_close
        self.t_open = t_open
        self.t_end = t_end
        self._switch: Switch | None = None

    def name(self) -> str:
        return "ПУСК ДВИГАТЕЛЯ"

    def build(self, sim: CircuitSimulator) -> dict[str, Component]:
        battery = sim.add_component(Battery(self.voltage, position=(100.0, 100.0)))
        switch = sim.add_component(Switch(is_open=True, position=(200.0, 100.0)))
        motor = sim.add_component(Motor(position=(320.0, 100.0)))
        sim.connect(battery, 0, switch, 0)
        sim.connect(switch, 1, motor, 0)
        sim.connect(motor, 1, battery, 1)
        self._switch = switch
        return {"battery": battery, "switch": switch, "motor": motor}

    def actions(self) -> list[tuple[float, Action]]:
        events = [(self.t_close, lambda sim: self._switch.set_open(False))]
        if self.t_open is not None:
            events.append((self.t_open, lambda sim: self._switch.set_open(True)))
        return events

    def describe(self) -> str:
        return (
            f"{self.name()}: E = {self.voltage:.1f} В, "
            f"t_close = {self.t_close:.2f} с, t_end = {self.t_end:.1f} с"
        )
