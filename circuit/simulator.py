"""
CircuitSimulator - состояние схемы и драйвер с фиксированным шагом.

Один шаг решения:
    перестроение графа (если менялась топология)
      -> сборка G, b
      -> решение G v = b
      -> запись узловых напряжений в узлы и выводы (земля = 0)
      -> токи ветвей источников
      -> component.update(dt) для каждого компонента
      -> оценка токов проводов

tick(frame_dt) добавляет реальное прошедшее время в накопитель и
выполняет столько фиксированных шагов, сколько в нём помещается.
Кадровый dt ограничен max_frame_delta, нечисловой dt считается нулём.

Соглашение о токе вывода: ток, втекающий В компонент через этот вывод.
Положительный ток current() пассивного компонента течёт от вывода 0
к выводу 1.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import SimulationConfig
from devices.base import Component, ComponentKind
from solvers.base import LinearSolver
from solvers.gauss import GaussianEliminationSolver
from .assembler import CircuitAssembler
from .topology import CircuitGraph, Node
from .wire import Wire


class CircuitSimulator:
    """
    Состояние схемы (компоненты, провода, карта узлов) и цикл решения.

    Однопоточный. Топологию можно менять только между шагами.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        solver: Optional[LinearSolver] = None,
    ):
        self.config = config or SimulationConfig()
        self.solver = solver or GaussianEliminationSolver()
        self.graph = CircuitGraph()
        self._assembler = CircuitAssembler(self.graph)
        self._components: list[Component] = []
        self._wires: list[Wire] = []
        self._dirty = False
        self._in_step = False
        self._accumulator = 0.0
        self.time = 0.0
        self.step_count = 0
        self.last_solution: Optional[np.ndarray] = None

    # Запросы
    @property
    def components(self) -> list[Component]:
        return list(self._components)

    @property
    def wires(self) -> list[Wire]:
        return list(self._wires)

    @property
    def nodes(self) -> dict[int, Node]:
        return self.graph.nodes

    @property
    def ground_node(self) -> Optional[int]:
        return self.graph.ground

    def node_voltage(self, node_id: int) -> float:
        return self.graph.nodes[node_id].voltage

    def component_at(self, point) -> Optional[Component]:
        """Верхний (последний добавленный) компонент, содержащий точку"""
        for component in reversed(self._components):
            if component.contains_point(point):
                return component
        return None

    def find(self, component_id: str) -> Optional[Component]:
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    # Изменение топологии
    def _check_editable(self) -> None:
        if self._in_step:
            raise RuntimeError("Topology cannot change during a simulation step")

    def add_component(self, component: Component) -> Component:
        self._check_editable()
        if any(c is component for c in self._components):
            raise ValueError(f"{component!r} is already in the circuit")
        self.graph.attach(component)
        self._components.append(component)
        self._topology_changed()
        return component

    def remove_component(self, component: Component) -> None:
        self._check_editable()
        if not any(c is component for c in self._components):
            return
        self._components = [c for c in self._components if c is not component]
        self._wires = [w for w in self._wires if not w.references(component)]
        self._topology_changed()

    def add_wire(self, wire: Wire) -> Wire:
        self._check_editable()
        for end in (wire.start, wire.end):
            if end is None or not any(c is end for c in self._components):
                raise ValueError(f"{wire!r} references a component not in the circuit")
        self._wires.append(wire)
        self._topology_changed()
        return wire

    def remove_wire(self, wire: Wire) -> None:
        self._check_editable()
        if wire not in self._wires:
            return
        self._wires.remove(wire)
        self._topology_changed()

    def connect(
        self,
        start: Component,
        start_terminal: int,
        end: Component,
        end_terminal: int,
    ) -> Wire:
        """Создать провод с сопротивлением из конфигурации и добавить его"""
        wire = Wire(
            start, start_terminal, end, end_terminal,
            resistance=self.config.wire_resistance,
        )
        return self.add_wire(wire)

    def clear(self) -> None:
        self._check_editable()
        self._components = []
        self._wires = []
        self.graph.clear()
        self._dirty = False
        self._accumulator = 0.0
        self.last_solution = None

    def _topology_changed(self) -> None:
        self._dirty = True
        self.rebuild()

    def rebuild(self) -> None:
        self.graph.rebuild(self._components, self._wires)
        self._dirty = False

    # Драйвер
    def tick(self, frame_dt: float) -> int:
        """Учесть прошедшее реальное время; вернуть число выполненных шагов"""
        dt = self.config.time_step
        if not np.isfinite(frame_dt):
            frame_dt = 0.0
        self._accumulator += min(max(frame_dt, 0.0), self.config.max_frame_delta)

        steps = 0
        # Относительный допуск поглощает накопленную ошибку округления
        while self._accumulator >= dt * (1.0 - 1e-9):
            self.step(dt)
            self._accumulator -= dt
            steps += 1
        return steps

    def run(self, duration: float) -> int:
        """Выполнить round(duration / time_step) фиксированных шагов"""
        n = int(round(duration / self.config.time_step))
        for _ in range(n):
            self.step()
        return n

    def step(self, dt: Optional[float] = None) -> None:
        dt = self.config.time_step if dt is None else dt
        self._in_step = True
        try:
            if self._dirty:
                self.rebuild()
            if self._components:
                self._solve()
                for component in self._components:
                    component.update(dt)
                self._estimate_wire_currents()
        finally:
            self._in_step = False
        self.time += dt
        self.step_count += 1

    def _solve(self) -> None:
        G, b = self._assembler.assemble(self._components)
        x = self.solver.solve(G, b)
        self.last_solution = x
        self._scatter(x)
        self._source_currents()

    def _scatter(self, x: Optional[np.ndarray]) -> None:
        index = self._assembler.index
        for node_id, node in self.graph.nodes.items():
            row = index.get(node_id)
            if x is None or row is None:
                node.voltage = 0.0
            else:
                node.voltage = float(x[row])
            for terminal in node.terminals:
                terminal.voltage = node.voltage

    def _source_currents(self) -> None:
        for component in self._components:
            if component.kind is not ComponentKind.SOURCE:
                continue
            if component.is_burned:
                delivered = 0.0
            else:
                r = component.resistance() or 1.0
                delivered = (component.emf() - component.terminal_voltage()) / r
            # Отдаваемый ток выходит из вывода 0 (+) и входит в вывод 1 (-)
            component.terminals[0].current = -delivered
            component.terminals[1].current = delivered

    def _estimate_wire_currents(self) -> None:
        for wire in self._wires:
            ends = wire.endpoints()
            if ends is None:
                wire.current = 0.0
                continue
            # Оба конца провода в одном узле: ток провода равен току,
            # втекающему в конечный вывод
            wire.current = ends[1].current

    def summary(self) -> str:
        burned = [c for c in self._components if c.is_burned]
        lines = [
            f"  t = {self.time:.3f} s, steps = {self.step_count}",
            f"  Components: {len(self._components)}, wires: {len(self._wires)}, "
            f"nodes: {self.graph.size}",
            f"  Burned: {', '.join(c.id for c in burned) if burned else 'none'}",
        ]
        return "\n".join(lines)
