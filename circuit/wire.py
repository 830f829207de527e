"""
Провод между выводами двух компонентов.

Провод не владеет компонентами (слабые ссылки). Электрически он
только объединяет узлы; малое последовательное сопротивление
используется для оценки тока и падения напряжения после решения
"""
from __future__ import annotations

import uuid
import weakref
from typing import Optional

import numpy as np

from devices.base import Component, Terminal

DEFAULT_WIRE_RESISTANCE = 0.01


class Wire:
    """Соединение вывод -> вывод"""

    def __init__(
        self,
        start: Component,
        start_terminal: int,
        end: Component,
        end_terminal: int,
        resistance: float = DEFAULT_WIRE_RESISTANCE,
    ):
        start.terminal(start_terminal)
        end.terminal(end_terminal)
        if start is end and start_terminal == end_terminal:
            raise ValueError("Wire must connect two different terminals.")
        if resistance <= 0.0:
            raise ValueError(f"resistance must be > 0, got {resistance}.")

        self.id = f"wire_{uuid.uuid4().hex[:9]}"
        self._start = weakref.ref(start)
        self._end = weakref.ref(end)
        self.start_terminal = start_terminal
        self.end_terminal = end_terminal
        self.resistance = float(resistance)
        self.current = 0.0

    @property
    def start(self) -> Optional[Component]:
        return self._start()

    @property
    def end(self) -> Optional[Component]:
        return self._end()

    def references(self, component: Component) -> bool:
        return self.start is component or self.end is component

    def endpoints(self) -> Optional[tuple[Terminal, Terminal]]:
        """Пара выводов или None, если один из компонентов уже удалён"""
        start, end = self.start, self.end
        if start is None or end is None:
            return None
        return start.terminals[self.start_terminal], end.terminals[self.end_terminal]

    def start_position(self) -> Optional[np.ndarray]:
        ends = self.endpoints()
        return None if ends is None else ends[0].position

    def end_position(self) -> Optional[np.ndarray]:
        ends = self.endpoints()
        return None if ends is None else ends[1].position

    @property
    def voltage_drop(self) -> float:
        return self.current * self.resistance

    def __repr__(self) -> str:
        return (
            f"Wire({self.start!r}[{self.start_terminal}] -> "
            f"{self.end!r}[{self.end_terminal}])"
        )
