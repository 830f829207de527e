"""
Абстрактный сценарий моделирования.

Сценарий определяет:
  - состав схемы (компоненты и провода)
  - временной диапазон
  - действия во времени (переключения), выполняемые между шагами
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from circuit.simulator import CircuitSimulator
from devices.base import Component

Action = Callable[[CircuitSimulator], None]


class Scenario(ABC):
    """Базовый класс сценария моделирования"""

    t_end: float = 1.0

    @abstractmethod
    def name(self) -> str:
        """Имя сценария для логов и графиков"""
        ...

    @abstractmethod
    def build(self, sim: CircuitSimulator) -> dict[str, Component]:
        """Собрать схему в sim; вернуть компоненты по подписям"""
        ...

    def actions(self) -> list[tuple[float, Action]]:
        """Действия (t, f(sim)) в порядке времени"""
        return []

    def t_span(self) -> tuple[float, float]:
        """Временной диапазон (t_start, t_end)"""
        return (0.0, self.t_end)

    def describe(self) -> str:
        """Подробное описание сценария"""
        return self.name()
