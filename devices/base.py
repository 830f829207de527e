"""
Базовый класс двухполюсного компонента цепи.

Общая часть всех видов устройств: выводы, температура, рассеиваемая
мощность, флаг выгорания, геометрия для внешнего отображения.
Электрическое поведение задают подклассы.

Контракт:
  - resistance()  -> float   - сопротивление для узлового анализа (inf = разрыв)
  - voltage()     -> float   - напряжение на компоненте (или ЭДС источника)
  - current()     -> float   - ток через компонент, от вывода 0 к выводу 1
  - emf()         -> float   - внутренняя ЭДС для инжекции тока в вектор b
  - update(dt)    -> None    - шаг физики после решения цепи
"""
from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np

from core.parameters import ThermalParameters
from .thermal import ThermalModel, ThermalState


class ComponentKind(Enum):
    """Замкнутый набор видов устройств"""
    SOURCE = "source"
    RESISTOR = "resistor"
    LED = "led"
    CAPACITOR = "capacitor"
    SWITCH = "switch"
    MOTOR = "motor"


@dataclass
class Terminal:
    """Вывод компонента"""

    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    base_node: int = 0      # Идентификатор, выданный при подключении к схеме
    node: int = 0           # Идентификатор узла после слияния проводами
    voltage: float = 0.0
    current: float = 0.0


class Component(ABC):
    """Базовый класс двухполюсника"""

    kind: ComponentKind
    width: float = 60.0
    height: float = 40.0
    max_temperature: float = 150.0

    def __init__(
        self,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        self.id = f"{self.kind.value}_{uuid.uuid4().hex[:9]}"
        self._position = np.asarray(position, dtype=float).copy()
        self._rotation = float(rotation)
        if thermal is None:
            thermal = ThermalParameters(max_temperature=self.max_temperature)
        self.thermal = ThermalModel(thermal)
        self.power_dissipation = 0.0
        self._burned = False
        self.terminals = [Terminal(), Terminal()]
        self._update_terminal_positions()

    # Электрика
    @abstractmethod
    def resistance(self) -> float:
        ...

    @abstractmethod
    def voltage(self) -> float:
        ...

    @abstractmethod
    def current(self) -> float:
        ...

    @abstractmethod
    def update(self, dt: float) -> None:
        ...

    def emf(self) -> float:
        """Идеальная ЭДС, последовательная с resistance(). По умолчанию нет"""
        return 0.0

    def terminal_voltage(self) -> float:
        """Разность потенциалов V(вывод 0) - V(вывод 1)"""
        return self.terminals[0].voltage - self.terminals[1].voltage

    def terminal(self, index: int) -> Terminal:
        if index not in (0, 1):
            raise ValueError(f"Terminal index must be 0 or 1, got {index}.")
        return self.terminals[index]

    def _set_terminal_currents(self, current: float) -> None:
        self.terminals[0].current = current
        self.terminals[1].current = -current

    # Тепловая модель
    @property
    def temperature(self) -> float:
        return self.thermal.temperature

    @property
    def is_burned(self) -> bool:
        return self._burned

    @property
    def thermal_state(self) -> ThermalState:
        return self.thermal.state(self._burned)

    def burn(self) -> None:
        """Необратимый переход в состояние выгорания"""
        self._burned = True

    def _update_temperature(self, dt: float) -> None:
        if self.thermal.step(self.power_dissipation, dt):
            self.burn()

    # Геометрия (для отображения, на электрику не влияет)
    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = np.asarray(value, dtype=float).copy()
        self._update_terminal_positions()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._update_terminal_positions()

    def _axis(self) -> np.ndarray:
        return np.array([np.cos(self._rotation), np.sin(self._rotation)])

    def _update_terminal_positions(self) -> None:
        half = 0.5 * self.width * self._axis()
        self.terminals[0].position = self._position - half
        self.terminals[1].position = self._position + half

    def contains_point(self, point) -> bool:
        """Попадание точки в прямоугольник компонента (в его системе координат)"""
        d = np.asarray(point, dtype=float) - self._position
        c, s = np.cos(self._rotation), np.sin(self._rotation)
        local_x = c * d[0] + s * d[1]
        local_y = -s * d[0] + c * d[1]
        return (
            abs(local_x) <= 0.5 * self.width
            and abs(local_y) <= 0.5 * self.height
        )

    # Показания для внешних потребителей
    def readouts(self) -> dict[str, Any]:
        """Электрические показания компонента"""
        data = {
            "voltage": self.voltage(),
            "current": self.current(),
            "resistance": self.resistance(),
            "temperature": self.temperature,
            "power": self.power_dissipation,
            "burned": self._burned,
        }
        data.update(self._extra_readouts())
        return data

    def _extra_readouts(self) -> dict[str, Any]:
        return {}

    def describe(self) -> str:
        return f"{self.kind.value} {self.id}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.id})"
