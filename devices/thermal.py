"""
Тепловая модель компонента.

Экспоненциальное приближение первого порядка к установившейся
температуре:

    T_target = T_amb + P * R_th
    T += (T_target - T) * (1 - exp(-dt / tau)),   tau = C_th * R_th

Превышение порога max_temperature переводит компонент в состояние
BURNED. Обратного перехода нет
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Optional

import numpy as np

from core.parameters import ThermalParameters

# Перегрев над окружающей средой, начиная с которого компонент "греется"
WARMING_MARGIN = 1.0


class ThermalState(Enum):
    """Тепловое состояние компонента"""
    COOL = auto()
    WARMING = auto()
    BURNED = auto()


class ThermalModel:
    """Температура одного компонента и её интегрирование по времени"""

    def __init__(self, params: Optional[ThermalParameters] = None):
        self.params = params or ThermalParameters()
        self.temperature = self.params.ambient

    def step(self, power: float, dt: float) -> bool:
        """
        Один шаг интегрирования.

        Returns:
            True, если температура превысила порог выгорания
        """
        p = self.params
        target = p.steady_temperature(power)
        alpha = 1.0 - np.exp(-dt / p.tau)
        self.temperature += (target - self.temperature) * alpha
        return self.temperature > p.max_temperature

    def state(self, burned: bool) -> ThermalState:
        if burned:
            return ThermalState.BURNED
        if self.temperature - self.params.ambient > WARMING_MARGIN:
            return ThermalState.WARMING
        return ThermalState.COOL

    def reset(self) -> None:
        self.temperature = self.params.ambient
