"""
Параметры моделирования цепи.

Все величины в СИ: время в секундах, сопротивление в Ом,
температура в градусах Цельсия
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ThermalParameters:
    """Параметры тепловой модели компонента (первый порядок)"""

    ambient: float = 25.0               # Температура окружающей среды, °C
    thermal_resistance: float = 10.0    # Тепловое сопротивление, °C/Вт
    thermal_capacity: float = 50.0      # Теплоёмкость, Дж/°C
    max_temperature: float = 150.0      # Порог выгорания, °C

    def __post_init__(self):
        if self.thermal_resistance <= 0.0:
            raise ValueError(
                f"thermal_resistance must be > 0, got {self.thermal_resistance}."
            )
        if self.thermal_capacity <= 0.0:
            raise ValueError(
                f"thermal_capacity must be > 0, got {self.thermal_capacity}."
            )

    @property
    def tau(self) -> float:
        """Тепловая постоянная времени, с"""
        return self.thermal_capacity * self.thermal_resistance

    def steady_temperature(self, power: float) -> float:
        """Установившаяся температура при рассеиваемой мощности power"""
        return self.ambient + power * self.thermal_resistance


@dataclass
class SimulationConfig:
    """Параметры драйвера моделирования"""

    time_step: float = 1e-3         # Фиксированный шаг решения, с
    max_frame_delta: float = 0.1    # Ограничение кадрового dt, с
    wire_resistance: float = 0.01   # Сопротивление провода для оценки тока, Ом

    def __post_init__(self):
        if self.time_step <= 0.0:
            raise ValueError(f"time_step must be > 0, got {self.time_step}.")
        if self.max_frame_delta < self.time_step:
            raise ValueError(
                f"max_frame_delta must be >= time_step, "
                f"got {self.max_frame_delta} < {self.time_step}."
            )
        if self.wire_resistance <= 0.0:
            raise ValueError(
                f"wire_resistance must be > 0, got {self.wire_resistance}."
            )

    def info(self) -> str:
        """Форматированная строка с параметрами драйвера"""
        lines = [
            "\n",
            "  ПАРАМЕТРЫ МОДЕЛИРОВАНИЯ",
            "\n",
            f"  dt = {self.time_step * 1e3:.3f} мс",
            f"  dt(кадр, макс.) = {self.max_frame_delta * 1e3:.0f} мс",
            f"  R(провод) = {self.wire_resistance:.3f} Ом",
            "\n",
        ]
        return "\n".join(lines)
