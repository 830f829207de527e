"""
Двигатель постоянного тока.

Электрика: сопротивление обмотки R, ток I = (V - k_e * n) / R,
где n - частота вращения, об/мин.

Механика:
    M = k_t * I
    eps = M / J                               (рад/с^2)
    dn/dt = eps * 60 / (2 pi) - k_f * n       (об/мин за секунду)
    n ограничена [0, n_max]

Выгоревший двигатель теряет момент и выбегает: n *= 0.95 каждый шаг.
Угол ротора накапливается всегда
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from core.parameters import ThermalParameters
from .base import Component, ComponentKind

COAST_DECAY = 0.95


class Motor(Component):
    """Коллекторный двигатель постоянного тока"""

    kind = ComponentKind.MOTOR
    width = 70.0
    height = 70.0
    max_temperature = 180.0

    def __init__(
        self,
        coil_resistance: float = 5.0,
        back_emf_constant: float = 0.01,    # В/(об/мин)
        torque_constant: float = 0.01,      # Н·м/А
        inertia: float = 1e-4,              # кг·м^2
        friction: float = 0.1,              # 1/с
        max_rpm: float = 5000.0,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        thermal: Optional[ThermalParameters] = None,
    ):
        if coil_resistance <= 0.0:
            raise ValueError(f"coil_resistance must be > 0, got {coil_resistance}.")
        if inertia <= 0.0:
            raise ValueError(f"inertia must be > 0, got {inertia}.")
        super().__init__(position, rotation, thermal)
        self.coil_resistance = float(coil_resistance)
        self.back_emf_constant = float(back_emf_constant)
        self.torque_constant = float(torque_constant)
        self.inertia = float(inertia)
        self.friction = float(friction)
        self.max_rpm = float(max_rpm)
        self.rpm = 0.0
        self.rotor_angle = 0.0

    @property
    def back_emf(self) -> float:
        return self.back_emf_constant * self.rpm

    def resistance(self) -> float:
        return np.inf if self.is_burned else self.coil_resistance

    def voltage(self) -> float:
        return self.terminal_voltage()

    def current(self) -> float:
        if self.is_burned:
            return 0.0
        return (self.voltage() - self.back_emf) / self.coil_resistance

    def torque(self) -> float:
        return self.torque_constant * self.current()

    def _advance_rotor(self, dt: float) -> None:
        self.rotor_angle += (self.rpm / 60.0) * dt * 2.0 * np.pi

    def update(self, dt: float) -> None:
        if self.is_burned:
            self.rpm *= COAST_DECAY
            self._advance_rotor(dt)
            self.power_dissipation = 0.0
            self._update_temperature(dt)
            self._set_terminal_currents(0.0)
            return

        current = self.current()

        angular_acceleration = self.torque_constant * current / self.inertia
        rpm_acceleration = angular_acceleration * 60.0 / (2.0 * np.pi)
        self.rpm += (rpm_acceleration - self.friction * self.rpm) * dt
        self.rpm = min(max(self.rpm, 0.0), self.max_rpm)

        self._advance_rotor(dt)

        self.power_dissipation = current * current * self.coil_resistance
        self._update_temperature(dt)
        self._set_terminal_currents(current)

    def _extra_readouts(self) -> dict:
        return {"rpm": self.rpm, "rotor_angle": self.rotor_angle}
