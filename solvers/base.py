"""
Абстрактный интерфейс решателя линейной системы G * v = b
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class SolverConfig:
    """Параметры решателя"""
    pivot_tolerance: float = 1e-10     # Порог вырожденности ведущего элемента


class LinearSolver(ABC):
    """Базовый класс решателя узловой системы"""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    @abstractmethod
    def solve(self, G: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
        """
        Решить G * v = b.

        Returns:
            None, если неизвестных нет; иначе вектор v длины n.
            Плохая обусловленность исключений не вызывает: для
            вырожденных строк решение равно 0
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Название/описание метода"""
        ...
