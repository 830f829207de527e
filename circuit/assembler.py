"""
Сборка узловой системы G * v = b.

Каждый исправный двухполюсник с конечным сопротивлением R даёт
стандартный штамп проводимости g = 1/R:

    G[i, i] += g    G[i, j] -= g
    G[j, i] -= g    G[j, j] += g

Компонент с ненулевой ЭДС E (источник, заряженный конденсатор)
заменяется эквивалентом Нортона: ток E / R вводится в строку вывода 0
и вычитается из строки вывода 1. Дополнительных неизвестных токов
ветвей (как в полном MNA) нет. Строки и столбцы земли опускаются.
Выгоревшие компоненты в систему не входят.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from devices.base import Component
from .topology import CircuitGraph


class CircuitAssembler:
    """Собирает матрицу проводимостей и вектор токов по графу схемы"""

    def __init__(self, graph: CircuitGraph):
        self._graph = graph
        self._index: dict[int, int] = {}

    @property
    def index(self) -> dict[int, int]:
        """Отображение node_id -> номер строки"""
        return self._index

    def build_index(self) -> dict[int, int]:
        self._index = {
            node_id: k for k, node_id in enumerate(self._graph.non_ground_ids())
        }
        return self._index

    def assemble(
        self,
        components: list[Component],
    ) -> tuple[np.ndarray, np.ndarray]:
        """Построить (G, b) для текущих состояний компонентов"""
        index = self.build_index()
        n = len(index)
        G = np.zeros((n, n), dtype=float)
        b = np.zeros(n, dtype=float)

        for component in components:
            if component.is_burned:
                continue
            n1 = index.get(component.terminals[0].node)
            n2 = index.get(component.terminals[1].node)
            resistance = component.resistance()

            if 0.0 < resistance < np.inf:
                self._stamp_conductance(G, n1, n2, 1.0 / resistance)

            emf = component.emf()
            if emf != 0.0:
                self._stamp_injection(b, n1, n2, emf / (resistance or 1.0))

        return G, b

    @staticmethod
    def _stamp_conductance(
        G: np.ndarray,
        n1: Optional[int],
        n2: Optional[int],
        g: float,
    ) -> None:
        if n1 is not None:
            G[n1, n1] += g
        if n2 is not None:
            G[n2, n2] += g
        if n1 is not None and n2 is not None:
            G[n1, n2] -= g
            G[n2, n1] -= g

    @staticmethod
    def _stamp_injection(
        b: np.ndarray,
        n1: Optional[int],
        n2: Optional[int],
        current: float,
    ) -> None:
        if n1 is not None:
            b[n1] += current
        if n2 is not None:
            b[n2] -= current
