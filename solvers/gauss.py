"""
Метод Гаусса с частичным выбором ведущего элемента.

Столбец с ведущим элементом меньше допуска пропускается (строка не
исключается), а при обратной подстановке такая неизвестная получает 0.
Так обрабатываются разомкнутые и недоопределённые подсхемы без
исключения "singular matrix". Это известный пробел в численной
устойчивости: нулевое напряжение изолированного узла не отличить от
настоящего нуля.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .base import LinearSolver


class GaussianEliminationSolver(LinearSolver):
    """Прямое исключение на расширенной матрице [G | b]"""

    def solve(self, G: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
        n = len(b)
        if n == 0:
            return None

        tol = self.config.pivot_tolerance
        aug = np.hstack([np.asarray(G, dtype=float), np.asarray(b, dtype=float).reshape(n, 1)])

        # Прямой ход
        for i in range(n):
            pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
            if pivot_row != i:
                aug[[i, pivot_row]] = aug[[pivot_row, i]]

            if abs(aug[i, i]) < tol:
                continue

            factors = aug[i + 1:, i] / aug[i, i]
            aug[i + 1:, i:] -= np.outer(factors, aug[i, i:])

        # Обратная подстановка
        x = np.zeros(n, dtype=float)
        for i in range(n - 1, -1, -1):
            if abs(aug[i, i]) < tol:
                x[i] = 0.0
                continue
            x[i] = (aug[i, n] - aug[i, i + 1:n] @ x[i + 1:]) / aug[i, i]

        return x

    def describe(self) -> str:
        return (
            "Gaussian elimination (partial pivoting), "
            f"pivot_tol={self.config.pivot_tolerance:g}"
        )
