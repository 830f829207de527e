"""
Решатель на базе scipy.linalg (LU-разложение)
"""
from __future__ import annotations

import warnings
from typing import Optional

import numpy as np
from scipy.linalg import LinAlgError, LinAlgWarning, lstsq, lu_factor, lu_solve

from .base import LinearSolver, SolverConfig


class ScipyLinearSolver(LinearSolver):
    """
    LU-разложение scipy.linalg.lu_factor.

    Для вырожденной системы (нулевой ведущий элемент U или
    число обусловленности выше 1/pivot_tolerance) используется решение
    наименьших квадратов минимальной нормы scipy.linalg.lstsq
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        super().__init__(config)
        self.fallbacks = 0

    def solve(self, G: np.ndarray, b: np.ndarray) -> Optional[np.ndarray]:
        n = len(b)
        if n == 0:
            return None

        G = np.asarray(G, dtype=float)
        b = np.asarray(b, dtype=float)

        x = None
        with warnings.catch_warnings():
            warnings.simplefilter("error", LinAlgWarning)
            try:
                lu, piv = lu_factor(G, check_finite=False)
                if np.min(np.abs(np.diag(lu))) >= self.config.pivot_tolerance:
                    x = lu_solve((lu, piv), b, check_finite=False)
            except (LinAlgError, LinAlgWarning):
                x = None

        if x is None:
            self.fallbacks += 1
            x, *_ = lstsq(G, b, cond=self.config.pivot_tolerance, check_finite=False)

        return np.where(np.isfinite(x), x, 0.0)

    def describe(self) -> str:
        return (
            "SciPy LU (lu_factor/lu_solve, lstsq fallback), "
            f"pivot_tol={self.config.pivot_tolerance:g}"
        )
