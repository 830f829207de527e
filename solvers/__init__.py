from __future__ import annotations

from solvers.base import LinearSolver, SolverConfig
from solvers.gauss import GaussianEliminationSolver
from solvers.scipy_solver import ScipyLinearSolver

SOLVERS = {
    "gauss": GaussianEliminationSolver,
    "scipy": ScipyLinearSolver,
}


def make_solver(name: str, config: SolverConfig | None = None) -> LinearSolver:
    """Создать решатель по имени"""
    if name not in SOLVERS:
        raise ValueError(
            f"Неизвестный решатель '{name}'. "
            f"Доступные: {', '.join(SOLVERS)}"
        )
    return SOLVERS[name](config)


__all__ = [
    "LinearSolver",
    "SolverConfig",
    "GaussianEliminationSolver",
    "ScipyLinearSolver",
    "SOLVERS",
    "make_solver",
]
