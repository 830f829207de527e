"""
Tests for the Gaussian elimination solver and the SciPy LU solver.
"""

import unittest

import numpy as np

from solvers import (
    GaussianEliminationSolver,
    ScipyLinearSolver,
    SolverConfig,
    make_solver,
)


class TestGaussianElimination(unittest.TestCase):

    def setUp(self):
        self.solver = GaussianEliminationSolver()

    def test_matches_numpy_on_regular_system(self):
        G = np.array([
            [4.0, -1.0, 0.0],
            [-1.0, 4.0, -1.0],
            [0.0, -1.0, 4.0],
        ])
        b = np.array([15.0, 10.0, 10.0])
        np.testing.assert_allclose(self.solver.solve(G, b), np.linalg.solve(G, b))

    def test_partial_pivoting(self):
        G = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        np.testing.assert_allclose(self.solver.solve(G, b), [3.0, 2.0])

    def test_empty_system_returns_none(self):
        self.assertIsNone(self.solver.solve(np.zeros((0, 0)), np.zeros(0)))

    def test_zero_matrix_gives_zeros(self):
        x = self.solver.solve(np.zeros((3, 3)), np.array([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(x, np.zeros(3))

    def test_degenerate_column_gets_zero(self):
        G = np.array([[1.0, 0.0], [0.0, 0.0]])
        b = np.array([2.0, 5.0])
        np.testing.assert_allclose(self.solver.solve(G, b), [2.0, 0.0])

    def test_pivot_below_tolerance_is_skipped(self):
        solver = GaussianEliminationSolver(SolverConfig(pivot_tolerance=1e-3))
        G = np.array([[1e-4]])
        x = solver.solve(G, np.array([1.0]))
        np.testing.assert_array_equal(x, [0.0])

    def test_inputs_are_not_modified(self):
        G = np.array([[0.0, 2.0], [1.0, 1.0]])
        b = np.array([4.0, 3.0])
        G0, b0 = G.copy(), b.copy()
        self.solver.solve(G, b)
        np.testing.assert_array_equal(G, G0)
        np.testing.assert_array_equal(b, b0)


class TestScipySolver(unittest.TestCase):

    def setUp(self):
        self.solver = ScipyLinearSolver()

    def test_agrees_with_gauss(self):
        G = np.array([
            [10.01, -0.01],
            [-0.01, 0.0125],
        ])
        b = np.array([90.0, 0.0])
        np.testing.assert_allclose(
            self.solver.solve(G, b),
            GaussianEliminationSolver().solve(G, b),
        )
        self.assertEqual(self.solver.fallbacks, 0)

    def test_empty_system_returns_none(self):
        self.assertIsNone(self.solver.solve(np.zeros((0, 0)), np.zeros(0)))

    def test_singular_system_falls_back(self):
        G = np.array([[1.0, 0.0], [0.0, 0.0]])
        b = np.array([2.0, 5.0])
        x = self.solver.solve(G, b)
        self.assertTrue(np.all(np.isfinite(x)))
        self.assertAlmostEqual(x[0], 2.0)
        self.assertAlmostEqual(x[1], 0.0)
        self.assertEqual(self.solver.fallbacks, 1)


class TestMakeSolver(unittest.TestCase):

    def test_known_names(self):
        self.assertIsInstance(make_solver("gauss"), GaussianEliminationSolver)
        self.assertIsInstance(make_solver("scipy"), ScipyLinearSolver)

    def test_config_is_passed(self):
        solver = make_solver("gauss", SolverConfig(pivot_tolerance=1e-6))
        self.assertEqual(solver.config.pivot_tolerance, 1e-6)

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            make_solver("cholesky")


if __name__ == '__main__':
    unittest.main()
