"""
SimulationBuilder - scenario run orchestrator.

Fluent API for configuration and run:

    results = (
        SimulationBuilder(config)
        .solver(GaussianEliminationSolver())
        .scenario(CapacitorChargeScenario())
        .record_every(5)
        .run()
    )
"""
from __future__ import annotations

from typing import Optional

from circuit.simulator import CircuitSimulator
from core.parameters import SimulationConfig
from core.results import ResultsRecorder, SimulationResults
from scenarios.base import Scenario
from solvers.base import LinearSolver, SolverConfig
from solvers.gauss import GaussianEliminationSolver


class SimulationBuilder:
    """
    Scenario simulation builder.

    Collects configuration and runs calculation with .run().
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self._config = config or SimulationConfig()
        self._solver: Optional[LinearSolver] = None
        self._solver_config: Optional[SolverConfig] = None
        self._scenario: Optional[Scenario] = None
        self._record_every = 1
        self._verbose = True
        self.simulator: Optional[CircuitSimulator] = None

    # Fluent API
    def solver(self, solver: LinearSolver) -> SimulationBuilder:
        """Choose linear solver"""
        self._solver = solver
        return self

    def solver_config(self, config: SolverConfig) -> SimulationBuilder:
        """Set solver configuration"""
        self._solver_config = config
        return self

    def scenario(self, scenario: Scenario) -> SimulationBuilder:
        """Choose simulation scenario"""
        self._scenario = scenario
        return self

    def record_every(self, n_steps: int) -> SimulationBuilder:
        """Record one sample every n_steps fixed steps"""
        if n_steps < 1:
            raise ValueError(f"n_steps must be >= 1, got {n_steps}.")
        self._record_every = n_steps
        return self

    def quiet(self) -> SimulationBuilder:
        """Suppress console output"""
        self._verbose = False
        return self

    # Execution
    def run(self) -> SimulationResults:
        """Run simulation and return results"""
        if self._scenario is None:
            raise ValueError("Scenario is not set. Call .scenario(...)")

        if self._solver is None:
            self._solver = GaussianEliminationSolver(self._solver_config)
        elif self._solver_config is not None:
            self._solver.config = self._solver_config

        scenario = self._scenario
        config = self._config

        # 1. Build circuit
        sim = CircuitSimulator(config=config, solver=self._solver)
        labels = scenario.build(sim)
        self.simulator = sim

        # 2. Time grid and timed actions
        t0, t1 = scenario.t_span()
        if t1 < t0:
            raise ValueError(f"t_span must satisfy t1 >= t0, got {(t0, t1)}.")
        n_steps = int(round((t1 - t0) / config.time_step))
        sim.time = t0
        pending = sorted(scenario.actions(), key=lambda item: item[0])

        # 3. Logging
        if self._verbose:
            print("\n")
            print(f"  {scenario.describe()}")
            print(f"  Solver: {self._solver.describe()}")
            print(f"  Components: {len(sim.components)}, wires: {len(sim.wires)}")
            print(f"  t = [{t0:.3f}, {t1:.3f}] s, dt = {config.time_step * 1e3:.3f} ms")
            print("\n")

        # 4. Step loop
        recorder = ResultsRecorder()
        recorder.record(sim.time, sim.components)
        for k in range(1, n_steps + 1):
            # Actions only between steps
            while pending and pending[0][0] <= sim.time + 0.5 * config.time_step:
                _, action = pending.pop(0)
                action(sim)
            sim.step()
            if k % self._record_every == 0 or k == n_steps:
                recorder.record(sim.time, sim.components)

        results = recorder.build(
            scenario_name=scenario.name(),
            solver_name=self._solver.describe(),
        )
        results.extra["labels"] = {name: c.id for name, c in labels.items()}
        results.extra["simulator"] = sim

        if self._verbose:
            print(f"  Solution obtained. Points: {results.N}")
            print(f"\n{results.summary()}")
            print("\n")

        return results
