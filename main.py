"""
Run a circuit scenario with the fixed-timestep DC solver.

Outputs:
1) Component traces and temperature plots
2) CSV with recorded time series
"""
from __future__ import annotations

import argparse
import csv
from pathlib import Path

import matplotlib

from core.parameters import SimulationConfig
from core.results import SimulationResults
from scenarios import SCENARIOS
from simulation import SimulationBuilder
from solvers import SOLVERS, SolverConfig, make_solver


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Educational DC circuit simulation: solve, thermal model, burnout."
    )
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="series", help="Scenario to run.")
    parser.add_argument("--t-end", type=float, default=None, help="Simulation end time, s (scenario default if omitted).")
    parser.add_argument("--dt", type=float, default=1e-3, help="Fixed solver time step, s.")
    parser.add_argument("--solver", choices=sorted(SOLVERS), default="gauss", help="Linear solver.")
    parser.add_argument("--pivot-tol", type=float, default=1e-10, help="Singular pivot tolerance.")
    parser.add_argument("--record-every", type=int, default=1, help="Record one sample every N steps.")
    parser.add_argument("--no-plot", action="store_true", help="Skip plotting.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory.",
    )
    return parser.parse_args(argv)


def save_csv(res: SimulationResults, csv_path: Path) -> None:
    """Записывает временные ряды в CSV: t, <подпись>.<величина>, ..."""
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    columns = [
        (f"{res.label(cid)}.{q}", res.trace(cid, q))
        for cid in res.component_ids
        for q in res.traces[cid]
    ]
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["t"] + [name for name, _ in columns])
        for k in range(res.N):
            writer.writerow([f"{res.t[k]:.6f}"] + [values[k] for _, values in columns])


def run(argv: list[str] | None = None) -> SimulationResults:
    """Разбирает аргументы, запускает сценарий, сохраняет CSV и графики."""
    args = parse_args(argv)

    output_dir = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    config = SimulationConfig(time_step=args.dt)
    print(config.info())

    scenario = SCENARIOS[args.scenario]()
    if args.t_end is not None:
        scenario.t_end = args.t_end

    solver = make_solver(args.solver, SolverConfig(pivot_tolerance=args.pivot_tol))

    res = (
        SimulationBuilder(config)
        .solver(solver)
        .scenario(scenario)
        .record_every(args.record_every)
        .run()
    )

    csv_path = output_dir / f"{args.scenario}_traces.csv"
    save_csv(res, csv_path)
    print(f"Saved CSV: {csv_path}")

    if not args.no_plot:
        matplotlib.use("Agg")
        from plotting import plot_component_traces, plot_thermal

        plot_component_traces(res, save_path=str(output_dir / f"{args.scenario}_traces.png"))
        plot_thermal(res, save_path=str(output_dir / f"{args.scenario}_thermal.png"))

    return res


def main(argv: list[str] | None = None) -> None:
    run(argv)


if __name__ == "__main__":
    main()
