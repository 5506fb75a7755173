from __future__ import annotations

import argparse

from solver.simulation import default_workers, simulate
from solver.solver_manager import SolverConfig
from state.serializer import write_report
from ui.cli import gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Mastermind: 4 pegs, 6 colors, no repeats, 12 guesses."
    )
    sub = ap.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play interactively (default)")
    play.add_argument("--seed", type=int, default=None, help="Seed for codes and computer guesses")
    play.add_argument("--think-delay", type=float, default=1.0,
                      help="Seconds to pause before each computer guess")

    sim = sub.add_parser("simulate", help="Let the solver play every possible code")
    sim.add_argument("--seed", type=int, default=None, help="Base seed for reproducible runs")
    sim.add_argument("--workers", type=int, default=default_workers(), help="Thread pool size")
    sim.add_argument("--out", default=None, help="Write the report as JSON to this path")
    sim.add_argument("--quiet", action="store_true", help="Hide progress output")

    plot = sub.add_parser("plot", help="Plot a simulation report")
    plot.add_argument("--file", default="simulation.json", help="Path to simulation JSON")
    plot.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "simulate":
        report = simulate(
            config=SolverConfig(seed=args.seed),
            max_workers=args.workers,
            progress=not args.quiet,
        )
        if args.out:
            path = write_report(report.to_dict(), args.out)
            print(f"Report written to {path}")
        return 0 if report.all_won else 1

    if args.command == "plot":
        # matplotlib is only needed here
        from plot.plot import main as plot_main

        plot_main(["--file", args.file, "--outdir", args.outdir])
        return 0

    seed = getattr(args, "seed", None)
    delay = getattr(args, "think_delay", 1.0)
    gameloop(config=SolverConfig(seed=seed, think_delay=delay))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
