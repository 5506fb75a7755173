from __future__ import annotations

import os
import random
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from game.board import Board
from game.game_loop import GameResult, run_solver_game
from game.ruleset import DEFAULT_RULES
from solver.candidates import generate_all
from solver.solver_manager import EliminationSolver, SolverConfig


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


def default_workers() -> int:
    return max(1, (os.cpu_count() or 2) - 1)


@dataclass
class SimulationReport:
    """
    Outcome of many solver games.

    Attributes:
        games: one GameResult per secret, in the order of the secrets
        total_time_s: wall-clock time of the whole run
        seed: base seed, or None for unseeded runs
    """

    games: list[GameResult] = field(default_factory=list)
    total_time_s: float = 0.0
    seed: Optional[int] = None

    @property
    def attempts(self) -> list[int]:
        return [g.attempts for g in self.games]

    @property
    def n_won(self) -> int:
        return sum(1 for g in self.games if g.won)

    @property
    def all_won(self) -> bool:
        return self.n_won == len(self.games)

    def histogram(self) -> dict[int, int]:
        counts: dict[int, int] = {}
        for a in self.attempts:
            counts[a] = counts.get(a, 0) + 1
        return dict(sorted(counts.items()))

    def summary(self) -> dict:
        attempts = self.attempts
        if not attempts:
            return {"games": 0, "won": 0}
        return {
            "games": len(attempts),
            "won": self.n_won,
            "avg_attempts": sum(attempts) / len(attempts),
            "min_attempts": min(attempts),
            "max_attempts": max(attempts),
            "total_time_s": self.total_time_s,
        }

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "summary": self.summary(),
            "histogram": {str(k): v for k, v in self.histogram().items()},
            "games": {
                "secret": [list(g.secret) for g in self.games],
                "won": [g.won for g in self.games],
                "attempts": [g.attempts for g in self.games],
                "guesses": [[list(r.guess) for r in g.rounds] for g in self.games],
                "remaining": [[r.remaining for r in g.rounds] for g in self.games],
            },
        }


def _play_one(index: int, secret, config: SolverConfig, rules) -> tuple[int, GameResult]:
    """
    Worker: one full game with its own board, solver and RNG.
    """
    if config.seed is not None:
        rng = random.Random(f"{config.seed}-{index}")
    else:
        rng = random.Random()

    board = Board(rules=rules, secret=list(secret))
    solver = EliminationSolver(replace(config, think_delay=0.0), rng=rng, rules=rules)
    return index, run_solver_game(board, solver)


def simulate(
    secrets: Optional[Iterable[Iterable[str]]] = None,
    config: SolverConfig | None = None,
    *,
    rules=None,
    max_workers: Optional[int] = None,
    progress: bool = True,
) -> SimulationReport:
    """
    Play the solver against each secret, every game independent.

    Args:
        secrets: Codes to play against. Defaults to all valid codes.
        config: SolverConfig; a seed makes the run reproducible.
        rules: Ruleset. Defaults to DEFAULT_RULES.
        max_workers: Thread pool size.
        progress: Whether to show progress output.
    Returns:
        SimulationReport with games in the order of the secrets.
    """
    rules = rules or DEFAULT_RULES
    config = config or SolverConfig()
    secret_list = [tuple(s) for s in (secrets if secrets is not None else generate_all(rules))]

    start = time.perf_counter()
    last_report = start
    results: list[Optional[GameResult]] = [None] * len(secret_list)
    total = len(secret_list)
    done = 0

    with ThreadPoolExecutor(max_workers=max_workers or default_workers()) as pool:
        futures = [
            pool.submit(_play_one, i, secret, config, rules)
            for i, secret in enumerate(secret_list)
        ]
        for fut in as_completed(futures):
            index, result = fut.result()
            results[index] = result
            done += 1

            now = time.perf_counter()
            # periodic progress report
            if progress and now - last_report >= 0.5:
                rate = done / max(1e-9, (now - start))
                progress_print(f"Progress: {done}/{total} games ({rate:.1f} games/sec)")
                last_report = now

    report = SimulationReport(
        games=list(results),
        total_time_s=time.perf_counter() - start,
        seed=config.seed,
    )

    if progress:
        s = report.summary()
        if total:
            log_print(
                f"Games      : {s['games']} (won {s['won']})\n"
                f"Attempts   : avg {s['avg_attempts']:.2f}, "
                f"min {s['min_attempts']}, max {s['max_attempts']}\n"
                f"Total time : {s['total_time_s']:.2f} seconds"
            )
        else:
            log_print("No games played.")
    return report
