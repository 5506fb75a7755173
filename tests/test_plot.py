import math

import pytest

from plot.plot import compute_run_stats, plot_report
from solver.candidates import generate_all
from solver.simulation import simulate
from solver.solver_manager import SolverConfig
from state.serializer import read_report, write_report


GAMES = {
    "won": [True, True, False],
    "attempts": [3, 5, 12],
    "remaining": [[40, 3], [60, 10, 2, 1], [90] * 12],
}


def test_compute_run_stats_uses_won_games_for_attempts():
    stats = compute_run_stats(GAMES)
    assert stats["n_games"] == 3
    assert stats["n_won"] == 2
    assert stats["avg_attempts"] == 4.0
    assert stats["min_attempts"] == 3.0
    assert stats["max_attempts"] == 5.0
    assert stats["attempts_hist"] == {3: 1, 5: 1, 12: 1}


def test_compute_run_stats_remaining_per_round():
    stats = compute_run_stats(GAMES)
    assert len(stats["avg_remaining"]) == 12
    assert stats["avg_remaining"][0] == pytest.approx(190 / 3)
    assert stats["min_remaining"][1] == 3.0
    assert stats["max_remaining"][3] == 90.0
    assert stats["avg_remaining"][11] == 90.0


def test_compute_run_stats_without_wins():
    stats = compute_run_stats({"won": [False], "attempts": [12]})
    assert stats["n_won"] == 0
    assert math.isnan(stats["avg_attempts"])
    assert stats["avg_remaining"] == []


def test_plot_report_from_saved_simulation(tmp_path):
    report = simulate(generate_all()[:12], SolverConfig(seed=4), max_workers=2, progress=False)
    path = write_report(report.to_dict(), tmp_path / "sim" / "simulation.json")
    loaded = read_report(path)
    assert loaded["summary"]["games"] == 12

    written = plot_report(loaded, tmp_path / "out")
    assert [p.name for p in written] == ["attempts_hist.png", "remaining_per_round.png"]
    assert all(p.stat().st_size > 0 for p in written)
