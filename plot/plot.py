import argparse
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from state.serializer import read_report  # noqa: E402


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
    """
    Annotate points (x, y) on ax with formatted y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dx: x offset in points
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        if y is None or np.isnan(y):
            continue
        ax.annotate(
            fmt.format(y),
            (x, y),
            textcoords="offset points",
            xytext=(dx, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def compute_run_stats(games: dict):
    """
    Returns a dict with:
      avg/min/max attempts (won games only, np.nan if none)
      attempts_hist: {attempts: count} over all games
      avg/min/max remaining: per round index (round 1 at index 0),
      candidates left after that round's elimination
      n_games, n_won
    """
    won = np.array(games.get("won", []), dtype=bool)
    attempts = np.array(games.get("attempts", []), dtype=np.int32)

    # Guard against length mismatches
    n = min(len(won), len(attempts))
    won = won[:n]
    attempts = attempts[:n]

    won_attempts = attempts[won]
    if won_attempts.size > 0:
        avg_attempts = float(np.mean(won_attempts))
        min_attempts = float(np.min(won_attempts))
        max_attempts = float(np.max(won_attempts))
    else:
        avg_attempts = min_attempts = max_attempts = np.nan

    values, counts = np.unique(attempts, return_counts=True)
    attempts_hist = {int(v): int(c) for v, c in zip(values, counts)}

    # remaining candidates per round index, ragged across games
    remaining = games.get("remaining", []) or []
    max_rounds = max((len(r) for r in remaining), default=0)
    avg_remaining, min_remaining, max_remaining = [], [], []
    for i in range(max_rounds):
        vals = [r[i] for r in remaining if i < len(r)]
        avg_remaining.append(float(np.mean(vals)))
        min_remaining.append(float(np.min(vals)))
        max_remaining.append(float(np.max(vals)))

    return {
        "n_games": int(n),
        "n_won": int(won_attempts.size),
        "avg_attempts": avg_attempts,
        "min_attempts": min_attempts,
        "max_attempts": max_attempts,
        "attempts_hist": attempts_hist,
        "avg_remaining": avg_remaining,
        "min_remaining": min_remaining,
        "max_remaining": max_remaining,
    }


def plot_report(report: dict, outdir) -> list[Path]:
    """
    Draw the attempts histogram and the candidates-per-round curve.

    Args:
        report: Simulation report as produced by SimulationReport.to_dict().
        outdir: Output directory for PNGs.
    Returns:
        list[Path]: The written image files.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    stats = compute_run_stats(report.get("games", {}))
    written = []

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    # Plot 1: Distribution of attempts
    hist = stats["attempts_hist"]
    xs = sorted(hist)
    plt.figure(figsize=(10, 6))
    plt.bar(xs, [hist[x] for x in xs])
    _annotate_points(plt.gca(), xs, [float(hist[x]) for x in xs], fmt="{:.0f}", dy=8)
    plt.title(
        f"Attempts per Game ({stats['n_won']}/{stats['n_games']} won)\n"
        f"avg {stats['avg_attempts']:.2f}, min {stats['min_attempts']:.0f}, "
        f"max {stats['max_attempts']:.0f}"
    )
    plt.xlabel("Attempts")
    plt.ylabel("Games")
    plt.xticks(xs)
    plt.grid(True, axis="y")
    out1 = outdir / "attempts_hist.png"
    plt.savefig(out1, dpi=200, bbox_inches="tight")
    plt.close()
    written.append(out1)

    # Plot 2: Remaining candidates per round
    y_avg = stats["avg_remaining"]
    if not y_avg:
        print("[info] No round data to plot.")
        return written
    x = np.arange(1, len(y_avg) + 1)
    plt.figure(figsize=(12, 8))
    plt.plot(x, y_avg, marker="o", label="Average remaining")
    plt.scatter(x, stats["max_remaining"], marker="^", s=20, label="Max remaining")
    plt.scatter(x, stats["min_remaining"], marker="v", s=20, label="Min remaining")
    plt.fill_between(x, stats["min_remaining"], stats["max_remaining"], alpha=0.2, label="Min–Max range")
    _annotate_points(plt.gca(), x, y_avg, fmt="{:.1f}", dy=8)
    plt.yscale("log")
    plt.title("Candidate Codes Remaining after Each Round")
    plt.xlabel("Round")
    plt.ylabel("Remaining candidates (log)")
    plt.xticks(x)
    plt.grid(True)
    plt.legend()
    out2 = outdir / "remaining_per_round.png"
    plt.savefig(out2, dpi=200, bbox_inches="tight")
    plt.close()
    written.append(out2)
    return written


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="simulation.json", help="Path to simulation JSON")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    for path in plot_report(read_report(args.file), args.outdir):
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
