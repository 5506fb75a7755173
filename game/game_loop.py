from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(frozen=True)
class RoundResult:
    number: int
    guess: tuple[str, ...]
    feedback: tuple[int, int]
    # candidates left after elimination (1 once the code is found)
    remaining: int


@dataclass
class GameResult:
    won: bool
    attempts: int
    secret: tuple[str, ...]
    rounds: list[RoundResult] = field(default_factory=list)


def run_solver_game(
    board,
    solver,
    on_round: Optional[Callable[[RoundResult], None]] = None,
) -> GameResult:
    """
    Let the solver guess the board's secret until it wins or runs out
    of attempts.

    Args:
        board: Board with its secret already set.
        solver: Object with choose_guess() and eliminate(feedback).
        on_round: Called after every round with its RoundResult.
    Returns:
        GameResult for the finished game.
    Raises:
        ExhaustedCandidatesError: If the feedback turns out to be inconsistent.
    """
    rounds = []

    while not board.is_over:
        guess = solver.choose_guess()
        feedback = board.make_guess(guess)

        # a won round ends the game before elimination
        remaining = 1 if board.is_won else solver.eliminate(feedback)

        result = RoundResult(
            number=board.current_attempt,
            guess=tuple(guess),
            feedback=feedback,
            remaining=remaining,
        )
        rounds.append(result)
        if on_round is not None:
            on_round(result)

    return GameResult(
        won=board.is_won,
        attempts=board.current_attempt,
        secret=board.secret_code.as_tuple(),
        rounds=rounds,
    )
