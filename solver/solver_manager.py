from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from game.errors import ExhaustedCandidatesError, SolverStateError
from game.feedback import evaluate, is_valid_feedback, is_win
from solver.candidates import generate_all


Code = tuple[str, ...]
SolverPhase = Literal["awaiting_guess", "awaiting_feedback"]


@dataclass(frozen=True)
class SolverConfig:
    # seeds the solver's private RNG when none is injected
    seed: Optional[int] = None
    # pause (seconds) the CLI adds before showing a computer guess
    think_delay: float = 0.0


class EliminationSolver:
    """
    Random-consistent guessing with candidate elimination:
    - guess a code picked uniformly from the remaining candidates
    - after feedback, keep only candidates that would have produced the
      same feedback against that guess

    Every remaining candidate agrees with all feedback so far, so the
    secret is never eliminated.

    Attributes:
        cfg: SolverConfig
        rng: random.Random
        last_guess: the most recent guess, or None
        phase: "awaiting_guess" | "awaiting_feedback"
        history: list of (guess, feedback) already applied
    """

    def __init__(
        self,
        config: SolverConfig | None = None,
        *,
        rng: random.Random | None = None,
        candidates: Iterable[Iterable[str]] | None = None,
        rules=None,
    ):
        self.cfg = config or SolverConfig()
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)

        # owned copy, never shared with other solvers
        source = generate_all(rules) if candidates is None else candidates
        self._candidates: list[Code] = [tuple(c) for c in source]

        self.last_guess: Code | None = None
        self.phase: SolverPhase = "awaiting_guess"
        self.history: list[tuple[Code, tuple[int, int]]] = []

    @property
    def candidates(self) -> tuple[Code, ...]:
        return tuple(self._candidates)

    @property
    def remaining(self) -> int:
        return len(self._candidates)

    def choose_guess(self) -> Code:
        """
        Pick the next guess from the remaining candidates.

        Returns:
            The chosen code as a tuple of color names.
        Raises:
            SolverStateError: If the previous guess has not received feedback.
            ExhaustedCandidatesError: If no candidate is left.
        """
        if self.phase != "awaiting_guess":
            raise SolverStateError(
                f"Guess {list(self.last_guess)} is still awaiting feedback."
            )
        if not self._candidates:
            raise ExhaustedCandidatesError()

        self.last_guess = self.rng.choice(self._candidates)
        self.phase = "awaiting_feedback"
        return self.last_guess

    def eliminate(self, feedback) -> int:
        """
        Drop the last guess and every candidate inconsistent with its feedback.

        Args:
            feedback: (exact, color_only) received for last_guess.
        Returns:
            int: Number of candidates left.
        Raises:
            SolverStateError: If no guess is awaiting feedback, or the
            feedback says the guess already won.
            ValueError: If feedback is not a reachable feedback pair.
            ExhaustedCandidatesError: If no candidate agrees with the feedback.
        """
        if self.phase != "awaiting_feedback":
            raise SolverStateError("eliminate() called before choose_guess().")
        if not is_valid_feedback(feedback):
            raise ValueError(f"Invalid feedback {feedback!r}.")

        feedback = (int(feedback[0]), int(feedback[1]))
        if is_win(feedback):
            raise SolverStateError(
                f"Guess {list(self.last_guess)} already matched the code."
            )

        guess = self.last_guess
        self._candidates = [
            c
            for c in self._candidates
            if c != guess and evaluate(guess, c) == feedback
        ]
        self.history.append((guess, feedback))

        if not self._candidates:
            raise ExhaustedCandidatesError(guess, feedback)

        self.phase = "awaiting_guess"
        return len(self._candidates)
