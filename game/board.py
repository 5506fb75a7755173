from __future__ import annotations

from typing import Literal

from .errors import GameOverError
from .feedback import is_win
from .guess import Guess
from .ruleset import DEFAULT_RULES
from .secret_code import Code
from state.game_state import GameState


Phase = Literal["awaiting_guess", "awaiting_feedback", "won", "lost"]


class Board:
    """Main game board class — manages gameplay, secret code, and guess history."""

    def __init__(self, rules=None, secret=None):
        """
        Initialize the board with a given ruleset.

        Args:
            rules (dict or None): The ruleset. Defaults to DEFAULT_RULES.
            secret (str, list or None): Optional secret code chosen by a
            player. Raises InvalidCodeError if it breaks the rules.
        """
        self.rules = rules or DEFAULT_RULES
        self.secret_code = Code(secret, rules=self.rules)
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 12)
        self.is_over = False
        self.is_won = False

    def initialize_game(self, rng=None):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = Code(rules=self.rules)
        self.secret_code.generate_random(rng=rng)
        self._reset_progress()

    def set_secret(self, sequence):
        """Set up a new game with a player-chosen secret code."""
        secret = Code(sequence, rules=self.rules)
        # an empty sequence skips validation in Code.__init__
        secret.is_valid = secret.validate(strict=True)
        self.secret_code = secret
        self._reset_progress()

    def _reset_progress(self):
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def make_guess(self, guess_input) -> tuple[int, int]:
        """
        Evaluate a guess against the secret and update state.

        Args:
            guess_input (str | list[str] | tuple[str, ...]): The guessed colors.
        Returns:
            tuple[int, int]: The feedback for this guess.
        Raises:
            GameOverError: If the game has already ended.
            InvalidCodeError: If the guess breaks the rules.
        """
        if self.is_over:
            raise GameOverError("The game is over; no more guesses allowed.")

        new_guess = Guess(guess_input, rules=self.rules)
        new_guess.validate(strict=True)

        feedback = self.secret_code.compare_with(new_guess)
        new_guess.apply_feedback(feedback)

        self.guesses.append(new_guess)
        self.current_attempt += 1

        self.check_game_over()
        return feedback

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(g.get_guess(), g.get_feedback()) for g in self.guesses]

    def check_game_over(self):
        """Check if the game is finished (win or all attempts used)."""
        if self.guesses and is_win(self.guesses[-1].get_feedback()):
            self.is_over = True
            self.is_won = True
            return

        if self.remaining_attempts() <= 0:
            self.is_over = True

    @property
    def phase(self) -> Phase:
        if self.is_won:
            return "won"
        if self.is_over:
            return "lost"
        return "awaiting_guess"

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def get_current_state(self):
        """Return a GameState snapshot for display or analysis."""
        return GameState(
            rules=self.rules,
            guesses=list(self.guesses),
            current_attempts=self.current_attempt,
            is_over=self.is_over,
            is_won=self.is_won,
            code=self.secret_code.as_tuple(),
        )
