# state/game_state.py


class GameState:
    """Read-only snapshot of a Mastermind game"""

    def __init__(
        self, rules, guesses, current_attempts, is_over, is_won, code=None
    ):
        self.rules = rules
        self.guesses = guesses
        self.current_attempts = current_attempts
        self.is_over = is_over
        self.is_won = is_won
        self.secret_code = code

    @property
    def history(self):
        return [(g.get_guess(), g.get_feedback()) for g in self.guesses]

    def to_dict(self, reveal_code=False):
        # Return the gamestate as dictionary, secret only once revealed
        return {
            "guesses": [
                {"guess": list(g.get_guess()), "feedback": list(g.get_feedback())}
                for g in self.guesses
            ],
            "current_attempts": self.current_attempts,
            "is_over": self.is_over,
            "is_won": self.is_won,
            "secret_code": (
                list(self.secret_code)
                if reveal_code and self.secret_code is not None
                else None
            ),
        }
