class MastermindError(Exception):
    """Base class for all game errors."""


class InvalidCodeError(MastermindError, ValueError):
    """A code is not 4 distinct colors from the palette."""


class ExhaustedCandidatesError(MastermindError, RuntimeError):
    """
    No candidate code is left after elimination.

    Raised when the feedback received across rounds cannot all be true
    for a single secret code.
    """

    def __init__(self, guess=None, feedback=None):
        self.guess = tuple(guess) if guess is not None else None
        self.feedback = tuple(feedback) if feedback is not None else None
        if self.guess is None:
            msg = "No candidate codes to guess from."
        else:
            msg = (
                f"No candidate codes remain after guess {list(self.guess)} "
                f"with feedback {self.feedback}; the feedback is inconsistent."
            )
        super().__init__(msg)


class SolverStateError(MastermindError, RuntimeError):
    """choose_guess/eliminate were called out of order."""


class GameOverError(MastermindError, RuntimeError):
    """A guess was made on a board whose game already ended."""
