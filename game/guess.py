from .ruleset import DEFAULT_RULES
from .secret_code import parse_colors, validate_sequence


class Guess:
    """
        Represents a single guess in the Mastermind game.
    Attributes:
        sequence (list[str]): The guessed sequence of colors.
        rules (dict): The ruleset for validation.
        exact (int | None): Number of correct colors in correct positions.
        color_only (int | None): Number of correct colors in wrong positions.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, sequence, rules=None):
        """
        Initialize a Guess instance. Validation is lenient here; call
        validate() to raise on a bad guess.

        Args:
            sequence (list[str] | str | None): The guessed colors.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """

        self.rules = rules or DEFAULT_RULES
        self.sequence = parse_colors(sequence, self.rules)
        self.exact = None
        self.color_only = None

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules
        (length, valid colors, duplicates).

        Args:
            strict (bool): If True, raise InvalidCodeError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """
        return validate_sequence(self.sequence, self.rules, strict=strict)

    def apply_feedback(self, feedback: tuple[int, int]):
        """
        Store feedback values after evaluation by the Board/Code.
        Args:
            feedback (tuple[int, int]): (exact, color_only)
        """
        self.exact = feedback[0]
        self.color_only = feedback[1]

    def get_feedback(self):
        return (self.exact, self.color_only)

    def get_guess(self):
        return self.sequence

    def as_string(self):
        return ", ".join(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
