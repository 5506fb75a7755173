import random
import re

from .errors import InvalidCodeError
from .feedback import evaluate
from .ruleset import DEFAULT_RULES


def parse_colors(sequence, rules=None) -> list[str]:
    """
    Normalize user input into a list of color names.

    Args:
        sequence (str | Iterable[str] | None): Either a string of colors
        separated by spaces or commas (e.g. "red yellow orange green" or
        "r y o g"), or an iterable of color names / aliases.
        rules (dict or None): Ruleset providing the alias table.

    Returns:
        list[str]: Lower-case color names. Unknown words are kept as-is
        so validation can report them.
    """

    rules = rules or DEFAULT_RULES
    aliases = rules.get("aliases", {})

    if sequence is None:
        return []
    if isinstance(sequence, str):
        words = [w for w in re.split(r"[\s,]+", sequence.strip()) if w]
    else:
        words = [str(w).strip() for w in sequence]

    colors = []
    for word in words:
        word = word.lower()
        colors.append(aliases.get(word, word))
    return colors


def validate_sequence(sequence, rules=None, strict: bool = True) -> bool:
    """
    Check a color sequence against the rules (length, colors, duplicates).

    Args:
        sequence (list[str]): Normalized color names.
        rules (dict or None): The ruleset to check against.
        strict (bool): If True, raise InvalidCodeError on failure.
        If False, return False on failure.

    Returns:
        bool: True if the sequence is valid.
    """

    rules = rules or DEFAULT_RULES

    def fail(msg: str) -> bool:
        if strict:
            raise InvalidCodeError(msg)
        return False

    # Validates, if code sequence length is as declared in the rules.
    if len(sequence) != rules["code_length"]:
        return fail(
            f"Code length must be {rules['code_length']}, "
            f"but got {len(sequence)}."
        )

    # Validates if code sequence only contains colors as in the rules.
    for color in sequence:
        if color not in rules["colors"]:
            allowed = ", ".join(rules["colors"])
            return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

    # Validates if code sequence has no duplicates, when its not allowed.
    if not rules.get("allow_duplicates", True) and len(set(sequence)) != len(
        sequence
    ):
        return fail("Duplicate colors are not allowed.")

    return True


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (list[str]): The sequence of colors representing the code.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (str, list or None): The colors of the code, as names
            or aliases.
            rules (dict or None): Reference to the ruleset (defines length,
            colors, duplicates, etc.).

        Raises:
            InvalidCodeError: If a non-empty sequence breaks the rules.
        """

        self.rules = rules or DEFAULT_RULES
        self.sequence = parse_colors(sequence, self.rules)

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate()

    def generate_random(self, rng=None):
        """
        Generate a random valid code according to the rules.

        Args:
            rng (random.Random or None): Source of randomness. Defaults to
            the module-level generator.
        """

        rng = rng or random
        colors = self.rules["colors"]
        length = self.rules["code_length"]

        if self.rules.get("allow_duplicates", True):
            self.sequence = rng.choices(colors, k=length)
        else:
            self.sequence = rng.sample(colors, k=length)

        self.is_valid = self.validate()

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length, colors, duplicates).

        Args:
            strict (bool): If True, raise InvalidCodeError with an
            explanatory message when validation fails. If False, return
            False on failure.

        Returns:
            bool: True if the code sequence is valid.
        """

        return validate_sequence(self.sequence, self.rules, strict=strict)

    def compare_with(self, guess) -> tuple[int, int]:
        """
        Compare this secret code with a guess and compute feedback.

        Args:
            guess (Guess or sequence): The guess to score.

        Returns:
            tuple[int, int]: (exact, color_only)
        """

        sequence = getattr(guess, "sequence", guess)
        return evaluate(sequence, self.sequence)

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(self.sequence)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'red, blue, ...').
        """
        return ", ".join(self.sequence) if self.sequence else "EMPTY"

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return self.sequence == list(other)
        return False

    def __str__(self):
        return self.as_string()
