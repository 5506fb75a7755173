from __future__ import annotations

from typing import Sequence

from .ruleset import DEFAULT_RULES


Feedback = tuple[int, int]

_CODE_LENGTH = DEFAULT_RULES["code_length"]

# All feedbacks reachable with 4 distinct pegs out of 6 colors.
# Two such codes always share at least two colors, and 3 exact + 1
# misplaced cannot happen.
FEEDBACKS: list[Feedback] = [
    (b, w)
    for b in range(_CODE_LENGTH + 1)
    for w in range(_CODE_LENGTH + 1 - b)
    if b + w >= 2 and not (b == _CODE_LENGTH - 1 and w == 1)
]

WINNING_FEEDBACK: Feedback = (_CODE_LENGTH, 0)


def evaluate(guess: Sequence[str], secret: Sequence[str]) -> Feedback:
    """
    Compute Mastermind feedback for a guess against a secret.

    Both sequences are repeat-free, so every shared color counts once.

    Args:
        guess: The guessed colors.
        secret: The secret colors.
    Returns:
        tuple[int, int]: (exact, color_only)
        exact -- colors in the correct position,
        color_only -- shared colors that sit in a different position.
    """
    exact = sum(1 for g, s in zip(guess, secret) if g == s)
    shared = len(set(guess) & set(secret))
    return (exact, shared - exact)


def is_win(feedback: Sequence[int]) -> bool:
    return tuple(feedback) == WINNING_FEEDBACK


def is_valid_feedback(feedback) -> bool:
    """Return True if feedback is a pair that some guess could produce."""
    try:
        pair = (int(feedback[0]), int(feedback[1]))
    except (TypeError, ValueError, IndexError):
        return False
    return len(feedback) == 2 and pair in FEEDBACKS
