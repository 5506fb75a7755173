from __future__ import annotations

from itertools import permutations

from game.ruleset import DEFAULT_RULES


def generate_all(rules=None) -> list[tuple[str, ...]]:
    """
    Enumerate every valid code: ordered picks of distinct colors.

    Order follows the palette order of the rules, so the result is the
    same on every call (360 codes for 4 pegs out of 6 colors).
    """
    rules = rules or DEFAULT_RULES
    return list(permutations(rules["colors"], rules["code_length"]))
