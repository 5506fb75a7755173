# Configuration: colors, code length, duplicates, attempts, display.
DEFAULT_RULES = {
    "name": "classic-no-repeats",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Available colors (see color set below)
    "allow_duplicates": False,  # Codes never repeat a color
    "max_attempts": 12,  # Number of guesses per game
    "colors": [
        "red",
        "yellow",
        "orange",
        "green",
        "blue",
        "purple",
    ],
    # One-letter shorthand accepted on input
    "aliases": {
        "r": "red",
        "y": "yellow",
        "o": "orange",
        "g": "green",
        "b": "blue",
        "p": "purple",
    },
    "display": {
        "emoji_map": {
            "red": "🔴",
            "yellow": "🟡",
            "orange": "🟠",
            "green": "🟢",
            "blue": "🔵",
            "purple": "🟣",
            "BK": "⚫",  # exact match peg
            "W": "⚪",  # color-only match peg
        }
    },
    "modes": ["codebreaker", "codemaker"],
}
