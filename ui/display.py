# Text shown to the player. Every function returns a string; the CLI prints it.

from game.ruleset import DEFAULT_RULES


def _colors(rules=None) -> str:
    rules = rules or DEFAULT_RULES
    colors = rules["colors"]
    return ", ".join(colors[:-1]) + " and " + colors[-1]


def _aliases(rules=None) -> str:
    rules = rules or DEFAULT_RULES
    return " ".join(rules.get("aliases", {}).keys())


def format_code(code) -> str:
    return ", ".join(code)


def format_feedback(feedback) -> str:
    exact, color_only = feedback
    return f"{exact} exact, {color_only} color only"


def mode_prompt() -> str:
    return (
        "Welcome to Mastermind, please select if you'd like to play as the "
        "codebreaker or the codemaker:"
    )


def codebreaker_intro(rules=None) -> str:
    rules = rules or DEFAULT_RULES
    return (
        f"As the codebreaker, the colors you may guess are {_colors(rules)}.\n"
        f"You may also type their first letters ({_aliases(rules)}).\n"
        "Duplicate colors and blanks are not allowed.\n"
        f"You have {rules['max_attempts']} guesses. After each guess you will "
        "be provided with feedback on your guess.\n"
        "The first number is the count of correct color and position guesses.\n"
        "The second number is the count of correct color but incorrect position guesses."
    )


def codemaker_intro(rules=None) -> str:
    return (
        f"As the codemaker, the colors you may choose are {_colors(rules)}.\n"
        "Duplicate colors and blanks are not allowed."
    )


def guess_prompt(guess_num: int) -> str:
    return (
        "Please enter your guess separated by spaces. "
        f"This is guess number {guess_num}:"
    )


def code_prompt() -> str:
    return "Please enter your code separated by spaces."


def invalid_input(reason: str = "") -> str:
    msg = "Invalid input, please try again."
    return f"{msg} {reason}" if reason else msg


def computer_guess(guess, remaining=None) -> str:
    msg = f"The computer guesses {format_code(guess)}"
    if remaining is not None:
        msg += f" ({remaining} possible codes left)"
    return msg


def player_win(code) -> str:
    return (
        "Congratulations, you have guessed the code!\n"
        f"The code is {format_code(code)}."
    )


def computer_win(code, attempts: int) -> str:
    return (
        f"The computer has guessed the correct code: {format_code(code)} "
        f"in {attempts} guesses."
    )


def lost_game(guesser: str, code) -> str:
    return (
        f"Unfortunately {guesser} did not guess the code.\n"
        f"The code is {format_code(code)}."
    )


def inconsistent_feedback(error) -> str:
    return f"The computer gives up: {error}"


def repeat_game_prompt() -> str:
    return "Would you like to play again? Please enter yes or no."


def render_board(state, rules=None, width=8) -> str:
    """
    Render a text-based representation of the board.

    Args:
        state (GameState): Snapshot of the game to draw.
        rules (dict or None): Ruleset with the emoji map.
        width (int): Number of cells per row (guess + feedback pegs).
    Returns:
        str: The board, one line per row.
    """

    rules = rules or DEFAULT_RULES
    colors = rules["display"]["emoji_map"]
    code_length = rules["code_length"]
    title = "| +++++++++++++ Mastermind ++++++++++++ |"
    colums = "| ++++ Guesses ++++ | ++++ Feedback +++ |"
    line = "+----" * width + "+"

    rows = [line, title, line, colums, line]
    for num, guess in enumerate(state.guesses, start=1):
        attempt_line = ""
        for c in guess.get_guess():
            attempt_line += "| " + colors[c] + " "
        exact, color_only = guess.get_feedback()
        for _ in range(exact):
            attempt_line += "| " + colors["BK"] + " "
        for _ in range(color_only):
            attempt_line += "| " + colors["W"] + " "
        for _ in range(max(0, code_length - exact - color_only)):
            attempt_line += "|    "
        rows.append(attempt_line + f"|  #{num} {list(guess.get_feedback())}")
        rows.append(line)
    return "\n".join(rows)
