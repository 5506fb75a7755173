# # Command-line interface (text-based play)

import random
import time

from game.board import Board
from game.errors import ExhaustedCandidatesError
from game.game_loop import run_solver_game
from game.ruleset import DEFAULT_RULES
from solver.solver_manager import EliminationSolver, SolverConfig
from ui import display


def ask(prompt, read=input, write=print):
    write(prompt)
    return read().strip()


def ask_mode(read=input, write=print, rules=None):
    """Prompt until the player picks a valid mode."""
    rules = rules or DEFAULT_RULES
    while True:
        choice = ask(display.mode_prompt(), read, write).lower()
        if choice in rules["modes"]:
            return choice
        write(display.invalid_input())


def ask_yes_no(prompt, read=input, write=print):
    while True:
        answer = ask(prompt, read, write).lower()
        if answer in ("yes", "y"):
            return True
        if answer in ("no", "n"):
            return False
        write(display.invalid_input())


def play_codebreaker(read=input, write=print, rules=None, rng=None):
    """The player guesses a random code. Returns the finished Board."""
    b = Board(rules=rules)
    b.initialize_game(rng=rng)
    write(display.codebreaker_intro(b.rules))

    while not b.is_over:
        user_input = ask(display.guess_prompt(b.current_attempt + 1), read, write)
        try:
            b.make_guess(user_input)
        except ValueError as e:
            write(display.invalid_input(str(e)))
            continue

        write(display.render_board(b.get_current_state(), b.rules))

    code = b.secret_code.as_tuple()
    if b.is_won:
        write(display.player_win(code))
    else:
        write(display.lost_game("you", code))
    return b


def play_codemaker(read=input, write=print, rules=None, config=None, rng=None):
    """The player sets a code and the computer guesses it. Returns the finished Board."""
    config = config or SolverConfig()
    b = Board(rules=rules)
    write(display.codemaker_intro(b.rules))

    while True:
        try:
            b.set_secret(ask(display.code_prompt(), read, write))
            break
        except ValueError as e:
            write(display.invalid_input(str(e)))

    solver = EliminationSolver(config, rng=rng, rules=b.rules)

    def show_round(result):
        if config.think_delay:
            time.sleep(config.think_delay)
        write(display.computer_guess(result.guess))
        write(display.render_board(b.get_current_state(), b.rules))

    try:
        result = run_solver_game(b, solver, on_round=show_round)
    except ExhaustedCandidatesError as e:
        write(display.inconsistent_feedback(e))
        return b

    if result.won:
        write(display.computer_win(result.secret, result.attempts))
    else:
        write(display.lost_game("the computer", result.secret))
    return b


def gameloop(read=input, write=print, config=None, rng=None):
    """Play games until the player declines another round."""
    write("=== Mastermind CLI ===")
    rng = rng or random.Random(config.seed if config else None)

    while True:
        mode = ask_mode(read, write)
        if mode == "codebreaker":
            play_codebreaker(read, write, rng=rng)
        else:
            play_codemaker(read, write, config=config, rng=rng)

        if not ask_yes_no(display.repeat_game_prompt(), read, write):
            break

    write("\n=== Game Over ===")
