from game.board import Board
from ui import display


def test_render_board_draws_pegs_per_guess():
    b = Board(secret=["red", "yellow", "orange", "green"])
    b.make_guess("r o y b")
    text = display.render_board(b.get_current_state())
    lines = text.splitlines()

    assert lines[1] == "| +++++++++++++ Mastermind ++++++++++++ |"
    row = lines[5]
    assert row.startswith("| 🔴 | 🟠 | 🟡 | 🔵 | ⚫ | ⚪ | ⚪ |    |")
    assert row.endswith("#1 [1, 2]")
    assert len(lines) == 7


def test_empty_board_has_only_header():
    text = display.render_board(Board(secret="r y o g").get_current_state())
    assert len(text.splitlines()) == 5


def test_intros_list_rules():
    intro = display.codebreaker_intro()
    assert "red, yellow, orange, green, blue and purple" in intro
    assert "12 guesses" in intro
    assert "r y o g b p" in intro
    assert "Duplicate colors" in display.codemaker_intro()


def test_messages():
    code = ("red", "yellow", "orange", "green")
    assert display.format_feedback((1, 2)) == "1 exact, 2 color only"
    assert display.computer_guess(code, remaining=6) == (
        "The computer guesses red, yellow, orange, green (6 possible codes left)"
    )
    assert display.lost_game("the computer", code).startswith("Unfortunately the computer")
    assert display.invalid_input() == "Invalid input, please try again."
    assert display.guess_prompt(3).endswith("This is guess number 3:")
