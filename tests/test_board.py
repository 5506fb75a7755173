import random

import pytest

from game.board import Board
from game.errors import GameOverError, InvalidCodeError
from game.secret_code import Code, parse_colors


RYOG = ["red", "yellow", "orange", "green"]


def test_make_guess_returns_feedback_and_counts_attempt():
    b = Board(secret=RYOG)
    assert b.make_guess(["red", "orange", "yellow", "blue"]) == (1, 2)
    assert b.current_attempt == 1
    assert b.remaining_attempts() == 11
    assert b.phase == "awaiting_guess"
    assert b.get_feedback_history() == [(["red", "orange", "yellow", "blue"], (1, 2))]


@pytest.mark.parametrize("text", ["r y o g", "R,Y,O,G", "Red Yellow ORANGE green", "r, yellow o  g"])
def test_aliases_and_separators(text):
    assert parse_colors(text) == RYOG
    assert Board(secret=RYOG).make_guess(text) == (4, 0)


@pytest.mark.parametrize("bad", [
    "red red orange green",
    "red yellow",
    "red yellow orange pink",
    "",
])
def test_invalid_guess_is_rejected_without_using_an_attempt(bad):
    b = Board(secret=RYOG)
    with pytest.raises(InvalidCodeError):
        b.make_guess(bad)
    assert b.current_attempt == 0


def test_invalid_code_error_is_a_value_error():
    with pytest.raises(ValueError):
        Code("red red red red")


def test_win_ends_the_game():
    b = Board(secret=RYOG)
    assert b.make_guess(RYOG) == (4, 0)
    assert b.is_won and b.is_over
    assert b.phase == "won"
    with pytest.raises(GameOverError):
        b.make_guess(RYOG)


def test_twelve_misses_lose():
    b = Board(secret=RYOG)
    for _ in range(12):
        assert b.make_guess("b p r y") == (0, 2)
    assert b.is_over and not b.is_won
    assert b.phase == "lost"
    assert b.remaining_attempts() == 0


def test_win_on_last_attempt_counts_as_win():
    b = Board(secret=RYOG)
    for _ in range(11):
        b.make_guess("b p r y")
    b.make_guess(RYOG)
    assert b.phase == "won"


def test_random_secret_follows_rules():
    b = Board()
    b.initialize_game(rng=random.Random(3))
    code = b.secret_code.as_tuple()
    assert len(code) == 4 and len(set(code)) == 4
    assert b.secret_code.is_valid


def test_set_secret_validates_and_resets():
    b = Board(secret=RYOG)
    b.make_guess("b p r y")
    b.set_secret("p b g o")
    assert b.current_attempt == 0
    assert b.secret_code == ["purple", "blue", "green", "orange"]
    with pytest.raises(InvalidCodeError):
        b.set_secret("")


def test_state_snapshot_hides_secret_unless_revealed():
    b = Board(secret=RYOG)
    b.make_guess("r o y b")
    state = b.get_current_state()
    assert state.history == [(["red", "orange", "yellow", "blue"], (1, 2))]
    assert state.to_dict()["secret_code"] is None
    data = state.to_dict(reveal_code=True)
    assert data["secret_code"] == RYOG
    assert data["guesses"] == [{"guess": ["red", "orange", "yellow", "blue"], "feedback": [1, 2]}]
