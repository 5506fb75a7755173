import random

import pytest

from game.errors import ExhaustedCandidatesError, SolverStateError
from game.feedback import evaluate
from solver.solver_manager import EliminationSolver, SolverConfig


ABCD = ("red", "yellow", "orange", "green")
ABDC = ("red", "yellow", "green", "orange")


def test_starts_with_full_universe():
    solver = EliminationSolver()
    assert solver.remaining == 360
    assert solver.phase == "awaiting_guess"
    assert solver.last_guess is None


def test_two_solvers_do_not_share_candidates():
    a = EliminationSolver(SolverConfig(seed=1))
    b = EliminationSolver(SolverConfig(seed=1))
    a.choose_guess()
    # swapping any two pegs of the guess gives (2, 2)
    assert a.eliminate((2, 2)) == 6
    assert a.remaining < 360
    assert b.remaining == 360


def test_swapped_pair_leaves_only_the_other_code(first_choice):
    solver = EliminationSolver(rng=first_choice, candidates=[ABCD, ABDC])
    assert solver.choose_guess() == ABCD
    assert solver.eliminate((2, 2)) == 1
    assert solver.candidates == (ABDC,)
    assert solver.choose_guess() == ABDC


def test_elimination_keeps_secret_and_only_consistent_codes():
    secret = ("purple", "green", "red", "blue")
    solver = EliminationSolver(SolverConfig(seed=42))
    while True:
        guess = solver.choose_guess()
        fb = evaluate(guess, secret)
        if fb == (4, 0):
            break
        before = solver.remaining
        solver.eliminate(fb)
        assert solver.remaining < before
        assert secret in solver.candidates
        assert guess not in solver.candidates
        assert all(evaluate(guess, c) == fb for c in solver.candidates)
    assert guess == secret


def test_history_records_applied_feedback(first_choice):
    solver = EliminationSolver(rng=first_choice, candidates=[ABCD, ABDC])
    solver.choose_guess()
    solver.eliminate([2, 2])
    assert solver.history == [(ABCD, (2, 2))]


def test_same_seed_same_guesses():
    secret = ("blue", "orange", "yellow", "red")

    def guesses(seed):
        solver = EliminationSolver(SolverConfig(seed=seed))
        out = []
        while True:
            g = solver.choose_guess()
            out.append(g)
            fb = evaluate(g, secret)
            if fb == (4, 0):
                return out
            solver.eliminate(fb)

    assert guesses(9) == guesses(9)


def test_injected_rng_wins_over_seed(first_choice):
    solver = EliminationSolver(SolverConfig(seed=123), rng=first_choice)
    assert solver.choose_guess() == ABCD


def test_guessing_twice_without_feedback_is_an_error():
    solver = EliminationSolver(rng=random.Random(0))
    solver.choose_guess()
    with pytest.raises(SolverStateError):
        solver.choose_guess()


def test_eliminate_before_guess_is_an_error():
    with pytest.raises(SolverStateError):
        EliminationSolver().eliminate((1, 2))


def test_winning_feedback_is_not_eliminated(first_choice):
    solver = EliminationSolver(rng=first_choice)
    solver.choose_guess()
    with pytest.raises(SolverStateError):
        solver.eliminate((4, 0))
    assert solver.remaining == 360


def test_impossible_feedback_is_rejected(first_choice):
    solver = EliminationSolver(rng=first_choice)
    solver.choose_guess()
    with pytest.raises(ValueError):
        solver.eliminate((3, 1))
    assert solver.phase == "awaiting_feedback"


def test_inconsistent_feedback_raises(first_choice):
    solver = EliminationSolver(rng=first_choice, candidates=[ABCD, ABDC])
    solver.choose_guess()
    with pytest.raises(ExhaustedCandidatesError) as err:
        solver.eliminate((0, 4))
    assert err.value.guess == ABCD
    assert err.value.feedback == (0, 4)
    assert solver.remaining == 0


def test_empty_candidate_set_cannot_guess():
    with pytest.raises(ExhaustedCandidatesError):
        EliminationSolver(candidates=[]).choose_guess()
