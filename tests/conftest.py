import pytest


class FirstChoice:
    """RNG stand-in that always picks the first option."""

    def choice(self, seq):
        return seq[0]

    def sample(self, population, k):
        return list(population[:k])


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def scripted():
    """Build (read, write, output) for driving the CLI with canned answers."""

    def make(answers):
        it = iter(answers)
        output = []
        return (lambda: next(it)), output.append, output

    return make
