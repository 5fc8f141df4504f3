import pytest

from services.readiness_engine.loader import load_question_bank


@pytest.fixture(scope="session")
def question_bank():
    """The question bank shipped with the engine."""
    return load_question_bank()


def make_vector(*area_answers: str) -> tuple:
    """Builds a 12-answer vector from four 3-letter area strings, e.g. make_vector('DDD', 'CCC', 'BBB', 'AAA')."""
    assert len(area_answers) == 4
    answers = tuple("".join(area_answers))
    assert len(answers) == 12
    return answers


@pytest.fixture
def vector_factory():
    return make_vector
