# services/readiness_engine/normalizer.py
# Cleans and validates raw answer sequences before scoring.

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable

from .definitions import NO_SIGNAL_ANSWER, QUESTION_COUNT, QUESTION_IDS, VALID_ANSWERS
from .models import AnswerValidationError, AnswerVector

logger = logging.getLogger(__name__)


def validate_and_normalize(raw_answers: Any) -> AnswerVector:
    """
    Converts caller-supplied answers into an AnswerVector.

    Each element is coerced with ``str()`` and uppercased, so ``'a'`` and
    ``'A'`` are equivalent. Order is preserved.

    Raises:
        AnswerValidationError: kind ``"length"`` if the input is not a sequence
            of exactly 12 elements, kind ``"invalid_symbol"`` for the first
            element that is not one of A-E after normalization.
    """
    if (
        isinstance(raw_answers, (str, bytes, Mapping))
        or not isinstance(raw_answers, Sequence)
        or len(raw_answers) != QUESTION_COUNT
    ):
        logger.warning(f"Rejected answer submission: expected {QUESTION_COUNT} answers")
        raise AnswerValidationError(
            AnswerValidationError.LENGTH,
            f"Answers must be a sequence of exactly {QUESTION_COUNT} elements",
        )

    normalized = []
    for position, answer in enumerate(raw_answers):
        symbol = str(answer).upper()
        if symbol not in VALID_ANSWERS:
            logger.warning(f"Rejected answer submission: invalid answer {answer!r} at position {position + 1}")
            raise AnswerValidationError(
                AnswerValidationError.INVALID_SYMBOL,
                f"Invalid answer at position {position + 1}: {answer}",
                index=position + 1,
                value=answer,
            )
        normalized.append(symbol)

    return tuple(normalized)


def answers_from_responses(
    responses: Dict[str, Any],
    question_ids: Iterable[str] = QUESTION_IDS,
) -> AnswerVector:
    """
    Builds an AnswerVector from a ``{question_id: answer}`` mapping.

    Questions are taken in question-bank order. Unanswered questions (missing,
    None or empty) count as the no-signal answer "E".
    """
    question_ids = tuple(question_ids)

    unknown = sorted(set(responses) - set(question_ids))
    if unknown:
        logger.warning(f"Ignoring responses for unknown questions: {unknown}")

    raw_answers = [responses.get(question_id) or NO_SIGNAL_ANSWER for question_id in question_ids]
    return validate_and_normalize(raw_answers)
