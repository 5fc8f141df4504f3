# Readiness assessment scoring: normalization, scoring, classification

from .models import AnswerValidationError, AreaScore, AssessmentResult, QuestionBank, SpecValidationError
from .normalizer import answers_from_responses, validate_and_normalize
from .scorer import (
    calculate_scores,
    categorize_area,
    classify_stage,
    describe_category,
    is_insufficient_data,
    readiness_zones,
    score,
)
from .loader import load_question_bank

__all__ = [
    "AnswerValidationError",
    "AreaScore",
    "AssessmentResult",
    "QuestionBank",
    "SpecValidationError",
    "answers_from_responses",
    "validate_and_normalize",
    "calculate_scores",
    "categorize_area",
    "classify_stage",
    "describe_category",
    "is_insufficient_data",
    "readiness_zones",
    "score",
    "load_question_bank",
]
