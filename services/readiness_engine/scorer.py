# services/readiness_engine/scorer.py
# Scoring and classification for the readiness assessment.

import logging
import math
from typing import Any, Dict, Optional

from .definitions import (
    ANSWER_POINTS,
    AREA_MAX_SCORE,
    AREA_QUESTIONS,
    AREA_THRESHOLDS,
    CATEGORY_DESCRIPTIONS,
    INSUFFICIENT_DATA,
    INSUFFICIENT_DATA_THRESHOLD,
    NO_SIGNAL_ANSWER,
    PROFICIENCY_AREA,
    READINESS_ZONES,
    STAGE_LATE,
    STAGE_THRESHOLDS,
    TOTAL_MAX_SCORE,
)
from .models import AreaScore, AssessmentResult, AnswerVector
from .normalizer import validate_and_normalize

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def _clamp(value: float, upper: int) -> int:
    return max(0, min(upper, _round_half_up(value)))


# --- Classification ---

def count_no_signal_answers(answer_vector: AnswerVector) -> int:
    return sum(1 for answer in answer_vector if answer == NO_SIGNAL_ANSWER)

def is_insufficient_data(answer_vector: AnswerVector) -> bool:
    """True when 7 or more answers are the no-signal answer "E"."""
    return count_no_signal_answers(answer_vector) >= INSUFFICIENT_DATA_THRESHOLD

def categorize_area(area_score: float, insufficient_data: bool = False) -> str:
    """
    Maps an area score to its category.

    The score is clamped to 0-300 and rounded first. Bands are
    0-150 Development Area, 151-225 Balanced Zone, 226-300 Proficiency Area.
    """
    if insufficient_data:
        return INSUFFICIENT_DATA

    valid_score = _clamp(area_score, AREA_MAX_SCORE)
    for upper_bound, category in AREA_THRESHOLDS:
        if valid_score <= upper_bound:
            return category
    return PROFICIENCY_AREA

def classify_stage(total_score: float, insufficient_data: bool = False) -> str:
    """
    Maps the total score to the overall stage.

    Insufficient data wins before any threshold is consulted. Otherwise the
    total is clamped to 0-1200 and rounded: 0-600 Early, 601-900 Mid,
    901-1200 Late.
    """
    if insufficient_data:
        return INSUFFICIENT_DATA

    valid_total = _clamp(total_score, TOTAL_MAX_SCORE)
    for upper_bound, stage in STAGE_THRESHOLDS:
        if valid_total <= upper_bound:
            return stage
    return STAGE_LATE


# --- Scoring ---

def score(answer_vector: AnswerVector) -> AssessmentResult:
    """
    Scores a validated AnswerVector.

    Each area is the sum of its three answers' points (A=25, B=50, C=75,
    D=100, E=0); the total is the sum over all areas. When 7 or more answers
    are "E", every category and the stage are "Insufficient Data" while the
    numeric scores are still reported.
    """
    raw_area_scores: Dict[str, float] = {}
    for area_name, question_indices in AREA_QUESTIONS.items():
        raw_area_scores[area_name] = sum(ANSWER_POINTS[answer_vector[i]] for i in question_indices)

    total_score = _round_half_up(sum(raw_area_scores.values()))
    insufficient_data = is_insufficient_data(answer_vector)
    if insufficient_data:
        logger.info(
            f"Insufficient data: {count_no_signal_answers(answer_vector)} of "
            f"{len(answer_vector)} answers carry no signal"
        )

    areas = {
        area_name: AreaScore(
            score=_round_half_up(raw_score),
            category=categorize_area(raw_score, insufficient_data),
        )
        for area_name, raw_score in raw_area_scores.items()
    }

    result = AssessmentResult(
        stage=classify_stage(total_score, insufficient_data),
        total_score=total_score,
        **areas,
    )
    logger.debug(f"Calculated readiness result: {result.to_dict()}")
    return result

def calculate_scores(raw_answers: Any) -> AssessmentResult:
    """Validates, normalizes and scores a raw answer sequence in one call."""
    return score(validate_and_normalize(raw_answers))


# --- Lookups ---

def describe_category(category: str) -> str:
    """One-line description of a category label, or "" if the label is unknown."""
    return CATEGORY_DESCRIPTIONS.get(category, '')

def readiness_zones(result: AssessmentResult) -> Dict[str, Optional[str]]:
    """
    Short zone names per area ("Development", "Balanced", "Proficiency").

    Areas labelled "Insufficient Data" have no zone and map to None.
    """
    return {
        area_name: READINESS_ZONES.get(area_score.category)
        for area_name, area_score in result.areas.items()
    }
