import logging
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .config import readiness_settings
from .definitions import AREA_QUESTIONS, QUESTION_COUNT, VALID_ANSWERS
from .models import QuestionBank, SpecValidationError

logger = logging.getLogger(__name__)


def load_question_bank_data(data: Dict[str, Any]) -> QuestionBank:
    """
    Validates raw question bank data against the QuestionBank model and
    checks that it matches the fixed 12-question, four-area layout.
    """
    try:
        bank = QuestionBank.model_validate(data)
    except ValidationError as e:
        # Re-raise Pydantic's validation error for schema issues
        raise e

    if len(bank.questions) != QUESTION_COUNT:
        raise SpecValidationError(f"Expected {QUESTION_COUNT} questions, found {len(bank.questions)}")

    question_ids = set()
    for question in bank.questions:
        if question.id in question_ids:
            raise SpecValidationError(f"Duplicate question ID found: {question.id}")
        question_ids.add(question.id)

        option_values = [option.value for option in question.options]
        if sorted(option_values) != list(VALID_ANSWERS):
            raise SpecValidationError(
                f"Question '{question.id}' must offer each answer {list(VALID_ANSWERS)} exactly once, got {option_values}"
            )

    # Positions must line up with the area partition used for scoring
    for area_name, question_indices in AREA_QUESTIONS.items():
        for index in question_indices:
            question = bank.questions[index]
            if question.area != area_name:
                raise SpecValidationError(
                    f"Question {index + 1} ('{question.id}') belongs to '{question.area}', expected '{area_name}'"
                )

    return bank

def load_question_bank_from_file(file_path: str) -> QuestionBank:
    """
    Loads the question bank from a YAML file, validates it,
    and returns a QuestionBank object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SpecValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise SpecValidationError(f"YAML file is empty or invalid: {file_path}")

    bank = load_question_bank_data(data)
    logger.debug(f"Loaded question bank version {bank.version} from {file_path}")
    return bank

def load_question_bank(file_path: Optional[str] = None) -> QuestionBank:
    """Loads the configured question bank (``READINESS_QUESTION_BANK_PATH``)."""
    return load_question_bank_from_file(file_path or readiness_settings.question_bank_path)
