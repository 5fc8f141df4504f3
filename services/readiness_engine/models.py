from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional, Tuple

# Ordered, normalized answers: exactly 12 symbols from A-E
AnswerVector = Tuple[str, ...]

AreaName = Literal['clarity', 'engagement', 'preparation', 'support']
AnswerSymbol = Literal['A', 'B', 'C', 'D', 'E']
Category = Literal['Development Area', 'Balanced Zone', 'Proficiency Area', 'Insufficient Data']
Stage = Literal['Early', 'Mid', 'Late', 'Insufficient Data']


class AreaScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=300)
    category: Category


class AssessmentResult(BaseModel):
    """
    Scored assessment: one AreaScore per area plus the total and overall stage.

    ``to_dict()`` produces the shape callers persist:
    ``{"stage": ..., "totalScore": ..., "clarity": {"score": ..., "category": ...}, ...}``
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stage: Stage
    total_score: int = Field(..., ge=0, le=1200, alias='totalScore')
    clarity: AreaScore
    engagement: AreaScore
    preparation: AreaScore
    support: AreaScore

    @property
    def areas(self) -> Dict[str, AreaScore]:
        return {
            'clarity': self.clarity,
            'engagement': self.engagement,
            'preparation': self.preparation,
            'support': self.support,
        }

    @property
    def is_insufficient_data(self) -> bool:
        return self.stage == 'Insufficient Data'

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# --- Question bank ---

class AnswerOption(BaseModel):
    value: AnswerSymbol
    label: str

class AssessmentQuestion(BaseModel):
    id: str
    area: AreaName
    text: str
    options: List[AnswerOption]

class QuestionBank(BaseModel):
    version: str
    questions: List[AssessmentQuestion]

    def question_ids(self) -> Tuple[str, ...]:
        return tuple(q.id for q in self.questions)

    def questions_for_area(self, area: str) -> List[AssessmentQuestion]:
        return [q for q in self.questions if q.area == area]

    def get_question(self, question_id: str) -> Optional[AssessmentQuestion]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


# Custom Error Classes
class AnswerValidationError(ValueError):
    """
    Raised when a submitted answer sequence cannot be normalized.

    ``kind`` is ``"length"`` or ``"invalid_symbol"``. For invalid symbols,
    ``index`` is the 1-based question number, ``position`` the 0-based
    offset and ``value`` the raw value as submitted.
    """
    LENGTH = 'length'
    INVALID_SYMBOL = 'invalid_symbol'

    def __init__(self, kind: str, message: str, index: Optional[int] = None, value: Any = None):
        super().__init__(message)
        self.kind = kind
        self.index = index
        self.value = value

    @property
    def position(self) -> Optional[int]:
        return self.index - 1 if self.index is not None else None

class SpecValidationError(ValueError):
    """Custom exception for question bank errors not covered by Pydantic."""
    pass
