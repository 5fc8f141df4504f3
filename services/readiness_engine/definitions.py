# services/readiness_engine/definitions.py
# Static definitions for the 12-question readiness assessment.
# Questions 1-3: Clarity, 4-6: Engagement, 7-9: Preparation, 10-12: Support

from types import MappingProxyType

QUESTION_COUNT = 12

# "E" is the no-signal answer ("I do not wish to answer")
NO_SIGNAL_ANSWER = 'E'
VALID_ANSWERS = ('A', 'B', 'C', 'D', 'E')

ANSWER_POINTS = MappingProxyType({
    'A': 25,
    'B': 50,
    'C': 75,
    'D': 100,
    'E': 0,
})

AREA_QUESTIONS = MappingProxyType({
    'clarity': (0, 1, 2),       # Q1-Q3
    'engagement': (3, 4, 5),    # Q4-Q6
    'preparation': (6, 7, 8),   # Q7-Q9
    'support': (9, 10, 11),     # Q10-Q12
})

AREA_NAMES = tuple(AREA_QUESTIONS.keys())

QUESTION_IDS = (
    'clarity_future',
    'clarity_thinking',
    'clarity_research',
    'engagement_activities',
    'engagement_motivation',
    'engagement_projects',
    'preparation_confidence',
    'preparation_classes',
    'preparation_tests',
    'support_encouragement',
    'support_asking_help',
    'support_mentors',
)

AREA_MAX_SCORE = 300    # 3 questions x 100 points max each
TOTAL_MAX_SCORE = 1200  # 4 areas x 300 points each

# 7 or more no-signal answers out of 12 overrides every label
INSUFFICIENT_DATA_THRESHOLD = 7

# --- Labels ---

INSUFFICIENT_DATA = 'Insufficient Data'

DEVELOPMENT_AREA = 'Development Area'
BALANCED_ZONE = 'Balanced Zone'
PROFICIENCY_AREA = 'Proficiency Area'

AREA_CATEGORIES = (DEVELOPMENT_AREA, BALANCED_ZONE, PROFICIENCY_AREA, INSUFFICIENT_DATA)

STAGE_EARLY = 'Early'
STAGE_MID = 'Mid'
STAGE_LATE = 'Late'

STAGES = (STAGE_EARLY, STAGE_MID, STAGE_LATE, INSUFFICIENT_DATA)

# --- Thresholds (upper bound of each band, inclusive) ---

AREA_THRESHOLDS = (
    (150, DEVELOPMENT_AREA),   # 0-150 points
    (225, BALANCED_ZONE),      # 151-225 points
)

STAGE_THRESHOLDS = (
    (600, STAGE_EARLY),   # 0-600 points
    (900, STAGE_MID),     # 601-900 points
)

CATEGORY_DESCRIPTIONS = MappingProxyType({
    DEVELOPMENT_AREA: 'Needs focused improvement',
    BALANCED_ZONE: 'Moderate strength, can improve further',
    PROFICIENCY_AREA: 'Strong performance',
    INSUFFICIENT_DATA: 'Please answer more questions for accurate assessment',
})

# Short zone names consumed by roadmap generation
READINESS_ZONES = MappingProxyType({
    DEVELOPMENT_AREA: 'Development',
    BALANCED_ZONE: 'Balanced',
    PROFICIENCY_AREA: 'Proficiency',
})
