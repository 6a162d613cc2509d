"""
Scoring module - Deterministic survey scoring.

- questions.py : The immutable question set and answer choices
- scorer.py    : Weight aggregation and answer expansion
"""
from wellness.scoring.questions import (
    AnswerChoice,
    Question,
    QuestionSet,
    build_question_set,
    get_question_set,
)
from wellness.scoring.scorer import ExpandedAnswer, ScoreResult, score_survey, wellness_percentage

__all__ = [
    "AnswerChoice",
    "Question",
    "QuestionSet",
    "build_question_set",
    "get_question_set",
    "ExpandedAnswer",
    "ScoreResult",
    "score_survey",
    "wellness_percentage",
]
