"""
Survey Scorer - Turn lettered answers into a 0-100 wellness score.

Scoring rules:
1. max_score is 4 x the number of submitted entries, valid or not
2. Each valid letter on a known question adds its weight (a=1 .. d=4)
3. wellness_score = round-half-up(100 x total / max)

Unknown question ids are skipped and reported in ignored_question_ids.
Invalid letters on known questions score 0 but keep their raw value as
the answer text, so the question still reaches the prompt.

score_survey is pure: the submitted mapping is never modified.
"""
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from wellness.core.exceptions import EmptySurvey
from wellness.core.logging_config import get_logger
from wellness.scoring.questions import OPTIONS_PER_QUESTION, AnswerChoice, QuestionSet

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExpandedAnswer:
    """A submitted answer rewritten as human-readable text."""
    question_id: str
    question_text: str
    answer_text: str
    choice: Optional[AnswerChoice] = None
    weight: int = 0

    @property
    def is_scored(self) -> bool:
        return self.choice is not None


@dataclass(frozen=True)
class ScoreResult:
    """
    Outcome of scoring one survey submission.

    Attributes:
        total_score: Sum of weights of valid answers
        max_score: 4 x number of submitted entries
        wellness_score: 0-100 percentage, rounded half up
        answers: Expanded answers for known questions, in submission order
        ignored_question_ids: Submitted ids with no matching question
    """
    total_score: int
    max_score: int
    wellness_score: int
    answers: Tuple[ExpandedAnswer, ...] = ()
    ignored_question_ids: Tuple[str, ...] = ()


def wellness_percentage(total_score: int, max_score: int) -> int:
    """
    Compute round-half-up(100 * total / max) with integer arithmetic.

    Raises:
        EmptySurvey: If max_score is 0
    """
    if max_score <= 0:
        raise EmptySurvey()
    return (200 * total_score + max_score) // (2 * max_score)


def _answer_text(raw: Any) -> str:
    return raw if isinstance(raw, str) else str(raw)


def score_survey(questions: QuestionSet, responses: Mapping[str, Any]) -> ScoreResult:
    """
    Score a survey submission against a question set.

    Args:
        questions: The question set to score against
        responses: Question id -> submitted letter, in submission order

    Returns:
        ScoreResult with totals and expanded answers

    Raises:
        EmptySurvey: If no responses were submitted

    Example:
        >>> result = score_survey(get_question_set(), {"q1": "d", "q2": "a"})
        >>> result.total_score, result.max_score, result.wellness_score
        (5, 8, 63)
    """
    if not responses:
        raise EmptySurvey()

    max_score = OPTIONS_PER_QUESTION * len(responses)
    total_score = 0
    answers: List[ExpandedAnswer] = []
    ignored: List[str] = []

    for question_id, raw_answer in responses.items():
        question = questions.get(question_id)
        if question is None:
            ignored.append(question_id)
            continue

        choice = AnswerChoice.parse(raw_answer)
        option_text = question.option_for(choice) if choice is not None else None

        if option_text is None:
            answers.append(ExpandedAnswer(
                question_id=question.id,
                question_text=question.text,
                answer_text=_answer_text(raw_answer),
            ))
            continue

        total_score += choice.weight
        answers.append(ExpandedAnswer(
            question_id=question.id,
            question_text=question.text,
            answer_text=option_text,
            choice=choice,
            weight=choice.weight,
        ))

    wellness_score = wellness_percentage(total_score, max_score)

    if ignored:
        logger.debug(f"Ignored unknown question ids: {ignored}")

    logger.info(
        f"Survey scored: entries={len(responses)}, total={total_score}, "
        f"max={max_score}, wellness={wellness_score}"
    )

    return ScoreResult(
        total_score=total_score,
        max_score=max_score,
        wellness_score=wellness_score,
        answers=tuple(answers),
        ignored_question_ids=tuple(ignored),
    )
