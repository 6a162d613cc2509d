"""
Question Set - The fixed wellness questionnaire.

Each question has exactly four options lettered a-d. An option's
position decides its weight: a=1, b=2, c=3, d=4.

The question set is built once per process (get_question_set) and
injected into the scorer, so alternate sets can be used in tests.
"""
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

OPTIONS_PER_QUESTION = 4


class AnswerChoice(str, Enum):
    """The four lettered answer choices of every question."""
    A = "a"
    B = "b"
    C = "c"
    D = "d"

    @property
    def index(self) -> int:
        """Zero-based option position."""
        return list(AnswerChoice).index(self)

    @property
    def weight(self) -> int:
        """Score contributed by this choice (1-4)."""
        return self.index + 1

    @classmethod
    def parse(cls, value: Any) -> Optional["AnswerChoice"]:
        """
        Parse a raw submitted answer.

        Only the exact lowercase letters a-d are recognized; anything
        else (other letters, upper case, empty strings, non-strings)
        returns None.
        """
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Question:
    """
    A single multiple-choice question.

    Attributes:
        id: Stable identifier ("q1".."q13")
        text: The question prompt
        options: Exactly four answer strings, ordered by weight
    """
    id: str
    text: str
    options: Tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but store a tuple
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"Question {self.id} must have exactly {OPTIONS_PER_QUESTION} "
                f"options, got {len(self.options)}"
            )

    def option_for(self, choice: AnswerChoice) -> Optional[str]:
        """Return the display text of a choice, or None if out of range."""
        if 0 <= choice.index < len(self.options):
            return self.options[choice.index]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "options": list(self.options)}


class QuestionSet:
    """
    Immutable, ordered collection of questions keyed by id.

    Example:
        >>> questions = QuestionSet([Question("q1", "Sleep well?", ["No", "Meh", "Yes", "Always"])])
        >>> questions.get("q1").text
        'Sleep well?'
        >>> questions.get("q99") is None
        True
    """

    def __init__(self, questions: Iterable[Question]):
        ordered = tuple(questions)
        by_id: Dict[str, Question] = {}
        for question in ordered:
            if question.id in by_id:
                raise ValueError(f"Duplicate question id: {question.id}")
            by_id[question.id] = question

        self._questions = ordered
        self._by_id = by_id

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __repr__(self) -> str:
        return f"QuestionSet({len(self)} questions)"


WELLNESS_QUESTIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "How often do you experience persistent muscle tension or stiffness?",
        ("Rarely", "Occasionally", "Frequently", "Constantly"),
    ),
    (
        "At the end of a busy day, how cluttered is your mind with stress or worries?",
        ("Barely", "A bit", "Quite a lot", "Overwhelmingly"),
    ),
    (
        "How balanced do you feel across your physical, mental, and emotional well-being?",
        ("Very balanced", "Somewhat balanced", "Slightly imbalanced", "Very imbalanced"),
    ),
    (
        "Which outcome are you craving most from a wellness session?",
        ("Relaxed muscles", "A calm mind", "An uplifted mood", "Better sleep"),
    ),
    (
        "How often would you ideally schedule a wellness session to maintain overall balance?",
        ("Only when I feel run-down", "Quarterly", "Monthly", "Weekly"),
    ),
    (
        "When stress peaks, which quick reset helps you most?",
        (
            "Taking a short walk",
            "Spending time in a quiet space",
            "Listening to soothing sounds",
            "Practicing deep breathing",
        ),
    ),
    (
        "How would you rate your flexibility and joint mobility?",
        ("Very limited", "Below average", "Above average", "Excellent"),
    ),
    (
        "Which supportive practice best complements your fitness routine?",
        (
            "Foot or hand exercises",
            "Applying gentle warmth (heat pad)",
            "Listening to energizing music",
            "Assisted or partner-led stretching",
        ),
    ),
    (
        "How long does it usually take you to fall asleep?",
        ("Over 60 minutes", "30–60 minutes", "15–30 minutes", "Under 15 minutes"),
    ),
    (
        "How often do you wake up feeling refreshed?",
        ("Rarely", "Sometimes", "Often", "Almost always"),
    ),
    (
        "Over the past week, how steady has your mood been?",
        ("Very erratic", "Somewhat erratic", "Mostly steady", "Very steady"),
    ),
    (
        "Which environment helps you recenter best?",
        (
            "A quiet indoor space",
            "A softly lit room",
            "An outdoor/nature setting",
            "A bright, colorful area",
        ),
    ),
    (
        "How often do you intentionally pause to check in with your feelings?",
        ("Never", "Once a day", "Several times a day", "Continuously as needed"),
    ),
)


def build_question_set(
    definitions: Iterable[Tuple[str, Iterable[str]]] = WELLNESS_QUESTIONS
) -> QuestionSet:
    """Number (text, options) pairs as q1, q2, ... and build a QuestionSet."""
    return QuestionSet(
        Question(id=f"q{position}", text=text, options=tuple(options))
        for position, (text, options) in enumerate(definitions, start=1)
    )


@lru_cache(maxsize=1)
def get_question_set() -> QuestionSet:
    """Get the process-wide wellness question set."""
    return build_question_set()
