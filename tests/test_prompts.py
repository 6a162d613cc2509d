"""Tests for wellness report prompt construction."""
import pytest

from wellness.llm.prompts import (
    display_value,
    format_answers,
    get_wellness_system_prompt,
    get_wellness_user_prompt,
)
from wellness.models.survey import PersonalInformation
from wellness.scoring import score_survey


def _info(**overrides) -> PersonalInformation:
    fields = {
        "name": "Jane Doe",
        "age": 34,
        "gender": "Female",
        "email": "jane.doe@example.com",
        "phone": "5551234567",
    }
    fields.update(overrides)
    return PersonalInformation(**fields)


def test_system_prompt():
    assert get_wellness_system_prompt() == "You are a helpful wellness expert."


def test_user_prompt_contains_instructions_and_score(questions):
    score = score_survey(questions, {"q1": "d", "q2": "a"})
    prompt = get_wellness_user_prompt(_info(), score)

    assert prompt.startswith("You are a wellness coach.")
    assert "greeting the user by name (Jane Doe)" in prompt
    assert "Do NOT include the user's email address or phone number" in prompt
    assert "(63/100)" in prompt
    assert "Wellness Score: 63/100" in prompt


def test_user_prompt_contains_personal_fields(questions):
    score = score_survey(questions, {"q1": "a"})
    prompt = get_wellness_user_prompt(_info(), score)

    for line in (
        "- Name: Jane Doe",
        "- Age: 34",
        "- Gender: Female",
        "- Email: jane.doe@example.com",
        "- Phone: 5551234567",
    ):
        assert line in prompt


def test_user_prompt_lists_answers_in_order(questions):
    score = score_survey(questions, {"q2": "c", "q1": "b"})
    prompt = get_wellness_user_prompt(_info(), score)

    q2 = "At the end of a busy day, how cluttered is your mind with stress or worries?\nAnswer: Quite a lot"
    q1 = "How often do you experience persistent muscle tension or stiffness?\nAnswer: Occasionally"
    assert q2 in prompt
    assert q1 in prompt
    assert prompt.index(q2) < prompt.index(q1)


def test_unknown_questions_are_excluded(questions):
    score = score_survey(questions, {"q1": "a", "q99": "b"})
    prompt = get_wellness_user_prompt(_info(), score)

    assert prompt.count("Answer:") == 1
    assert "q99" not in prompt


def test_invalid_letter_keeps_raw_answer(questions):
    score = score_survey(questions, {"q1": "z"})
    prompt = get_wellness_user_prompt(_info(), score)

    assert "How often do you experience persistent muscle tension or stiffness?\nAnswer: z" in prompt


def test_brand_name_and_report_sections(questions):
    score = score_survey(questions, {"q1": "a"})
    prompt = get_wellness_user_prompt(_info(), score, brand_name="Serenity Spa")

    assert "Sign the regards section with Serenity Spa" in prompt
    assert "1. Overall Wellness Assessment" in prompt
    assert "5. Next Steps and Action Plan" in prompt
    assert "HTML format" in prompt


def test_format_answers_empty():
    assert format_answers([]) == ""


@pytest.mark.parametrize("value, expected", [
    (None, ""),
    ("Jane", "Jane"),
    ("", ""),
    (34, "34"),
    (True, "true"),
    (False, "false"),
    (["a"], '["a"]'),
])
def test_display_value(value, expected):
    assert display_value(value) == expected


def test_free_text_fields_keep_raw_types():
    info = _info(name=None, age=False, gender=None)

    assert info.name is None
    assert info.age is False
    assert info.gender is None
