"""
Wellness Report Prompts - Prompts for the narrative survey report.

The user prompt carries everything the model needs:
1. Coach framing, greeting and privacy instructions
2. The computed wellness score
3. The applicant's personal details
4. Each answered question with its expanded answer text
5. The required HTML report structure
"""
import json
from typing import Any, Iterable

from wellness.models.survey import PersonalInformation
from wellness.scoring.scorer import ExpandedAnswer, ScoreResult

WELLNESS_SYSTEM_PROMPT = "You are a helpful wellness expert."

REPORT_SECTIONS = """1. Overall Wellness Assessment (including the score interpretation)
2. Key Strengths and Areas for Improvement
3. Personalized Recommendations for:
   - Physical Wellness
   - Mental Wellness
   - Sleep Quality
   - Stress Management
4. Suggested Wellness Practices and Activities
5. Next Steps and Action Plan"""


def get_wellness_system_prompt() -> str:
    """Get the system prompt for report generation."""
    return WELLNESS_SYSTEM_PROMPT


def display_value(value: Any) -> str:
    """
    Render a free-text personal field for the prompt.

    Missing values become an empty string; non-string values are shown
    as the JSON they were sent as (true, 34, 34.5).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def format_answers(answers: Iterable[ExpandedAnswer]) -> str:
    """
    Render expanded answers as question/answer blocks.

    Example:
        >>> print(format_answers([ExpandedAnswer("q1", "Sleep well?", "Often")]))
        Sleep well?
        Answer: Often
    """
    return "\n\n".join(
        f"{answer.question_text}\nAnswer: {answer.answer_text}"
        for answer in answers
    )


def get_wellness_user_prompt(
    personal_information: PersonalInformation,
    score: ScoreResult,
    brand_name: str = "Ode Spa",
) -> str:
    """
    Build the user prompt for the wellness report.

    Args:
        personal_information: Applicant details
        score: Scored survey with expanded answers
        brand_name: Wellness provider that signs the report

    Returns:
        Complete user prompt for the LLM
    """
    info = personal_information
    name = display_value(info.name)
    wellness = f"{score.wellness_score}/100"

    return f"""You are a wellness coach. Given the following user details and quiz responses, provide a concise summary with the user's wellness score ({wellness}) and a personalized recommendation for spa or wellness services.

## INSTRUCTIONS
- Begin the response by greeting the user by name ({name}).
- Do NOT include the user's email address or phone number anywhere in the response.
- Sign the regards section with {brand_name} as the wellness expert.

## PERSONAL INFORMATION
- Name: {name}
- Age: {display_value(info.age)}
- Gender: {display_value(info.gender)}
- Email: {info.email}
- Phone: {info.phone}

Wellness Score: {wellness}

## SURVEY RESPONSES
{format_answers(score.answers)}

Please provide a comprehensive analysis in HTML format with the following sections:
{REPORT_SECTIONS}

Format the response with appropriate HTML headings, paragraphs, and bullet points for better readability."""
