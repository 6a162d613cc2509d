"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes are
version controlled and reviewed like code.
"""
from wellness.llm.prompts.wellness_prompts import (
    display_value,
    format_answers,
    get_wellness_system_prompt,
    get_wellness_user_prompt,
)

__all__ = [
    "display_value",
    "format_answers",
    "get_wellness_system_prompt",
    "get_wellness_user_prompt",
]
