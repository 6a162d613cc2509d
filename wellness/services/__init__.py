"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate validation, scoring and the LLM
"""
from wellness.services.survey_service import SurveyService

__all__ = [
    "SurveyService",
]
