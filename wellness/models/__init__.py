"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for API endpoints
- Response models: Output formatting for API responses
"""
from wellness.models.survey import (
    PersonalInformation,
    SurveyRequest,
    SurveyAnalysis,
    QuestionOut,
    QuestionListResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "PersonalInformation",
    "SurveyRequest",
    "SurveyAnalysis",
    "QuestionOut",
    "QuestionListResponse",
    "HealthResponse",
    "ErrorResponse",
]
