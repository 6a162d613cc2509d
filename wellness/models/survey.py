"""
Request and Response models for the Survey API.

These Pydantic models define the contract between the survey form and
the server. Field names use the camelCase aliases the form sends
(personalInformation, surveyResponses, wellnessScore, ...).

Email and phone are plain strings here; their format is checked by
wellness.core.validators (email first, then phone).
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonalInformation(BaseModel):
    """
    Applicant details submitted with the survey.

    Only email and phone are validated; name, age and gender are
    free text kept exactly as sent (null, numbers and booleans included).
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Any = Field(default="", description="Applicant name, used in the greeting")
    age: Any = Field(default="", description="Free-form age")
    gender: Any = Field(default="", description="Free-form gender")
    email: str = Field(default="", description="Contact email (local@domain.tld)")
    phone: str = Field(default="", description="Contact phone, exactly 10 digits")


class SurveyRequest(BaseModel):
    """
    Request model for POST /api/analyze-survey.

    surveyResponses maps question ids to answer letters. Unknown ids and
    letters outside a-d are accepted and simply not scored.
    """
    model_config = ConfigDict(populate_by_name=True)

    personal_information: PersonalInformation = Field(
        ...,
        alias="personalInformation",
        description="Applicant details"
    )
    survey_responses: Dict[str, Any] = Field(
        default_factory=dict,
        alias="surveyResponses",
        description="Question id -> answer letter (a-d)",
        examples=[{"q1": "d", "q2": "a"}]
    )


class SurveyAnalysis(BaseModel):
    """Response model for a successful survey analysis."""
    model_config = ConfigDict(populate_by_name=True)

    analysis: str = Field(..., description="HTML-formatted wellness report")
    wellness_score: int = Field(..., alias="wellnessScore", ge=0, le=100)
    max_score: int = Field(..., alias="maxScore", ge=0)
    total_score: int = Field(..., alias="totalScore", ge=0)


class QuestionOut(BaseModel):
    """A question as exposed to the survey form."""
    id: str
    text: str
    options: List[str]


class QuestionListResponse(BaseModel):
    """Response model for GET /api/questions."""
    questions: List[QuestionOut]
    count: int


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    question_count: int
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    code: str
    details: Optional[str] = None
