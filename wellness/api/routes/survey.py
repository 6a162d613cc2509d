"""
Survey Routes - API endpoints for the wellness questionnaire.

- POST /api/analyze-survey : Score a submission and generate the report
- GET  /api/questions      : List the questionnaire for the survey form

The analyze handler is a plain (sync) function so FastAPI runs the
blocking LLM call in its thread pool.
"""
from datetime import datetime
import threading
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from wellness.core.config import get_settings
from wellness.core.exceptions import RateLimitExceeded
from wellness.core.logging_config import get_logger
from wellness.core.rate_limiter import get_rate_limiter
from wellness.llm.client import LLMClient
from wellness.models.survey import (
    ErrorResponse,
    QuestionListResponse,
    QuestionOut,
    SurveyAnalysis,
    SurveyRequest,
)
from wellness.scoring import QuestionSet, get_question_set
from wellness.services.survey_service import SurveyService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Survey"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid submission"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Analysis failed"}
    }
)

# Initialize services
_survey_service: Optional[SurveyService] = None
_survey_service_lock = threading.Lock()


def get_survey_service() -> SurveyService:
    """
    Get or create the survey service instance.

    Sync handlers run in a thread pool, so creation is guarded by a lock
    to make sure concurrent first requests share one service.
    """
    global _survey_service
    if _survey_service is None:
        with _survey_service_lock:
            if _survey_service is None:
                settings = get_settings()
                _survey_service = SurveyService(
                    questions=get_question_set(),
                    llm_client=LLMClient(settings),
                    brand_name=settings.brand_name,
                )
    return _survey_service


def enforce_rate_limit(request: Request, response: Response) -> None:
    """Apply the per-client rate limit and expose it in response headers."""
    rate_limiter = get_rate_limiter()
    if not rate_limiter.enabled:
        return

    client_ip = request.client.host if request.client else "unknown"
    is_allowed, remaining = rate_limiter.is_allowed(client_ip)

    response.headers["X-RateLimit-Limit"] = str(rate_limiter.limit)
    response.headers["X-RateLimit-Remaining"] = str(remaining)

    if not is_allowed:
        reset_time = rate_limiter.get_reset_time(client_ip)
        retry_after = max(1, int((reset_time - datetime.utcnow()).total_seconds()))
        raise RateLimitExceeded(retry_after=retry_after)


@router.post(
    "/analyze-survey",
    response_model=SurveyAnalysis,
    summary="Score a survey and generate a wellness report",
    description="""
    Validate the applicant's contact details, score the 13-question
    wellness survey and ask the language model for a personalized
    HTML report.

    **Scoring:**
    - Each answer letter a-d is worth 1-4 points
    - maxScore = 4 x number of submitted answers (including unknown ones)
    - wellnessScore = round(100 x totalScore / maxScore)

    **Errors:**
    - 400: invalid email, invalid phone, empty survey or malformed body
    - 500: the report could not be generated
    """,
    dependencies=[Depends(enforce_rate_limit)],
)
def analyze_survey(
    payload: SurveyRequest,
    service: SurveyService = Depends(get_survey_service),
) -> SurveyAnalysis:
    """Process one survey submission."""
    logger.info(f"Analyzing survey: entries={len(payload.survey_responses)}")
    return service.analyze(payload)


@router.get(
    "/questions",
    response_model=QuestionListResponse,
    summary="List the wellness questionnaire",
)
async def list_questions(
    questions: QuestionSet = Depends(get_question_set),
) -> QuestionListResponse:
    """Return every question with its four options, in order."""
    return QuestionListResponse(
        questions=[QuestionOut(**question.to_dict()) for question in questions],
        count=len(questions),
    )
