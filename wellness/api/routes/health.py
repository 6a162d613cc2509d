"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for load balancer health checks and
container liveness and readiness checks.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from wellness import __version__
from wellness.core.config import get_settings
from wellness.core.logging_config import get_logger
from wellness.models.survey import HealthResponse
from wellness.scoring import QuestionSet, get_question_set

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check(questions: QuestionSet = Depends(get_question_set)) -> HealthResponse:
    """
    Perform a basic health check.

    Verifies that the API is running and responsive. Does not call the
    LLM provider.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        question_count=len(questions),
        timestamp=datetime.utcnow()
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
)
async def readiness_check(questions: QuestionSet = Depends(get_question_set)) -> HealthResponse:
    """
    Perform a readiness check.

    The service is ready once settings load (the Groq API key is present)
    and the question set is built.
    """
    logger.debug("Readiness check requested")

    get_settings()

    return HealthResponse(
        status="ready",
        version=__version__,
        question_count=len(questions),
        timestamp=datetime.utcnow()
    )
