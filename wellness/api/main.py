"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration and the static survey form
3. Middleware configuration (audit, security headers, CORS)
4. Exception handlers (custom exceptions, malformed bodies)
5. Startup/shutdown events

Run with: uvicorn wellness.api.main:app --reload
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from wellness import __version__
from wellness.core.config import get_settings
from wellness.core.logging_config import setup_logging, get_logger
from wellness.core.exceptions import (
    ExternalServiceFailure,
    RateLimitExceeded,
    WellnessException,
)
from wellness.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from wellness.api.routes import survey_router, health_router
from wellness.scoring import get_question_set


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, Path(settings.log_dir))
logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the question set once at startup so the first request does
    not pay for it.
    """
    # Startup
    questions = get_question_set()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM Model: {settings.llm_model}")
    logger.info(f"Question set: {len(questions)} questions")
    logger.info(f"Rate Limit: {settings.rate_limit_per_minute} req/min")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")

    yield  # Application runs here

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title="Wellness Survey API",
    description="""
    Scores a 13-question wellness survey and generates a personalized
    HTML wellness report with a language model.

    ## Features

    - **Deterministic Scoring**: 0-100 wellness score from weighted answers
    - **Contact Validation**: Strict email and 10-digit phone checks
    - **Personalized Reports**: One LLM call per submission, no retries
    - **Rate Limiting**: Abuse prevention per client
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(SecurityHeadersMiddleware)

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers={"Retry-After": str(exc.retry_after)}
    )


@app.exception_handler(ExternalServiceFailure)
async def external_failure_handler(request: Request, exc: ExternalServiceFailure):
    """Handle report generation failures; provider details stay in the logs."""
    content = exc.to_dict()
    if not settings.is_development():
        content["details"] = None
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(WellnessException)
async def wellness_exception_handler(request: Request, exc: WellnessException):
    """Handle all custom exceptions (validation errors included)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as a 400 with a plain error message."""
    logger.info(f"Malformed request body: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "code": "invalid_request",
            "details": "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Detailed error information is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "Failed to analyze survey",
            "code": "internal_error",
            "details": str(exc) if settings.is_development() else None,
        }
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(survey_router)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# ============================================================
# Root Endpoint
# ============================================================

@app.get("/", include_in_schema=False)
async def root():
    """Serve the survey form."""
    return FileResponse(STATIC_DIR / "survey.html")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server is running on port {settings.port}")
    logger.info(f"Visit http://localhost:{settings.port} to take the survey")

    uvicorn.run(
        "wellness.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )
