"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- survey.py   : Survey scoring and report endpoints
- health.py   : Health check endpoints
"""
from wellness.api.routes.survey import router as survey_router
from wellness.api.routes.health import router as health_router

__all__ = [
    "survey_router",
    "health_router",
]
