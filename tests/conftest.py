"""
Shared test fixtures.

Environment defaults are set before any wellness module is imported so
settings load without a real .env file. The LLM is always replaced by
FakeLLMClient; no test talks to the network.
"""
import os

os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "0")
os.environ.setdefault("ENABLE_AUDIT_LOGGING", "true")

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from wellness.api.main import app
from wellness.api.routes.survey import get_survey_service
from wellness.core.rate_limiter import reset_rate_limiter
from wellness.llm.client import LLMError
from wellness.scoring import get_question_set
from wellness.services.survey_service import SurveyService


class FakeLLMClient:
    """Records every generate() call and returns a canned report."""

    def __init__(self, reply: str = "<h1>Hello Jane</h1><p>Your report.</p>", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    def generate(self, user_message: str, system_prompt: Optional[str] = None) -> str:
        self.calls.append({"user_message": user_message, "system_prompt": system_prompt})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def failing_llm() -> FakeLLMClient:
    return FakeLLMClient(error=LLMError("connection refused"))


@pytest.fixture
def questions():
    return get_question_set()


@pytest.fixture
def personal_information() -> dict:
    return {
        "name": "Jane Doe",
        "age": "34",
        "gender": "Female",
        "email": "jane.doe@example.com",
        "phone": "5551234567",
    }


@pytest.fixture
def make_client(questions):
    """Build a TestClient whose survey service uses the given LLM client."""
    def _make(llm, **kwargs) -> TestClient:
        service = SurveyService(questions=questions, llm_client=llm, brand_name="Ode Spa")
        app.dependency_overrides[get_survey_service] = lambda: service
        return TestClient(app, **kwargs)

    yield _make

    app.dependency_overrides.clear()
    reset_rate_limiter()


@pytest.fixture
def client(make_client, fake_llm) -> TestClient:
    return make_client(fake_llm)
