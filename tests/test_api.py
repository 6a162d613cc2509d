"""End-to-end tests for the HTTP surface with a fake LLM."""
from concurrent.futures import ThreadPoolExecutor
import time

import pytest

from wellness.api.routes import survey as survey_routes
from wellness.core.rate_limiter import RateLimiter
from wellness.services.survey_service import SurveyService

ANALYZE_URL = "/api/analyze-survey"


def _body(personal_information, responses):
    return {"personalInformation": personal_information, "surveyResponses": responses}


class TestAnalyzeSurvey:

    def test_success(self, client, fake_llm, personal_information):
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "d", "q2": "a"}))

        assert response.status_code == 200
        assert response.json() == {
            "analysis": fake_llm.reply,
            "wellnessScore": 63,
            "maxScore": 8,
            "totalScore": 5,
        }
        assert len(fake_llm.calls) == 1

    def test_full_survey(self, client, questions, personal_information):
        responses = {q.id: "c" for q in questions}
        response = client.post(ANALYZE_URL, json=_body(personal_information, responses))

        data = response.json()
        assert data["totalScore"] == 39
        assert data["maxScore"] == 52
        assert data["wellnessScore"] == 75

    @pytest.mark.parametrize("email", ["janeexample.com", "jane@example", "", "jane@ex.c"])
    def test_invalid_email(self, client, fake_llm, personal_information, email):
        personal_information["email"] = email
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email format"
        assert fake_llm.calls == []

    @pytest.mark.parametrize("phone", ["123456789", "12345678901", "12345abcde", "(555)123-4567"])
    def test_invalid_phone(self, client, fake_llm, personal_information, phone):
        personal_information["phone"] = phone
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid phone number format"
        assert fake_llm.calls == []

    def test_email_error_wins_over_phone_error(self, client, personal_information):
        personal_information["email"] = "bad"
        personal_information["phone"] = "bad"
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.json()["code"] == "invalid_email"

    def test_missing_contact_fields_fail_validation(self, client, fake_llm):
        response = client.post(ANALYZE_URL, json=_body({"name": "Jane"}, {"q1": "a"}))

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_email"

    def test_empty_survey(self, client, fake_llm, personal_information):
        response = client.post(ANALYZE_URL, json=_body(personal_information, {}))

        assert response.status_code == 400
        assert response.json()["code"] == "empty_survey"
        assert fake_llm.calls == []

    def test_unknown_question_inflates_max_score(self, client, fake_llm, personal_information):
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "b", "q99": "d"}))

        data = response.json()
        assert response.status_code == 200
        assert data["totalScore"] == 2
        assert data["maxScore"] == 8
        assert data["wellnessScore"] == 25
        assert fake_llm.calls[0]["user_message"].count("Answer:") == 1

    @pytest.mark.parametrize("letter", ["e", ""])
    def test_invalid_letter_inflates_max_score(self, client, personal_information, letter):
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "d", "q2": letter}))

        data = response.json()
        assert response.status_code == 200
        assert data["totalScore"] == 4
        assert data["maxScore"] == 8
        assert data["wellnessScore"] == 50

    def test_prompt_reaches_llm(self, client, fake_llm, personal_information):
        client.post(ANALYZE_URL, json=_body(personal_information, {"q9": "d"}))

        prompt = fake_llm.calls[0]["user_message"]
        assert "How long does it usually take you to fall asleep?\nAnswer: Under 15 minutes" in prompt
        assert "Wellness Score: 100/100" in prompt
        assert "- Name: Jane Doe" in prompt

    def test_llm_failure_returns_generic_500(self, make_client, failing_llm, personal_information):
        client = make_client(failing_llm)
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to analyze survey"
        assert data["details"] is None
        assert "wellnessScore" not in data

    def test_missing_personal_information_is_bad_request(self, client, fake_llm):
        response = client.post(ANALYZE_URL, json={"surveyResponses": {"q1": "a"}})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
        assert fake_llm.calls == []

    def test_null_name_and_gender_are_accepted(self, client, fake_llm, personal_information):
        personal_information["name"] = None
        personal_information["gender"] = None
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 200
        prompt = fake_llm.calls[0]["user_message"]
        assert "- Name: \n" in prompt
        assert "- Gender: \n" in prompt
        assert "None" not in prompt

    def test_boolean_age_keeps_raw_value(self, client, fake_llm, personal_information):
        personal_information["age"] = True
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 200
        prompt = fake_llm.calls[0]["user_message"]
        assert "- Age: true\n" in prompt
        assert "- Age: 1\n" not in prompt

    def test_numeric_phone_is_accepted(self, client, personal_information):
        personal_information["phone"] = 5551234567
        response = client.post(ANALYZE_URL, json=_body(personal_information, {"q1": "a"}))

        assert response.status_code == 200

    def test_rate_limit(self, client, personal_information, monkeypatch):
        limiter = RateLimiter(requests_per_minute=2)
        monkeypatch.setattr(survey_routes, "get_rate_limiter", lambda: limiter)
        body = _body(personal_information, {"q1": "a"})

        first = client.post(ANALYZE_URL, json=body)
        second = client.post(ANALYZE_URL, json=body)
        third = client.post(ANALYZE_URL, json=body)

        assert first.status_code == 200
        assert first.headers["X-RateLimit-Remaining"] == "1"
        assert second.status_code == 200
        assert third.status_code == 429
        assert third.json()["code"] == "rate_limit_exceeded"
        assert int(third.headers["Retry-After"]) >= 1


class TestOtherEndpoints:

    def test_root_serves_survey_form(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Wellness Survey" in response.text

    def test_list_questions(self, client):
        response = client.get("/api/questions")

        data = response.json()
        assert data["count"] == 13
        assert data["questions"][0] == {
            "id": "q1",
            "text": "How often do you experience persistent muscle tension or stiffness?",
            "options": ["Rarely", "Occasionally", "Frequently", "Constantly"],
        }

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["question_count"] == 13

    def test_ready(self, client):
        assert client.get("/health/ready").json()["status"] == "ready"

    def test_security_and_timing_headers(self, client):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "X-Response-Time" in response.headers


def test_survey_service_created_once_across_threads(monkeypatch):
    created = []

    class SlowSurveyService(SurveyService):
        def __init__(self, *args, **kwargs):
            time.sleep(0.05)
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr(survey_routes, "SurveyService", SlowSurveyService)
    monkeypatch.setattr(survey_routes, "LLMClient", lambda settings: object())
    monkeypatch.setattr(survey_routes, "_survey_service", None)

    with ThreadPoolExecutor(max_workers=8) as pool:
        services = list(pool.map(lambda _: survey_routes.get_survey_service(), range(8)))

    assert len(created) == 1
    assert all(service is created[0] for service in services)
