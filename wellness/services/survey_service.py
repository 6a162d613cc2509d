"""
Survey Service - Business logic for survey analysis.

This service orchestrates one analysis:
1. Validates contact details (email, then phone)
2. Scores the survey against the injected question set
3. Builds the report prompt
4. Calls the LLM once
5. Returns the report together with the scores

Either a full analysis is returned or an exception is raised; scores are
never returned without a report.
"""
from wellness.core.exceptions import ExternalServiceFailure
from wellness.core.logging_config import get_logger
from wellness.core.validators import validate_contact_details
from wellness.llm.client import LLMClient, LLMError
from wellness.llm.prompts import get_wellness_system_prompt, get_wellness_user_prompt
from wellness.models.survey import SurveyAnalysis, SurveyRequest
from wellness.scoring import QuestionSet, score_survey

logger = get_logger(__name__)


class SurveyService:
    """
    Service for scoring surveys and generating wellness reports.

    Example:
        >>> service = SurveyService(get_question_set(), LLMClient())
        >>> result = service.analyze(request)
        >>> result.wellness_score
        63
    """

    def __init__(
        self,
        questions: QuestionSet,
        llm_client: LLMClient,
        brand_name: str = "Ode Spa",
    ):
        """
        Initialize the survey service.

        Args:
            questions: Question set used for scoring
            llm_client: Client for the text-generation provider
            brand_name: Wellness provider that signs the report
        """
        self.questions = questions
        self.llm_client = llm_client
        self.brand_name = brand_name
        logger.info(f"SurveyService initialized with {len(questions)} questions")

    def analyze(self, request: SurveyRequest) -> SurveyAnalysis:
        """
        Validate, score and analyze a survey submission.

        Args:
            request: Parsed survey request

        Returns:
            SurveyAnalysis with the HTML report and scores

        Raises:
            InvalidEmail: If the email is malformed
            InvalidPhone: If the phone is not 10 digits
            EmptySurvey: If no responses were submitted
            ExternalServiceFailure: If report generation fails for any reason
        """
        info = request.personal_information
        validate_contact_details(info.email, info.phone)

        score = score_survey(self.questions, request.survey_responses)

        user_prompt = get_wellness_user_prompt(info, score, brand_name=self.brand_name)

        try:
            analysis = self.llm_client.generate(
                user_message=user_prompt,
                system_prompt=get_wellness_system_prompt(),
            )
        except LLMError as e:
            logger.error(f"Report generation failed: {e}")
            raise ExternalServiceFailure(details=str(e)) from e
        except Exception as e:
            logger.exception(f"Unexpected error while generating report: {e}")
            raise ExternalServiceFailure(details=str(e)) from e

        scored = sum(1 for answer in score.answers if answer.is_scored)
        logger.info(
            f"Survey analyzed: wellness={score.wellness_score}, "
            f"answers={len(score.answers)}, scored={scored}, "
            f"ignored={len(score.ignored_question_ids)}, report_chars={len(analysis)}"
        )

        return SurveyAnalysis(
            analysis=analysis,
            wellness_score=score.wellness_score,
            max_score=score.max_score,
            total_score=score.total_score,
        )
