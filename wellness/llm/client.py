"""
LLM Client for Groq API integration.

This module provides a thin interface to the Groq chat completions API.
It handles:
- API client initialization
- Request/response handling
- Error handling and logging

One request, one provider call: the SDK is configured with
max_retries=0 and every failure surfaces as a single LLMError.
"""
from typing import Any, Dict, List, Optional

from groq import Groq

from wellness.core.config import Settings, get_settings
from wellness.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Client for generating text with a Groq-hosted model.

    Example:
        >>> client = LLMClient()
        >>> html = client.generate("Write a short wellness report", system_prompt="You are a coach.")
    """

    def __init__(self, settings: Optional[Settings] = None, groq_client: Optional[Any] = None):
        """
        Initialize the client.

        Args:
            settings: Settings to use. Defaults to the cached application settings.
            groq_client: Pre-built Groq client (tests pass a stub here).
        """
        self.settings = settings or get_settings()

        self.client = groq_client or Groq(
            api_key=self.settings.groq_api_key,
            max_retries=0,
            timeout=self.settings.llm_timeout_seconds,
        )

        self.model = self.settings.llm_model
        self.temperature = self.settings.llm_temperature
        self.max_tokens = self.settings.llm_max_tokens

        logger.info(f"LLM client initialized (Groq, model={self.model})")

    def generate(self, user_message: str, system_prompt: Optional[str] = None) -> str:
        """
        Generate a completion for a single system + user exchange.

        Args:
            user_message: The user prompt
            system_prompt: Optional system instruction

        Returns:
            Generated text

        Raises:
            LLMError: If the provider call fails or returns no content
        """
        messages = self._build_messages(user_message, system_prompt)

        logger.debug(
            f"Calling {self.model}: prompt_chars={len(user_message)}, "
            f"max_tokens={self.max_tokens}, temperature={self.temperature}"
        )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error(f"LLM request failed ({self.model}): {e}")
            raise LLMError(f"LLM request failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Malformed LLM response: {e}")
            raise LLMError("Malformed LLM response") from e

        if not content:
            logger.error("LLM returned an empty response")
            raise LLMError("LLM returned an empty response")

        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.info(
                f"LLM usage: prompt_tokens={usage.prompt_tokens}, "
                f"completion_tokens={usage.completion_tokens}"
            )

        return content

    def _build_messages(self, user_message: str, system_prompt: Optional[str]) -> List[Dict[str, str]]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_message})
        return messages


class LLMError(Exception):
    """
    Custom exception for LLM-related errors.

    Wraps network, authentication and malformed-response errors into a
    single type for the service layer.
    """
    pass
