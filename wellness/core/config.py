"""
Configuration management via environment variables.

This module loads configuration from the .env file nearest the working
directory using python-dotenv.
All configuration values are accessed through the Settings class.

The Groq API key is the only required value; everything else has a
sensible default for local development.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv


def load_environment() -> Optional[str]:
    """
    Load the nearest .env file, searching upward from the working directory.

    Variables already set in the process environment win over .env values.

    Returns:
        Path of the loaded .env file, or None if none was found
    """
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)
    return path or None


# This must happen before accessing os.environ
load_environment()


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files, relative to the working directory
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        groq_api_key: API key for Groq LLM service
        llm_model: Model identifier used for report generation
        llm_temperature: LLM creativity (0.0 = deterministic, 1.0 = creative)
        llm_max_tokens: Maximum response length
        llm_timeout_seconds: Timeout for a single LLM request
        brand_name: Wellness provider that signs the generated report
        cors_origins: Allowed CORS origins
        rate_limit_per_minute: Analyze requests per client per minute (0 disables)
        enable_audit_logging: Log every request through AuditMiddleware
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: str

    # Server settings
    host: str
    port: int

    # LLM settings
    groq_api_key: str
    llm_model: str
    llm_temperature: float
    llm_max_tokens: int
    llm_timeout_seconds: float

    # Report settings
    brand_name: str

    # Safety settings
    cors_origins: Tuple[str, ...]
    rate_limit_per_minute: int
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _parse_origins(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated origin list, dropping blanks."""
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists. Call get_settings.cache_clear() to re-read the
    environment (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If required environment variables are missing
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "WellnessSurveyAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=_get_env("LOG_DIR", "logs"),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "3000")),

        # LLM
        groq_api_key=_get_env("GROQ_API_KEY"),
        llm_model=_get_env("LLM_MODEL", "llama-3.3-70b-versatile"),
        llm_temperature=float(_get_env("LLM_TEMPERATURE", "0.7")),
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "1000")),
        llm_timeout_seconds=float(_get_env("LLM_TIMEOUT_SECONDS", "60")),

        # Report
        brand_name=_get_env("BRAND_NAME", "Ode Spa"),

        # Safety
        cors_origins=_parse_origins(_get_env("CORS_ORIGINS", "*")),
        rate_limit_per_minute=int(_get_env("RATE_LIMIT_PER_MINUTE", "30")),
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
    )
