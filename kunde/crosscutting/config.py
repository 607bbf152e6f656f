"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults for local development

Collaborators:
  - api/main.py: reads settings for CORS, body limit and dev seed
  - container.py: reads settings for the message locale
  - crosscutting/logger.py: LOG_LEVEL / LOG_JSON

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.messages import DEFAULT_LOCALE, SUPPORTED_LOCALES

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        log_level: Root level for the "kunde" logger (default: INFO)
        log_json: Emit one JSON object per line (default: True)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        max_body_bytes: Max request body size (default: 1MB)
        messages_locale: Locale of constraint messages, de|en (default: de)
        dev_seed_demo: Seed sample Kunden at startup (default: False)
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False

    # Security - Hardening
    max_body_bytes: int = 1024 * 1024  # 1MB

    # Validation messages
    messages_locale: str = DEFAULT_LOCALE

    # Demo Seed (sample Kunden)
    dev_seed_demo: bool = False

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("max_body_bytes")
    @classmethod
    def max_body_bytes_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_body_bytes must be greater than 0")
        return v

    @field_validator("messages_locale")
    @classmethod
    def messages_locale_supported(cls, v: str) -> str:
        locale = (v or DEFAULT_LOCALE).strip().lower()
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"messages_locale must be one of {sorted(SUPPORTED_LOCALES)}"
            )
        return locale

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
