"""Type-safe environment configuration using Pydantic Settings."""

from typing import Final, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION: Final[str] = "1.2.0"
USER_AGENT: Final[str] = f"hn-client/{VERSION}"

DEFAULT_SEARCH_BASE_URL: Final[str] = "https://hn.algolia.com/api/v1"
DEFAULT_ITEM_API_BASE_URL: Final[str] = "https://hacker-news.firebaseio.com/v0/"


class Settings(BaseSettings):
    """
    Client configuration loaded from environment variables.

    Every field has a default so the library works without any environment.
    Explicit constructor arguments on the clients take precedence.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    HN_SEARCH_BASE_URL: str = Field(
        default=DEFAULT_SEARCH_BASE_URL,
        description="Root URL of the Algolia search API"
    )

    HN_ITEM_API_BASE_URL: str = Field(
        default=DEFAULT_ITEM_API_BASE_URL,
        description="Root URL of the Firebase item API"
    )

    HN_DEBUG: bool = Field(
        default=False,
        description="Log request URLs and response summaries"
    )

    HN_OBJ_DEBUG: bool = Field(
        default=False,
        description="Log construction of each normalized hit"
    )

    HN_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds, unset means no timeout",
        gt=0
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    @field_validator("HN_SEARCH_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended with a leading slash."""
        return v.rstrip("/")


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the client settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The client settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
