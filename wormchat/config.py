"""Application configuration with environment variable loading.

Pydantic-based settings for the backend connection.
Mirrors the flat ``ApiBaseUrl`` / ``ApiKey`` pair the backend deployment uses.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class AppSettings(BaseModel):
    """Configuration for the chat backend connection.

    Attributes:
        api_base_url: Backend base URL (empty for same origin as the page).
        api_key: Functions key sent as ``x-functions-key`` (empty to omit).
        request_timeout: Seconds to wait for the backend before failing.
    """

    # Values read from the environment go through the same validators
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", ""),
        description="Backend base URL (empty for same origin)",
    )
    api_key: str = Field(
        default_factory=lambda: os.getenv("API_KEY", ""),
        description="Functions key for the backend",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("REQUEST_TIMEOUT", "120"),
        gt=0.0,
        description="Backend request timeout in seconds",
    )

    @field_validator("api_base_url", "api_key")
    @classmethod
    def strip_value(cls, v: str) -> str:
        """Strip surrounding whitespace so blank values count as unset."""
        return v.strip()

    @field_validator("api_base_url")
    @classmethod
    def drop_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_settings() -> AppSettings:
    """Create application settings from environment.

    Returns:
        Configured AppSettings instance.

    Raises:
        pydantic.ValidationError: If a setting is out of range.
    """
    return AppSettings()
