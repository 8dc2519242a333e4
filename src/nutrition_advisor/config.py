"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_vision_model: str = "gpt-4o"
    openai_estimation_model: str = "gpt-4o-mini"
    estimation_enabled: bool = True
    collaborator_timeout_seconds: float = 8.0
    estimation_cache_ttl_seconds: int = 3600
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def openai_configured(self) -> bool:
        """Whether an OpenAI API key is available."""
        return bool(self.openai_api_key and self.openai_api_key.strip())
