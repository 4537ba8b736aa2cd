from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from tasksplit.pipeline_config import RemoteProvider, SupportedModel


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # Remote extraction service
    remote_api_key: str = ""
    remote_provider: RemoteProvider = RemoteProvider.OPENAI_COMPATIBLE
    remote_endpoint: str = "https://api.cursor.sh/v1/chat/completions"
    remote_max_tokens: int = 2000
    remote_temperature: float = 0.3
    request_timeout: float = 60.0

    # Anthropic provider (used when remote_provider == "anthropic")
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"

    # Extraction defaults
    default_model: SupportedModel = SupportedModel.GPT_4
    default_context: str = (
        "Enterprise application development with compliance and security requirements"
    )

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def credential(self) -> str:
        """The API key for whichever remote provider is configured."""
        if self.remote_provider is RemoteProvider.ANTHROPIC:
            return self.anthropic_api_key
        return self.remote_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
