"""Configuration loader for the chain client."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChainClientConfig(BaseSettings):
    """Pydantic-based configuration model."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    chain_api_url: str = "http://127.0.0.1:8332"
    chain_api_key: str = ""
    chain_api_timeout: int = 10

    chain_log_level: str = "INFO"

    @field_validator("chain_api_url", mode="before")
    @classmethod
    def strip_url(cls, value: object) -> str:
        """Drop surrounding whitespace and trailing slashes from the base URL."""

        value_str = str(value or "").strip().rstrip("/")
        if not value_str:
            raise ValueError("CHAIN_API_URL must not be blank")
        return value_str

    @field_validator("chain_api_timeout")
    @classmethod
    def positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("CHAIN_API_TIMEOUT must be positive")
        return value


def load_config() -> ChainClientConfig:
    """Load configuration from environment variables."""

    return ChainClientConfig()
