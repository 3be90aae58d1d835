"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Access Insights"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_sample_sizes_positive(self) -> "Settings":
        for field_name in (
            "chart_sample_rows",
            "chart_prompt_rows",
            "summary_sample_rows",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # Anthropic
    anthropic_api_key: str | None = None
    llm_model: str = "claude-sonnet-4-5"
    llm_timeout: float = 60.0

    # SQL Synthesizer
    sql_temperature: float = 0.2
    sql_max_tokens: int = 2048

    # Explanation Generator
    explanation_temperature: float = 0.0
    explanation_max_tokens: int = 2048

    # Chart Config Synthesizer
    chart_temperature: float = 0.2
    chart_max_tokens: int = 1024
    chart_sample_rows: int = 100
    chart_prompt_rows: int = 5

    # Summary Generator
    summary_temperature: float = 0.2
    summary_max_tokens: int = 512
    summary_sample_rows: int = 50

    # CORS
    allowed_origins: list[str] = ["*"]

    # Data store (ODBC, e.g. "DRIVER={PostgreSQL Unicode};SERVER=...;DATABASE=...")
    db_connection_string: str = ""
    db_query_timeout: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
