"""Application settings loaded from .env file"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, Literal

from src.core.exceptions import ConfigurationError

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables (.env)
    """
    # Logging configuration
    log_level: LOG_LEVEL = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)"
    )
    log_format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s:%(lineno)d - %(message)s",
        description="Default log format (can be customized if needed)"
    )
    log_date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date/time format for logs"
    )
    log_to_file: bool = Field(
        default=False,
        description="If true, enable logging to a file"
    )
    log_file_path: str = Field(
        default="logs/app.log",
        description="Path to log file"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation interval"
    )
    log_file_retention: int = Field(
        default=7,
        ge=1,
        description="Number of days to retain log files"
    )

    # Model provider
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key (OPENAI_API_KEY)"
    )
    replit_openai_api_key: Optional[str] = Field(
        default=None,
        description="Fallback API key used when OPENAI_API_KEY is not set (REPLIT_OPENAI_API_KEY)"
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="Chat completion model used for sentiment analysis"
    )
    provider_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound in seconds for a single completion request"
    )

    # HTTP server
    host: str = Field(
        default="0.0.0.0",
        description="Interface the web server binds to"
    )
    port: int = Field(
        default=7860,
        description="Port the web server listens on"
    )

    # Page client
    api_base_url: str = Field(
        default="http://127.0.0.1:7860",
        description="Base URL the dashboard page uses to reach /api/analyze"
    )
    client_timeout_seconds: float = Field(
        default=90.0,
        gt=0,
        description="Upper bound in seconds for the page-to-proxy request (should exceed the provider timeout)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def resolve_api_key(self) -> str:
        """
        Return the provider credential

        Returns:
            OPENAI_API_KEY if set, otherwise REPLIT_OPENAI_API_KEY

        Raises:
            ConfigurationError: If neither variable holds a non-blank value
        """
        for candidate in (self.openai_api_key, self.replit_openai_api_key):
            if candidate and candidate.strip():
                return candidate.strip()
        raise ConfigurationError(
            message="No API key configured: set OPENAI_API_KEY or REPLIT_OPENAI_API_KEY"
        )

settings = Settings()
