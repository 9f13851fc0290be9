"""Configuration management."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment."""

    # Retry
    file_op_max_attempts: int = 30
    file_op_retry_delay_seconds: float = 0.0
    file_op_retry_backoff: float = 1.0

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
