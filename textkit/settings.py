"""Configuration settings from environment variables."""
import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Similarity defaults
    default_substring_length: int = int(os.getenv("TEXTKIT_DEFAULT_SUBSTRING_LENGTH", "3"))
    default_case_sensitive: bool = (
        os.getenv("TEXTKIT_DEFAULT_CASE_SENSITIVE", "false").lower() == "true"
    )

    # Request limits
    max_input_length: int = int(os.getenv("TEXTKIT_MAX_INPUT_LENGTH", "10000"))
    max_sort_items: int = int(os.getenv("TEXTKIT_MAX_SORT_ITEMS", "1000"))

    log_level: str = os.getenv("TEXTKIT_LOG_LEVEL", "INFO")

    class Config:
        """Pydantic config."""

        env_prefix = "TEXTKIT_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()
