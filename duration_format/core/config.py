"""Library configuration settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from DURATION_FORMAT_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="DURATION_FORMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING")

    # Formatting
    default_separator: str = Field(default=", ")


# Global settings instance
settings = Settings()
