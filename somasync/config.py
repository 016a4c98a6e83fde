from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SOMASYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # --- Session defaults (used by the CLI when flags are omitted) ---
    default_session_type: str = "initial"  # "initial", "followup" or "maintenance"
    default_client_name: str = "Unknown Client"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
