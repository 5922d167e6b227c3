from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Boundaries
    LOG_FAILURES: bool = True  # Log a validation_failed event when a boundary parse fails
    LOG_MAX_ERRORS: int = Field(default=10, ge=0)  # Errors included in a failure event

    model_config = SettingsConfigDict(env_prefix="FORMVERIFY_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
