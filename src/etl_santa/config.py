"""Configuration objects for the Santa tracker task."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INFO_URL = (
    "https://santa-api.appspot.com/info"
    "?client=web&language=en&fingerprint=&routeOffset=0&streamOffset=0"
)


class Settings(BaseSettings):
    """Runtime configuration pulled from environment variables."""

    debug: bool = Field(
        default=False,
        validation_alias="DEBUG",
        description="Print results in logs",
    )
    info_url: str = Field(default=DEFAULT_INFO_URL, validation_alias="ETL_SANTA_INFO_URL")
    timeout_seconds: float = Field(default=15.0, validation_alias="ETL_SANTA_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


class TaskInput(BaseModel):
    """Options the ETL host asks the operator for."""

    DEBUG: bool = Field(default=False, description="Print results in logs")


class TaskOutput(BaseModel):
    """Metadata attached to emitted features. Santa carries none."""
