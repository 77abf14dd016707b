"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ErrorCorrectionLevel = Literal["L", "M", "Q", "H"]


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=(Path(__file__).resolve().parent.parent / ".env"), env_file_encoding="utf-8")

    app_name: str = Field(default="einvoice-qr")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    api_key: str = Field(default="dev-secret-key")
    utc_offset: str = Field(default="+03:00", pattern=r"^[+-][0-9]{2}:[0-9]{2}$")
    strict_dates: bool = Field(default=False, description="Reject dates that match no known shape")
    error_correction: ErrorCorrectionLevel = Field(default="M")
    qr_box_size: int = Field(default=10, ge=1, le=50)
    qr_border: int = Field(default=4, ge=0, le=20)
    output_dir: Path = Field(default=Path("out"))
    output_filename: str = Field(default="zatca_qr.png")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
