"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .promptpay_encoder import ZeroAmountPolicy


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Service settings loaded from environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="promptqr")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    zero_amount_policy: ZeroAmountPolicy = Field(
        default=ZeroAmountPolicy.FLEXIBLE,
        validation_alias=AliasChoices("PROMPTQR_ZERO_AMOUNT", "ZERO_AMOUNT_POLICY"),
    )
    qr_title: str | None = Field(default=None, description="Caption drawn under rendered codes")
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
