"""Application-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "static"


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Overlay / admin pages
    static_dir: Path = Field(
        default=DEFAULT_STATIC_DIR,
        description="Directory holding overlay.html and admin.html.",
    )

    # Twilio (Voice SDK)
    twilio_account_sid: str | None = Field(default=None)
    twilio_auth_token: str | None = Field(default=None)
    twilio_app_sid: str | None = Field(
        default=None,
        description="TwiML application SID the browser client dials through.",
    )
    twilio_caller_id: str = Field(default="+447480569210", description="E.164 caller id.")
    twilio_dial_number: str = Field(default="916353260512")
    twilio_record_calls: bool = Field(default=True)
    twilio_token_ttl_seconds: int = Field(default=3600, gt=0)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
