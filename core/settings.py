# core/settings.py
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PWCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Page
    page_title: str = Field(default="Smart Password Checker")
    page_icon: str = Field(default="🔐")

    # Logging
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None)

    # Copy notification
    notification_duration_ms: int = Field(default=2500)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
