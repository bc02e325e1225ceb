from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Email delivery
    email_backend: Literal["http", "log"] = "http"
    smtp_base_url: str = "http://smtp-mock:8025"
    email_from: str | None = None
    email_subject: str = "Your OTP Code"
    http_timeout_seconds: float = 10.0

    # OTP policy
    otp_ttl_seconds: int = 300
    otp_sweep_interval_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
