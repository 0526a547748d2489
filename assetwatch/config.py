"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Data ──────────────────────────────────────────────────────────────
    FLEET_FILE: str = "fleet.yaml"

    # Pin "today" for reports (YYYY-MM-DD); unset means the real date
    AS_OF_DATE: Optional[str] = None

    # ── Web ───────────────────────────────────────────────────────────────
    SECRET_KEY: str = "dev-secret-key-change-in-prod"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
