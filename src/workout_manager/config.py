"""Configuration settings for the workout manager API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Remote workout document
    REMOTE_FETCH_ENABLED: bool = False
    WORKOUT_SOURCE_URL: str | None = None
    WORKOUT_SOURCE_AUTH: str | None = None  # base64 "user:password"
    REMOTE_FETCH_TIMEOUT: float = 10.0
    REMOTE_FETCH_MAX_ATTEMPTS: int = 3

    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Remote workout document
        self.REMOTE_FETCH_ENABLED = os.getenv("REMOTE_FETCH_ENABLED", "false").lower() == "true"
        self.WORKOUT_SOURCE_URL = os.getenv("WORKOUT_SOURCE_URL") or None
        self.WORKOUT_SOURCE_AUTH = os.getenv("WORKOUT_SOURCE_AUTH") or None
        self.REMOTE_FETCH_TIMEOUT = float(os.getenv("REMOTE_FETCH_TIMEOUT", "10"))
        self.REMOTE_FETCH_MAX_ATTEMPTS = int(os.getenv("REMOTE_FETCH_MAX_ATTEMPTS", "3"))

        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
