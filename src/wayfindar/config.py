# src/wayfindar/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

DEVELOPMENT_ENVS = {"dev", "development"}


class Settings(BaseSettings):
    # Tell Pydantic to load from .env
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",   # ignore unknown env vars
    )

    # Environment variables (with defaults as fallback)
    DATABASE_URL: str = Field(default="sqlite:///./wayfindar.db")
    LOG_LEVEL: str = Field(default="INFO")
    APP_ENV: str = Field(default="dev")

    # Session cookie (login / destination tracking)
    SESSION_SECRET_KEY: str = Field(default="change-me")
    SESSION_COOKIE_NAME: str = Field(default="WayFindAR.Session")
    SESSION_IDLE_TIMEOUT_MINUTES: int = Field(default=30, gt=0)

    SEED_ON_STARTUP: bool = Field(default=True)
    STATIC_DIR: str = Field(default="static")

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() in DEVELOPMENT_ENVS


# Instantiate settings once, so you can import anywhere
settings = Settings()
