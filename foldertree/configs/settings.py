import sys
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

from foldertree.utils.logging import get_logger

logger = get_logger(__name__)


class AppSettings(BaseSettings):
    APP_NAME: str = "FolderTree API"
    APP_ENV: Literal["dev", "prod"] = "dev"
    APP_DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="APP_")


class CORSSettings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://127.0.0.1:5173", "http://localhost:5173"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: list[str] = ["*"]
    CORS_HEADERS: list[str] = ["*"]
    CORS_EXPOSE_HEADERS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CORS_")


class MongoSettings(BaseSettings):
    MONGO_URL: str = ""
    MONGO_DB: str = "foldertree"
    MONGO_CONNECT_TIMEOUT_MS: int = 30000

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MONGO_")


class SentrySettings(BaseSettings):
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.2
    SENTRY_SEND_DEFAULT_PII: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SENTRY_")


class Settings(AppSettings, CORSSettings, MongoSettings, SentrySettings):
    RELEASE: str | None = None
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()


def ensure_required_settings(current: Settings = settings) -> None:
    """Exit the process when a setting the service cannot run without is missing"""
    if not current.MONGO_URL:
        logger.error("MONGO_URL must not be undefined")
        sys.exit(1)
