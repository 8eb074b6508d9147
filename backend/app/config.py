from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Import Export Hub API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "https://import-export-hub-shahriarazad.netlify.app",
    ]

    # Execution mode: "standalone" binds a port, "serverless" only exports the ASGI app
    run_mode: Literal["standalone", "serverless"] = "standalone"
    host: str = "0.0.0.0"
    port: int = 5001

    # MongoDB
    mongo_uri: str = ""
    mongo_db_name: str = "importExportHub"

    latest_products_limit: int = Field(6, ge=1)

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_mongo: str = "WARNING"         # pymongo driver
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
