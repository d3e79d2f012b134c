"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service settings, read from the environment (or a local .env file).
    Chunking limits are not here: they live in the static chunking profiles.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="script-chunker", description="Name reported in startup logs")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    debug: bool = False
    log_level: str = Field(default="INFO", description="Root log level (DEBUG shows per-call chunking details)")

    host: str = Field(default="0.0.0.0", description="Bind address for the console entry point")
    port: int = Field(default=8000, ge=1, le=65535)

    # History store; chunking works without it
    mongo_uri: str = Field(default="mongodb://localhost:27017")
    mongo_database: str = Field(default="script_chunker")
    mongo_connect_timeout_ms: int = Field(default=5000, ge=100)
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100)
    mongo_max_pool_size: int = Field(default=20, ge=1, le=500)

    autosave_delay_seconds: float = Field(default=2.0, ge=0, description="Quiet period before an auto-save fires")
    history_cache_seconds: float = Field(default=5.0, ge=0, description="Lifetime of a cached history listing")
    history_list_limit: int = Field(default=100, ge=1, le=1000, description="Most states one listing returns")


@lru_cache
def get_settings() -> Settings:
    return Settings()
