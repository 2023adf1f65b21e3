"""Library configuration using Pydantic Settings.

Configuration is environment-aware:
- LODASH_COMPAT_ENV selects which .env file to load
- Supports: development, testing, production
- Each environment has its own .env.{environment} file in the working directory
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LIB_ENV = os.getenv("LODASH_COMPAT_ENV", "development")

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "production": ".env.production",
}

_env_path = Path.cwd() / ENV_FILE_MAP.get(LIB_ENV, ".env.development")

# Nested BaseSettings don't inherit env_file, so populate os.environ up front.
# Values already exported in the environment win over the file.
if _env_path.is_file():
    from dotenv import load_dotenv

    load_dotenv(_env_path, override=False)


class TimingSettings(BaseSettings):
    """Defaults for the rate-limited wrappers."""

    scheduler: Literal["threading", "asyncio"] = Field(
        "threading",
        description="Timer backend used when a wrapper is built without an explicit scheduler",
    )
    default_wait: float = Field(
        0.0,
        description="Wait in seconds applied when debounce/throttle get no wait argument",
        ge=0.0,
    )

    model_config = SettingsConfigDict(
        env_prefix="TIMING_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging output configuration consumed by configure_logging()."""

    level: str = Field("INFO", description="Root log level name")
    format: Literal["json", "plain"] = Field("json", description="Log line format")
    output: Literal["stdout", "file"] = Field("stdout", description="Log destination")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        0,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(3, description="Rotated files to keep", ge=0)

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Settings container composed from the domain-specific sections."""

    lib_env: str = LIB_ENV
    timing: TimingSettings = Field(default_factory=TimingSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
