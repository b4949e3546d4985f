"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration.  In a production deployment you
should at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Art Exhibition API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only console logging is used.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "change_me"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    )

    # Populate the catalog with the demo galleries and artworks at startup.
    seed_sample_data: bool = field(default_factory=lambda: _env_flag("SEED_SAMPLE_DATA", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests build their own
# ``Settings`` instances instead.
settings = Settings()
