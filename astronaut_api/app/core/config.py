"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any configuration.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Astronaut API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only console logging is
    # configured.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  If a relative path is provided, it
    # will be resolved relative to the project root by the ``db``
    # module.  ``:memory:`` is passed through unchanged.
    database_url: str = os.getenv("DATABASE_URL", "astronauts.db")

    # SQLite ignores REFERENCES clauses unless ``PRAGMA foreign_keys`` is
    # turned on for each connection.  When enabled, deleting an image or
    # planet that is still referenced fails at the storage level.
    enforce_foreign_keys: bool = _env_flag("ENFORCE_FOREIGN_KEYS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
