"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables when it is instantiated.  Defaults are provided
for all fields, so the service starts without any configuration at
all.  ``run.py`` loads a ``.env`` file (if present) before settings
are built, which makes local overrides convenient.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

# resource_api/app/core/config.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

MEMORY_DATABASE = ":memory:"


def _env(name: str, default: str) -> Callable[[], str]:
    return lambda: os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=_env("PROJECT_NAME", "Resource API"))
    api_version: str = field(default_factory=_env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=_env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    log_format: str = field(
        default_factory=_env("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    # Per-request lines from uvicorn; off leaves only service events.
    access_log: bool = field(
        default_factory=lambda: os.getenv("ACCESS_LOG", "true").lower() in {"1", "true", "yes"}
    )

    # Directory holding the SQLite file.  Relative paths are resolved
    # against the repository root.  ``:memory:`` selects a private
    # in-memory store that lives as long as the process.
    db_path: str = field(default_factory=_env("DB_PATH", "data"))
    db_filename: str = field(default_factory=_env("DB_FILENAME", "database.sqlite"))

    host: str = field(default_factory=_env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))


def get_database_path(config: Settings) -> str:
    """Compute the location of the SQLite database file.

    If ``config.db_path`` is ``:memory:`` the in-memory marker is
    returned unchanged.  Otherwise the file name is appended to the
    configured directory, which is resolved relative to the project
    root when it is not absolute.
    """
    if config.db_path == MEMORY_DATABASE:
        return MEMORY_DATABASE
    directory = Path(config.db_path)
    if not directory.is_absolute():
        directory = PROJECT_ROOT / directory
    return str((directory / config.db_filename).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
