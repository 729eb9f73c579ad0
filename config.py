# config.py
# Role: Runtime settings for the agency directory app.
#       Loads .env (if present) and environment variables into a frozen Settings object.
#       The app factory in main.py receives one of these; tests build their own.

"""
Settings for the agency directory.

- CSV files are read from DATA_DIR (default: <project_root>/data)
- Identity is forwarded by the upstream identity provider in request headers
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Base directory of the project (where this module lives)
BASE_DIR = Path(__file__).resolve().parent

# Default folder holding agencies_agency_rows.csv / contacts_contact_rows.csv
DEFAULT_DATA_DIR = BASE_DIR / "data"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        data_dir: folder the CSV resources are read from.
        auth_user_header: request header carrying the signed-in identity.
        auth_status_header: request header the provider sets to "pending"
                            while the session is still being resolved.
        sign_in_url: where unauthenticated users are sent.
        dashboard_url: where authenticated users land.
        log_level: root logger level name.
    """
    data_dir: Path = DEFAULT_DATA_DIR
    auth_user_header: str = "X-Auth-User"
    auth_status_header: str = "X-Auth-Status"
    sign_in_url: str = "/sign-in"
    dashboard_url: str = "/dashboard/agencies"
    log_level: str = "INFO"

    def __post_init__(self):
        # Accept plain strings for data_dir (env values, tests)
        object.__setattr__(self, "data_dir", Path(self.data_dir))
        object.__setattr__(self, "log_level", str(self.log_level).strip().upper())

        if not self.auth_user_header.strip():
            raise ValueError("AUTH_USER_HEADER must not be empty")
        if not self.auth_status_header.strip():
            raise ValueError("AUTH_STATUS_HEADER must not be empty")
        for name, url in (("SIGN_IN_URL", self.sign_in_url), ("DASHBOARD_URL", self.dashboard_url)):
            if not url.startswith("/"):
                raise ValueError(f"{name} must be an absolute path, got {url!r}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def load_settings() -> Settings:
    """
    Build Settings from the environment (after loading .env from the project root).
    """
    load_dotenv(BASE_DIR / ".env")

    return Settings(
        data_dir=Path(_env("DATA_DIR", str(DEFAULT_DATA_DIR))),
        auth_user_header=_env("AUTH_USER_HEADER", "X-Auth-User"),
        auth_status_header=_env("AUTH_STATUS_HEADER", "X-Auth-Status"),
        sign_in_url=_env("SIGN_IN_URL", "/sign-in"),
        dashboard_url=_env("DASHBOARD_URL", "/dashboard/agencies"),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
