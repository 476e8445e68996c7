"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "SalesTally"
    DB_FILENAME = "salestally.db"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("SALESTALLY_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("SALESTALLY_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("SALESTALLY_DATABASE_URL", self._build_sqlite_url())
        self.API_URL = os.getenv("SALESTALLY_API_URL", "http://127.0.0.1:5000").rstrip("/")
        self.API_TIMEOUT = _env_float("SALESTALLY_API_TIMEOUT", 10.0)
        self.COMMISSION_PERCENT = _env_float("SALESTALLY_COMMISSION_PERCENT", 1.0)
        self.CURRENCY_SUFFIX = os.getenv("SALESTALLY_CURRENCY_SUFFIX", "VNĐ")
        self.GROUPING_SEPARATOR = os.getenv("SALESTALLY_GROUPING_SEPARATOR", ".")
        if self.COMMISSION_PERCENT < 0:
            raise ValueError("SALESTALLY_COMMISSION_PERCENT cannot be negative.")
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("SALESTALLY_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the backend database and logs."""

        data_root = os.getenv("SALESTALLY_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, object]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Configuration for the test-suite: quiet console, testing flags on."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = False
