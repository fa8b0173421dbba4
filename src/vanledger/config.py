"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://van-rental.onrender.com/api"


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "VanLedger"
    EXPORT_DIRNAME = "exports"
    LOG_FILENAME = "vanledger.log"

    def __init__(self) -> None:
        self.API_URL = os.getenv("VANLEDGER_API_URL", DEFAULT_API_URL).rstrip("/")
        self.REQUEST_TIMEOUT = _env_float("VANLEDGER_REQUEST_TIMEOUT", 15.0)
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("VANLEDGER_DEV_MODE", default=True)
        self.DEFAULT_VAN_NO = os.getenv("VANLEDGER_DEFAULT_VAN_NO", "VAN001")
        self.CURRENCY_SYMBOL = os.getenv("VANLEDGER_CURRENCY_SYMBOL", "₹")
        if self.REQUEST_TIMEOUT <= 0:
            raise ValueError("VANLEDGER_REQUEST_TIMEOUT must be positive.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports live."""

        data_root = os.getenv("VANLEDGER_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Read-only install locations fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME.lower()}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    @property
    def export_dir(self) -> Path:
        """Directory used for spreadsheet exports."""

        path = self.DATA_DIR / self.EXPORT_DIRNAME
        path.mkdir(parents=True, exist_ok=True)
        return path


class DevConfig(BaseConfig):
    """Development configuration talking to the default API."""

    DEBUG = True
    TESTING = False
