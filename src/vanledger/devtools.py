"""Small helpers for dev-mode diagnostics."""

from __future__ import annotations

import traceback
from typing import Any, Mapping

from .config import BaseConfig


def in_dev_mode(config: BaseConfig | None) -> bool:
    """Return True when dev mode diagnostics are enabled."""

    return bool(getattr(config, "DEV_MODE", False)) if config is not None else False


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Print a one-line diagnostic (plus traceback) when dev mode is on."""

    if not in_dev_mode(config):
        return

    line = f"[DEV] {message}"
    if context:
        line += " (" + " ".join(f"{k}={v}" for k, v in context.items()) + ")"
    print(line)
    if exc is not None:
        traceback.print_exception(type(exc), exc, exc.__traceback__)
