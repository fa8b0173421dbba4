"""Route view builders."""

from .auth import build_auth_view
from .records import build_records_view

__all__ = ["build_auth_view", "build_records_view"]
