"""Service module exports."""

from . import (
    aggregation,
    categories,
    export,
    filtering,
    formatters,
    sorting,
    validation,
)

__all__ = [
    "aggregation",
    "categories",
    "export",
    "filtering",
    "formatters",
    "sorting",
    "validation",
]
