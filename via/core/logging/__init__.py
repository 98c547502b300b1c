# via/core/logging/__init__.py
from __future__ import annotations

from .filters import RecurringSuppressFilter
from .formatters import DevFormatter, JsonFormatter, RedactingFormatter
from .setup import configureLogging

__all__ = [
    "configureLogging",
    "DevFormatter",
    "JsonFormatter",
    "RedactingFormatter",
    "RecurringSuppressFilter",
]
