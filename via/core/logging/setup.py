# via/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers

from .formatters import DevFormatter, JsonFormatter, RedactingFormatter
from .filters import RecurringSuppressFilter

__all__ = ["configureLogging"]



def configureLogging(
        *,
        devMode: bool = True,
        logFile: str | None = None,
        suppressRecurring: bool = False,
) -> None:
    """
    Initiate the global logging configuration.

    Dev:
      - Console pretty logs (DEBUG)
      - JSON file log (DEBUG), when logFile is given

    Prod:
      - Console JSON (INFO)
      - JSON file log (INFO) with rotation, when logFile is given

    Both modes redact credentials (e.g. user-info inside host strings).
    """
    rootLevel = logging.DEBUG if devMode else logging.INFO

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(rootLevel)

    jsonFmt = RedactingFormatter(JsonFormatter())
    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(RedactingFormatter(DevFormatter()) if devMode else jsonFmt)
    handlers: list[logging.Handler] = [consoleHandler]

    if logFile:
        fileHandler = logging.handlers.RotatingFileHandler(
            logFile,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fileHandler.setLevel(rootLevel)
        fileHandler.setFormatter(jsonFmt)
        handlers.append(fileHandler)

    if suppressRecurring:
        suppressFilter = RecurringSuppressFilter()
        for handler in handlers:
            handler.addFilter(suppressFilter)

    for handler in handlers:
        root.addHandler(handler)
