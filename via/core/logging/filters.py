# via/core/logging/filters.py
from __future__ import annotations
import logging
import time
import threading
from collections import deque, defaultdict
from collections.abc import Callable

from via.core.redaction import redactText

__all__ = ["RecurringSuppressFilter"]

# Upper bound for normalized message keys
MAX_KEY_LEN = 512
# Tracked keys before quiet ones are dropped
MAX_TRACKED_KEYS = 5000

_Key = tuple[str, int, str]



class RecurringSuppressFilter(logging.Filter):
    """
    Lets through at most `maxPerWindow` identical records per `windowSeconds`.
    Resolution failures in a tight loop otherwise flood the console with the
    same "Failed to resolve" line.

    Key = (logger name, levelno, normalized message). When a key becomes
    quiet again, one summary record reports how many were dropped.
    """
    def __init__(
            self,
            *,
            windowSeconds: int = 60,
            maxPerWindow: int = 5,
            summaryLevel: int = logging.INFO,
            normalize: Callable[[logging.LogRecord], str] | None = None,
            clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self.windowSeconds = max(1, int(windowSeconds))
        self.maxPerWindow = max(1, int(maxPerWindow))
        self.summaryLevel = int(summaryLevel)
        self.normalize = normalize or self._defaultNormalize
        self._clock = clock
        self._seen: dict[_Key, deque[float]] = defaultdict(deque)
        self._dropped: dict[_Key, int] = defaultdict(int)
        self._lock = threading.Lock()

    @staticmethod
    def _defaultNormalize(record: logging.LogRecord) -> str:
        norm = " ".join(redactText(record.getMessage()).split())
        return norm[:MAX_KEY_LEN]

    def _dropQuietKeys(self, now: float) -> None:
        if len(self._seen) <= MAX_TRACKED_KEYS:
            return
        cutoff = now - self.windowSeconds
        for key, window in list(self._seen.items()):
            while window and window[0] < cutoff:
                window.popleft()
            # Keys with pending drops stay until their summary goes out
            if not window and not self._dropped.get(key, 0):
                del self._seen[key]
                self._dropped.pop(key, None)

    def _emitSummary(self, key: _Key, count: int) -> None:
        loggerName, _levelno, message = key
        logging.getLogger(loggerName).log(
            self.summaryLevel,
            "Suppressed %d repeated logs: %s",
            count,
            message,
            extra={"_noRecurringSuppress": True},
        )

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "_noRecurringSuppress", False):
            return True

        now = self._clock()
        key = (record.name, record.levelno, self.normalize(record))
        summary = 0

        with self._lock:
            self._dropQuietKeys(now)
            window = self._seen[key]
            while window and window[0] < now - self.windowSeconds:
                window.popleft()
            window.append(now)
            if len(window) > self.maxPerWindow:
                self._dropped[key] += 1
                return False
            summary = self._dropped.pop(key, 0)

        # Emitted outside the lock; the summary record re-enters filter()
        if summary:
            self._emitSummary(key, summary)
        return True
