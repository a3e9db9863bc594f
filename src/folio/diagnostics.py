"""In-memory buffer of recent log records for post-mortem inspection."""

from __future__ import annotations

import json
import logging
import time
from collections import deque
from dataclasses import asdict, dataclass

MAX_ENTRIES = 100
RECENT_WINDOW = 60 * 60


@dataclass(frozen=True)
class LogEntry:
    level: str
    logger: str
    message: str
    timestamp: float


class RecentLogHandler(logging.Handler):
    """Keeps the last ``capacity`` records; older ones fall off the front."""

    def __init__(self, capacity: int = MAX_ENTRIES, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        self._entries.append(
            LogEntry(
                level=record.levelname.lower(),
                logger=record.name,
                message=message,
                timestamp=record.created,
            )
        )

    def entries(self, level: str | None = None) -> list[LogEntry]:
        if level is None:
            return list(self._entries)
        return [entry for entry in self._entries if entry.level == level]

    def clear(self) -> None:
        self._entries.clear()

    def stats(self, now: float | None = None) -> dict[str, object]:
        """Totals per level plus how many entries fall within the last hour."""
        cutoff = (time.time() if now is None else now) - RECENT_WINDOW
        by_level: dict[str, int] = {}
        for entry in self._entries:
            by_level[entry.level] = by_level.get(entry.level, 0) + 1
        return {
            "total": len(self._entries),
            "by_level": by_level,
            "recent": sum(1 for entry in self._entries if entry.timestamp > cutoff),
        }

    def export(self) -> str:
        return json.dumps([asdict(entry) for entry in self._entries], indent=2)


def install(capacity: int = MAX_ENTRIES) -> RecentLogHandler:
    """Attach a fresh buffer to the ``folio`` logger and return it."""
    handler = RecentLogHandler(capacity)
    logging.getLogger("folio").addHandler(handler)
    return handler


def uninstall(handler: RecentLogHandler) -> None:
    logging.getLogger("folio").removeHandler(handler)
