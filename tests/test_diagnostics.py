"""Recent-log buffer tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from folio import diagnostics
from folio.diagnostics import RecentLogHandler


@pytest.fixture
def buffer() -> Iterator[RecentLogHandler]:
    handler = diagnostics.install()
    yield handler
    diagnostics.uninstall(handler)


def test_buffer_collects_folio_records(buffer: RecentLogHandler) -> None:
    log = logging.getLogger("folio.state.projects")
    log.error("projects load failed: %s", "500")
    log.warning("stale response")
    logging.getLogger("elsewhere").error("not ours")

    entries = buffer.entries()
    assert [(e.level, e.logger, e.message) for e in entries] == [
        ("error", "folio.state.projects", "projects load failed: 500"),
        ("warning", "folio.state.projects", "stale response"),
    ]
    assert [e.message for e in buffer.entries("warning")] == ["stale response"]


def test_buffer_keeps_only_the_newest_entries() -> None:
    handler = RecentLogHandler(capacity=3)
    log = logging.getLogger("folio.test.capacity")
    log.addHandler(handler)
    try:
        for index in range(5):
            log.error("entry %d", index)
    finally:
        log.removeHandler(handler)

    assert [e.message for e in handler.entries()] == ["entry 2", "entry 3", "entry 4"]


def test_stats_and_export(buffer: RecentLogHandler) -> None:
    log = logging.getLogger("folio.api.client")
    log.error("boom")
    log.warning("slow")
    log.warning("slower")

    [first, *_] = buffer.entries()
    stats = buffer.stats(now=first.timestamp)
    assert stats == {"total": 3, "by_level": {"error": 1, "warning": 2}, "recent": 3}
    assert buffer.stats(now=first.timestamp + 2 * diagnostics.RECENT_WINDOW)["recent"] == 0

    exported = json.loads(buffer.export())
    assert [entry["message"] for entry in exported] == ["boom", "slow", "slower"]
    assert set(exported[0]) == {"level", "logger", "message", "timestamp"}

    buffer.clear()
    assert buffer.entries() == []
    assert buffer.stats()["total"] == 0


def test_uninstall_detaches_from_folio_logger() -> None:
    handler = diagnostics.install()
    diagnostics.uninstall(handler)
    logging.getLogger("folio.views").error("after uninstall")
    assert handler.entries() == []
