"""Toast notification queue with auto-dismiss timers."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable
from typing import Protocol

from folio.models.state import (
    DEFAULT_TOAST_DURATION_MS,
    ERROR_TOAST_DURATION_MS,
    Toast,
    ToastType,
)
from folio.state.observable import Writable

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


type Timer = Callable[[float, Callable[[], None]], TimerHandle]


def asyncio_timer(delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule ``callback`` on the running event loop."""
    return asyncio.get_running_loop().call_later(delay_seconds, callback)


class ToastService:
    """Ordered queue of transient notifications shared by all stores.

    Toasts with a positive duration remove themselves once it elapses; the
    timer is supplied by ``timer`` so tests can drive time by hand.
    """

    def __init__(self, timer: Timer | None = None) -> None:
        self._timer: Timer = timer or asyncio_timer
        self._handles: dict[str, TimerHandle] = {}
        self.toasts: Writable[list[Toast]] = Writable([])

    def add(
        self,
        title: str,
        *,
        type: ToastType = ToastType.INFO,
        message: str | None = None,
        duration: int | None = None,
        dismissible: bool = True,
    ) -> str:
        """Queue a toast and return its id."""
        toast_id = uuid.uuid4().hex
        toast = Toast(
            id=toast_id,
            title=title,
            type=type,
            message=message,
            duration=DEFAULT_TOAST_DURATION_MS if duration is None else duration,
            dismissible=dismissible,
        )
        self.toasts.update(lambda current: [*current, toast])
        logger.debug("Toast %s queued (%s): %s", toast_id, toast.type, title)

        if toast.duration > 0:
            self._handles[toast_id] = self._timer(
                toast.duration / 1000, lambda: self._expire(toast_id)
            )
        return toast_id

    def dismiss(self, toast_id: str) -> None:
        """Remove a toast. Unknown or already removed ids are ignored."""
        handle = self._handles.pop(toast_id, None)
        if handle is not None:
            handle.cancel()
        current = self.toasts.get()
        remaining = [toast for toast in current if toast.id != toast_id]
        if len(remaining) != len(current):
            self.toasts.set(remaining)

    def clear(self) -> None:
        self._cancel_timers()
        self.toasts.set([])

    def close(self) -> None:
        """Cancel outstanding timers. Queued toasts are left as they are."""
        self._cancel_timers()

    def success(
        self, title: str, message: str | None = None, duration: int | None = None
    ) -> str:
        return self.add(title, type=ToastType.SUCCESS, message=message, duration=duration)

    def error(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.add(
            title,
            type=ToastType.ERROR,
            message=message,
            duration=ERROR_TOAST_DURATION_MS if duration is None else duration,
        )

    def warning(
        self, title: str, message: str | None = None, duration: int | None = None
    ) -> str:
        return self.add(title, type=ToastType.WARNING, message=message, duration=duration)

    def info(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.add(title, type=ToastType.INFO, message=message, duration=duration)

    def _expire(self, toast_id: str) -> None:
        self._handles.pop(toast_id, None)
        self.dismiss(toast_id)

    def _cancel_timers(self) -> None:
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()
