"""Minimal subscribable values: writable state and derived projections."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

type Subscriber[T] = Callable[[T], None]
type Unsubscribe = Callable[[], None]


class Readable[T](Protocol):
    """Read-only observable contract: current snapshot plus change notifications."""

    def get(self) -> T: ...

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe: ...


class Writable[T]:
    """Holds a value and notifies subscribers on every ``set``.

    ``subscribe`` calls the new subscriber immediately with the current value
    and returns a callable that removes it again.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber[T]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class Derived[S, T]:
    """Read-only projection of another observable, recomputed on each change."""

    def __init__(self, source: Readable[S], fn: Callable[[S], T]) -> None:
        self._fn = fn
        self._target = Writable(fn(source.get()))
        self._source_unsubscribe = source.subscribe(self._recompute)

    def _recompute(self, value: S) -> None:
        self._target.set(self._fn(value))

    def get(self) -> T:
        return self._target.get()

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        return self._target.subscribe(callback)

    def detach(self) -> None:
        """Stop following the source. The last computed value is kept."""
        self._source_unsubscribe()
