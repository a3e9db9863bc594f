"""Store state value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from folio.models.errors import ApiError


@dataclass(frozen=True)
class LoadingState:
    """Loading flag and last load error of one store."""

    is_loading: bool = False
    error: ApiError | None = None


class ToastType(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


DEFAULT_TOAST_DURATION_MS = 5000
ERROR_TOAST_DURATION_MS = 8000


@dataclass(frozen=True)
class Toast:
    """A transient user notification."""

    id: str
    title: str
    type: ToastType = ToastType.INFO
    message: str | None = None
    duration: int = DEFAULT_TOAST_DURATION_MS
    dismissible: bool = True
