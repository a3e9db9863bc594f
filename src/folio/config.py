"""Configuration for folio."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "http://localhost:3001"


@dataclass(frozen=True)
class Config:
    """Client configuration."""

    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0

    @property
    def health_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/health"

    @classmethod
    def from_env(cls) -> Config:
        """Build a config from ``FOLIO_API_URL`` / ``FOLIO_TIMEOUT``."""
        api_url = os.environ.get("FOLIO_API_URL", "").strip() or DEFAULT_API_URL
        raw_timeout = os.environ.get("FOLIO_TIMEOUT", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else cls.timeout
        except ValueError:
            timeout = cls.timeout
        return cls(api_url=api_url, timeout=timeout)
