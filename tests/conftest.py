"""Shared fixtures for folio tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest

from folio.api.client import ApiClient
from folio.state.toasts import ToastService
from tests.helpers import BASE_URL, FakeTimer, Handler


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def toasts(fake_timer: FakeTimer) -> ToastService:
    """A fresh toast queue driven by a manual timer."""
    return ToastService(fake_timer)


@pytest.fixture
async def api_factory() -> AsyncGenerator[Callable[[Handler], ApiClient]]:
    """Build ApiClients backed by an in-process handler; all are closed afterwards."""
    clients: list[ApiClient] = []

    def build(handler: Handler) -> ApiClient:
        client = ApiClient(BASE_URL, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield build  # type: ignore[misc]
    for client in clients:
        await client.close()
