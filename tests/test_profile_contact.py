"""Profile and contact store tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from result import Err, Ok

from folio.models.contact import ContactMessage
from folio.models.errors import ApiError
from folio.models.profile import Profile, UpdateProfile
from folio.models.state import LoadingState, ToastType
from folio.state.contact import ContactStore
from folio.state.profile import ProfileStore
from folio.state.toasts import ToastService

PROFILE = Profile(
    id=1,
    name="Jean Dupont",
    title="Développeur Full-Stack",
    bio="Passionné par Rust et Svelte.",
    email="jean@example.com",
    location="Paris, France",
    github_url="https://github.com/jean",
)

MESSAGE = ContactMessage(
    name="Alice",
    email="alice@example.com",
    subject="Collaboration",
    message="Bonjour, parlons de votre projet.",
)


@pytest.mark.asyncio
async def test_profile_load_and_update(toasts: ToastService) -> None:
    updated = PROFILE.model_copy(update={"title": "Architecte"})
    api = SimpleNamespace(
        get_profile=AsyncMock(return_value=Ok(PROFILE)),
        update_profile=AsyncMock(return_value=Ok(updated)),
    )
    store = ProfileStore(api, toasts)  # type: ignore[arg-type]

    await store.load()
    assert store.profile.get() == PROFILE
    assert store.loading.get() == LoadingState()

    assert await store.update(UpdateProfile(title="Architecte")) is True
    assert store.profile.get() == updated
    [toast] = toasts.toasts.get()
    assert toast.type is ToastType.SUCCESS
    assert toast.title == "Profil mis à jour"


@pytest.mark.asyncio
async def test_profile_load_failure(toasts: ToastService) -> None:
    error = ApiError(code="NOT_FOUND", message="Profile not found")
    api = SimpleNamespace(get_profile=AsyncMock(return_value=Err(error)))
    store = ProfileStore(api, toasts)  # type: ignore[arg-type]

    await store.load()

    assert store.profile.get() is None
    assert store.loading.get() == LoadingState(is_loading=False, error=error)
    assert [t.type for t in toasts.toasts.get()] == [ToastType.ERROR]

    store.clear_error()
    assert store.loading.get().error is None


@pytest.mark.asyncio
async def test_profile_update_failure_keeps_profile(toasts: ToastService) -> None:
    api = SimpleNamespace(
        get_profile=AsyncMock(return_value=Ok(PROFILE)),
        update_profile=AsyncMock(return_value=Err(ApiError.network())),
    )
    store = ProfileStore(api, toasts)  # type: ignore[arg-type]
    await store.load()

    assert await store.update(UpdateProfile(bio="x")) is False
    assert store.profile.get() == PROFILE
    assert store.loading.get().error is None
    [toast] = toasts.toasts.get()
    assert toast.title == "Erreur réseau"
    assert toast.message == "Impossible de mettre à jour le profil"


@pytest.mark.asyncio
async def test_send_message_success(toasts: ToastService) -> None:
    api = SimpleNamespace(send_contact_message=AsyncMock(return_value=Ok(None)))
    store = ContactStore(api, toasts)  # type: ignore[arg-type]

    assert await store.send_message(MESSAGE) is True

    api.send_contact_message.assert_awaited_once_with(MESSAGE)
    assert store.success.get() is True
    assert store.loading.get() == LoadingState()
    [toast] = toasts.toasts.get()
    assert toast.type is ToastType.SUCCESS
    assert toast.title == "Message envoyé"


@pytest.mark.asyncio
async def test_send_message_does_not_revalidate(toasts: ToastService) -> None:
    api = SimpleNamespace(send_contact_message=AsyncMock(return_value=Ok(None)))
    store = ContactStore(api, toasts)  # type: ignore[arg-type]
    bad = ContactMessage(name="", email="nope", subject="", message="")

    assert await store.send_message(bad) is True
    api.send_contact_message.assert_awaited_once_with(bad)


@pytest.mark.asyncio
async def test_send_message_failure(toasts: ToastService) -> None:
    error = ApiError(code="VALIDATION_ERROR", message="Invalid email")
    api = SimpleNamespace(
        send_contact_message=AsyncMock(side_effect=[Ok(None), Err(error)])
    )
    store = ContactStore(api, toasts)  # type: ignore[arg-type]
    await store.send_message(MESSAGE)

    assert await store.send_message(MESSAGE) is False

    assert store.success.get() is False
    assert store.loading.get() == LoadingState(is_loading=False, error=error)
    assert toasts.toasts.get()[-1].title == "Erreur d'envoi"
    assert toasts.toasts.get()[-1].message == "Invalid email"


@pytest.mark.asyncio
async def test_contact_clear_and_reset(toasts: ToastService) -> None:
    api = SimpleNamespace(send_contact_message=AsyncMock(return_value=Err(ApiError.network())))
    store = ContactStore(api, toasts)  # type: ignore[arg-type]
    await store.send_message(MESSAGE)

    store.clear_error()
    assert store.loading.get().error is None

    store.success.set(True)
    store.clear_success()
    assert store.success.get() is False

    await store.send_message(MESSAGE)
    store.success.set(True)
    store.reset()
    assert store.loading.get() == LoadingState()
    assert store.success.get() is False
    api.send_contact_message.assert_awaited()
    assert api.send_contact_message.await_count == 2
