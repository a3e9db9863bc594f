"""Shared store machinery: loading state, failure reporting, collection CRUD."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Protocol, assert_never

from result import Err, Result

from folio.models.errors import ApiError, ErrorKind
from folio.models.state import LoadingState
from folio.state.observable import Derived, Writable
from folio.state.toasts import ToastService
from folio.views import categories

logger = logging.getLogger(__name__)

NETWORK_TITLE = "Erreur réseau"
NETWORK_MESSAGE = "Impossible de se connecter au serveur"
LOAD_TITLE = "Erreur de chargement"
CREATE_TITLE = "Erreur de création"
UPDATE_TITLE = "Erreur de mise à jour"
DELETE_TITLE = "Erreur de suppression"


class Entity(Protocol):
    @property
    def id(self) -> int: ...

    @property
    def category(self) -> str: ...


@dataclass(frozen=True)
class StoreMessages:
    """User-facing toast texts for one store."""

    load_failed: str
    created: tuple[str, str] = ("", "")
    create_failed: str = ""
    updated: tuple[str, str] = ("", "")
    update_failed: str = ""
    deleted: tuple[str, str] = ("", "")
    delete_failed: str = ""
    create_unreachable: str = NETWORK_MESSAGE
    update_unreachable: str = NETWORK_MESSAGE
    delete_unreachable: str = NETWORK_MESSAGE


class BaseStore:
    """Loading state plus the error-to-toast policy shared by every store."""

    def __init__(self, toasts: ToastService, messages: StoreMessages, name: str) -> None:
        self._toasts = toasts
        self._messages = messages
        self._name = name
        self.loading: Writable[LoadingState] = Writable(LoadingState())

    def clear_error(self) -> None:
        self.loading.set(LoadingState(is_loading=self.loading.get().is_loading))

    def _begin_load(self) -> None:
        self.loading.set(LoadingState(is_loading=True))

    def _end_load(self) -> None:
        self.loading.set(LoadingState(is_loading=False))

    def _fail_load(self, error: ApiError, endpoint: str) -> None:
        logger.error("%s load failed (%s): %s %s", self._name, endpoint, error.code, error.message)
        self.loading.set(LoadingState(is_loading=False, error=error))
        self._notify_failure(error, LOAD_TITLE, self._messages.load_failed)

    def _fail_mutation(
        self, action: str, error: ApiError, title: str, fallback: str, unreachable: str
    ) -> None:
        """Report a failed create/update/delete. ``loading.error`` is left alone."""
        logger.warning("%s %s failed: %s %s", self._name, action, error.code, error.message)
        self._notify_failure(error, title, fallback, unreachable)

    def _notify_failure(
        self, error: ApiError, title: str, fallback: str, unreachable: str = NETWORK_MESSAGE
    ) -> None:
        match error.kind:
            case ErrorKind.NETWORK:
                self._toasts.error(NETWORK_TITLE, unreachable)
            case ErrorKind.HTTP | ErrorKind.SERVER | ErrorKind.UNKNOWN:
                self._toasts.error(title, error.message or fallback)
            case _:
                assert_never(error.kind)


class CollectionStore[T: Entity](BaseStore):
    """Owns a list of entities and reconciles CRUD results into it.

    Loads always replace the whole list. Overlapping loads are not cancelled:
    whichever response resolves last is applied, even if it was issued first.
    """

    def __init__(self, toasts: ToastService, messages: StoreMessages, name: str) -> None:
        super().__init__(toasts, messages, name)
        self.items: Writable[list[T]] = Writable([])
        self.categories: Derived[list[T], list[str]] = Derived(self.items, categories)
        self._load_generation = 0

    def find(self, entity_id: int) -> T | None:
        return next((item for item in self.items.get() if item.id == entity_id), None)

    async def _load(self, request: Awaitable[Result[list[T], ApiError]], endpoint: str) -> None:
        self._load_generation += 1
        generation = self._load_generation
        self._begin_load()

        result = await request

        if generation != self._load_generation:
            logger.warning(
                "%s: applying out-of-order load response (request %d, latest %d)",
                self._name,
                generation,
                self._load_generation,
            )
        if isinstance(result, Err):
            self._fail_load(result.err_value, endpoint)
            return
        self.items.set(list(result.ok_value))
        self._end_load()

    async def _create(self, request: Awaitable[Result[T, ApiError]]) -> bool:
        result = await request
        if isinstance(result, Err):
            error = result.err_value
            messages = self._messages
            self._fail_mutation(
                "create", error, CREATE_TITLE, messages.create_failed, messages.create_unreachable
            )
            return False
        created = result.ok_value
        self.items.update(lambda items: [*items, created])
        self._toasts.success(*self._messages.created)
        return True

    async def _update(self, entity_id: int, request: Awaitable[Result[T, ApiError]]) -> bool:
        result = await request
        if isinstance(result, Err):
            error = result.err_value
            messages = self._messages
            self._fail_mutation(
                f"update of {entity_id}",
                error,
                UPDATE_TITLE,
                messages.update_failed,
                messages.update_unreachable,
            )
            return False
        updated = result.ok_value
        self.items.update(
            lambda items: [updated if item.id == entity_id else item for item in items]
        )
        self._toasts.success(*self._messages.updated)
        return True

    async def _delete(self, entity_id: int, request: Awaitable[Result[None, ApiError]]) -> bool:
        result = await request
        if isinstance(result, Err):
            error = result.err_value
            messages = self._messages
            self._fail_mutation(
                f"delete of {entity_id}",
                error,
                DELETE_TITLE,
                messages.delete_failed,
                messages.delete_unreachable,
            )
            return False
        self.items.update(lambda items: [item for item in items if item.id != entity_id])
        self._toasts.success(*self._messages.deleted)
        return True
