"""Profile store."""

from __future__ import annotations

from result import Err

from folio.api.protocols import ProfileApiProtocol
from folio.models.profile import Profile, UpdateProfile
from folio.state.base import UPDATE_TITLE, BaseStore, StoreMessages
from folio.state.observable import Writable
from folio.state.toasts import ToastService

PROFILE_MESSAGES = StoreMessages(
    load_failed="Erreur lors du chargement du profil",
    updated=("Profil mis à jour", "Le profil a été mis à jour avec succès"),
    update_failed="Erreur lors de la mise à jour du profil",
    update_unreachable="Impossible de mettre à jour le profil",
)


class ProfileStore(BaseStore):
    """Holds the singleton profile."""

    def __init__(self, api: ProfileApiProtocol, toasts: ToastService) -> None:
        super().__init__(toasts, PROFILE_MESSAGES, "profile")
        self._api = api
        self.profile: Writable[Profile | None] = Writable(None)

    async def load(self) -> None:
        self._begin_load()
        result = await self._api.get_profile()
        if isinstance(result, Err):
            self._fail_load(result.err_value, "GET /api/profile")
            return
        self.profile.set(result.ok_value)
        self._end_load()

    async def update(self, payload: UpdateProfile) -> bool:
        result = await self._api.update_profile(payload)
        if isinstance(result, Err):
            self._fail_mutation(
                "update",
                result.err_value,
                UPDATE_TITLE,
                PROFILE_MESSAGES.update_failed,
                PROFILE_MESSAGES.update_unreachable,
            )
            return False
        self.profile.set(result.ok_value)
        self._toasts.success(*PROFILE_MESSAGES.updated)
        return True
