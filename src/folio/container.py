"""Store container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from folio.api.client import ApiClient
from folio.state.contact import ContactStore
from folio.state.profile import ProfileStore
from folio.state.projects import ProjectStore
from folio.state.skills import SkillStore
from folio.state.toasts import Timer, ToastService

if TYPE_CHECKING:
    import httpx

    from folio.config import Config


@dataclass
class StoreContainer:
    """Holds the API client, the shared toast queue and every store."""

    api: ApiClient
    toasts: ToastService
    projects: ProjectStore
    skills: SkillStore
    profile: ProfileStore
    contact: ContactStore

    @classmethod
    def create(
        cls,
        config: Config,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timer: Timer | None = None,
    ) -> StoreContainer:
        """Wire the client, the toast service and all stores."""
        api = ApiClient(config.api_url, timeout=config.timeout, transport=transport)
        toasts = ToastService(timer)
        return cls(
            api=api,
            toasts=toasts,
            projects=ProjectStore(api, toasts),
            skills=SkillStore(api, toasts),
            profile=ProfileStore(api, toasts),
            contact=ContactStore(api, toasts),
        )

    async def close(self) -> None:
        """Cancel pending toast timers and close the HTTP client."""
        self.toasts.close()
        await self.api.close()
