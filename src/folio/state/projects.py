"""Projects store."""

from __future__ import annotations

import logging

from result import Err

from folio.api.protocols import ProjectApiProtocol
from folio.models.projects import CreateProject, Project, UpdateProject
from folio.state.base import CollectionStore, StoreMessages
from folio.state.observable import Derived
from folio.state.toasts import ToastService
from folio.views import featured_projects

logger = logging.getLogger(__name__)

PROJECT_MESSAGES = StoreMessages(
    load_failed="Erreur lors du chargement des projets",
    created=("Projet créé", "Le projet a été créé avec succès"),
    create_failed="Erreur lors de la création du projet",
    updated=("Projet mis à jour", "Le projet a été mis à jour avec succès"),
    update_failed="Erreur lors de la mise à jour du projet",
    deleted=("Projet supprimé", "Le projet a été supprimé avec succès"),
    delete_failed="Erreur lors de la suppression du projet",
    create_unreachable="Impossible de créer le projet",
    update_unreachable="Impossible de mettre à jour le projet",
    delete_unreachable="Impossible de supprimer le projet",
)


class ProjectStore(CollectionStore[Project]):
    """Portfolio projects plus the featured subset and category list."""

    def __init__(self, api: ProjectApiProtocol, toasts: ToastService) -> None:
        super().__init__(toasts, PROJECT_MESSAGES, "projects")
        self._api = api
        self.featured: Derived[list[Project], list[Project]] = Derived(
            self.items, featured_projects
        )

    async def load(self, category: str | None = None, featured: bool | None = None) -> None:
        """Replace the project list with the server's, optionally filtered."""
        await self._load(self._api.get_projects(category, featured), "GET /api/projects")

    async def get(self, project_id: int) -> Project | None:
        """Fetch one project without touching store state."""
        result = await self._api.get_project(project_id)
        if isinstance(result, Err):
            logger.error("Failed to load project %d: %s", project_id, result.err_value.message)
            return None
        return result.ok_value

    async def create(self, payload: CreateProject) -> bool:
        return await self._create(self._api.create_project(payload))

    async def update(self, project_id: int, payload: UpdateProject) -> bool:
        return await self._update(project_id, self._api.update_project(project_id, payload))

    async def delete(self, project_id: int) -> bool:
        return await self._delete(project_id, self._api.delete_project(project_id))
