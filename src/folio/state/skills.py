"""Skills store."""

from __future__ import annotations

from folio.api.protocols import SkillApiProtocol
from folio.models.skills import CreateSkill, Skill, UpdateSkill
from folio.state.base import CollectionStore, StoreMessages
from folio.state.observable import Derived
from folio.state.toasts import ToastService
from folio.views import group_skills_by_category

SKILL_MESSAGES = StoreMessages(
    load_failed="Erreur lors du chargement des compétences",
    created=("Compétence créée", "La compétence a été créée avec succès"),
    create_failed="Erreur lors de la création de la compétence",
    updated=("Compétence mise à jour", "La compétence a été mise à jour avec succès"),
    update_failed="Erreur lors de la mise à jour de la compétence",
    deleted=("Compétence supprimée", "La compétence a été supprimée avec succès"),
    delete_failed="Erreur lors de la suppression de la compétence",
    create_unreachable="Impossible de créer la compétence",
    update_unreachable="Impossible de mettre à jour la compétence",
    delete_unreachable="Impossible de supprimer la compétence",
)


class SkillStore(CollectionStore[Skill]):
    """Skills plus the per-category grouping used by the skills overview."""

    def __init__(self, api: SkillApiProtocol, toasts: ToastService) -> None:
        super().__init__(toasts, SKILL_MESSAGES, "skills")
        self._api = api
        self.by_category: Derived[list[Skill], dict[str, list[Skill]]] = Derived(
            self.items, group_skills_by_category
        )

    async def load(self, category: str | None = None) -> None:
        await self._load(self._api.get_skills(category), "GET /api/skills")

    async def create(self, payload: CreateSkill) -> bool:
        return await self._create(self._api.create_skill(payload))

    async def update(self, skill_id: int, payload: UpdateSkill) -> bool:
        return await self._update(skill_id, self._api.update_skill(skill_id, payload))

    async def delete(self, skill_id: int) -> bool:
        return await self._delete(skill_id, self._api.delete_skill(skill_id))
