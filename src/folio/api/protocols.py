"""Protocol definitions for the API client."""

from __future__ import annotations

from typing import Protocol

from result import Result

from folio.models.contact import ContactMessage
from folio.models.errors import ApiError
from folio.models.profile import Profile, UpdateProfile
from folio.models.projects import CreateProject, Project, UpdateProject
from folio.models.skills import CreateSkill, Skill, UpdateSkill


class ProjectApiProtocol(Protocol):
    """Project operations."""

    async def get_projects(
        self, category: str | None = None, featured: bool | None = None
    ) -> Result[list[Project], ApiError]: ...

    async def get_project(self, project_id: int) -> Result[Project, ApiError]: ...

    async def create_project(self, project: CreateProject) -> Result[Project, ApiError]: ...

    async def update_project(
        self, project_id: int, project: UpdateProject
    ) -> Result[Project, ApiError]: ...

    async def delete_project(self, project_id: int) -> Result[None, ApiError]: ...


class SkillApiProtocol(Protocol):
    """Skill operations."""

    async def get_skills(self, category: str | None = None) -> Result[list[Skill], ApiError]: ...

    async def create_skill(self, skill: CreateSkill) -> Result[Skill, ApiError]: ...

    async def update_skill(self, skill_id: int, skill: UpdateSkill) -> Result[Skill, ApiError]: ...

    async def delete_skill(self, skill_id: int) -> Result[None, ApiError]: ...


class ProfileApiProtocol(Protocol):
    """Profile operations."""

    async def get_profile(self) -> Result[Profile, ApiError]: ...

    async def update_profile(self, profile: UpdateProfile) -> Result[Profile, ApiError]: ...


class ContactApiProtocol(Protocol):
    """Contact form submission."""

    async def send_contact_message(self, message: ContactMessage) -> Result[None, ApiError]: ...


class ApiClientProtocol(
    ProjectApiProtocol, SkillApiProtocol, ProfileApiProtocol, ContactApiProtocol, Protocol
):
    """Full client surface consumed by the stores."""

    async def health(self) -> Result[bool, ApiError]: ...
