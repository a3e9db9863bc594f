"""Pydantic models and state value objects for folio."""

from folio.models.contact import ContactMessage
from folio.models.errors import ApiError, ErrorKind
from folio.models.profile import Profile, UpdateProfile
from folio.models.projects import CreateProject, Project, UpdateProject
from folio.models.skills import CreateSkill, Skill, UpdateSkill
from folio.models.state import LoadingState, Toast, ToastType

__all__ = [
    "ApiError",
    "ContactMessage",
    "CreateProject",
    "CreateSkill",
    "ErrorKind",
    "LoadingState",
    "Profile",
    "Project",
    "Skill",
    "Toast",
    "ToastType",
    "UpdateProfile",
    "UpdateProject",
    "UpdateSkill",
]
