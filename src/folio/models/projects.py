"""Project models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Project(BaseModel):
    """A portfolio project as returned by the API."""

    id: int
    title: str
    description: str
    long_description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    category: str
    featured: bool = False
    created_at: str = ""


class CreateProject(BaseModel):
    """Payload for creating a project."""

    title: str
    description: str
    long_description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    category: str
    featured: bool = False


class UpdateProject(BaseModel):
    """Partial project update. Only explicitly set fields are sent."""

    title: str | None = None
    description: str | None = None
    long_description: str | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    category: str | None = None
    featured: bool | None = None
