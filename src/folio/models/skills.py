"""Skill models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Skill(BaseModel):
    """A skill with a 1-5 proficiency level."""

    id: int
    name: str
    category: str
    level: int
    years_experience: int | None = Field(default=None, ge=0)
    description: str | None = None


class CreateSkill(BaseModel):
    name: str
    category: str
    level: int
    years_experience: int | None = Field(default=None, ge=0)
    description: str | None = None


class UpdateSkill(BaseModel):
    name: str | None = None
    category: str | None = None
    level: int | None = None
    years_experience: int | None = Field(default=None, ge=0)
    description: str | None = None
