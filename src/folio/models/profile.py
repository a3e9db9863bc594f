"""Profile models."""

from __future__ import annotations

from pydantic import BaseModel


class Profile(BaseModel):
    """The portfolio owner's profile (singleton)."""

    id: int
    name: str
    title: str
    bio: str
    email: str
    phone: str | None = None
    location: str = ""
    avatar_url: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None
    twitter_url: str | None = None


class UpdateProfile(BaseModel):
    name: str | None = None
    title: str | None = None
    bio: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    avatar_url: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None
    twitter_url: str | None = None
