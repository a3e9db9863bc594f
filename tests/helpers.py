"""Builders and fakes shared by the test modules."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from folio.models.projects import Project
from folio.models.skills import Skill

BASE_URL = "http://portfolio.test"

type Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class FakeHandle:
    delay: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeTimer:
    """Records scheduled callbacks; tests fire them by hand."""

    handles: list[FakeHandle] = field(default_factory=list)

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    def fire_all(self) -> None:
        for handle in self.pending:
            handle.callback()


def envelope(data: Any = None, *, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json={"success": True, "data": data})


def error_envelope(code: str, message: str, *, status: int = 400) -> httpx.Response:
    return httpx.Response(
        status, json={"success": False, "error": {"code": code, "message": message}}
    )


def project_payload(project_id: int = 1, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": project_id,
        "title": f"Project {project_id}",
        "description": "Une application web",
        "technologies": ["Rust", "Svelte"],
        "category": "Web",
        "featured": False,
        "created_at": "2024-01-15T10:30:00Z",
    }
    data.update(overrides)
    return data


def skill_payload(skill_id: int = 1, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": skill_id,
        "name": f"Skill {skill_id}",
        "category": "Backend",
        "level": 3,
        "years_experience": 2,
    }
    data.update(overrides)
    return data


def make_project(project_id: int = 1, **overrides: Any) -> Project:
    return Project.model_validate(project_payload(project_id, **overrides))


def make_skill(skill_id: int = 1, **overrides: Any) -> Skill:
    return Skill.model_validate(skill_payload(skill_id, **overrides))


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None
