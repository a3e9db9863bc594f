"""Pure projections over store state and display helpers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from folio.models.projects import Project
from folio.models.skills import Skill

ALL_CATEGORIES = "all"

SKILL_LEVEL_LABELS: tuple[str, ...] = (
    "Débutant",
    "Intermédiaire",
    "Confirmé",
    "Expert",
    "Maître",
)
MAX_SKILL_LEVEL = len(SKILL_LEVEL_LABELS)


class _Categorized(Protocol):
    @property
    def category(self) -> str: ...


def featured_projects(projects: list[Project]) -> list[Project]:
    """Projects flagged as featured, in source order."""
    return [project for project in projects if project.featured]


def categories(items: Iterable[_Categorized]) -> list[str]:
    """Distinct category labels, sorted case-sensitively."""
    return sorted({item.category for item in items})


def group_skills_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    """Group skills by category; each group by level desc, then name asc."""
    grouped: dict[str, list[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    for group in grouped.values():
        group.sort(key=lambda skill: (-skill.level, skill.name))
    return grouped


def skill_level_label(level: int) -> str:
    """Human label for a 1-5 level. Out-of-range levels fall back to level 1."""
    if 1 <= level <= MAX_SKILL_LEVEL:
        return SKILL_LEVEL_LABELS[level - 1]
    return SKILL_LEVEL_LABELS[0]


def skill_level_indicators(level: int) -> list[str]:
    """Five ``filled``/``empty`` markers for a level gauge."""
    return ["filled" if index < level else "empty" for index in range(MAX_SKILL_LEVEL)]


def filter_projects(
    projects: list[Project], category: str = ALL_CATEGORIES, query: str = ""
) -> list[Project]:
    """Filter by category (``"all"`` for none) and a case-insensitive search query.

    The query matches against title, description and technology names.
    """
    needle = query.lower()

    def matches(project: Project) -> bool:
        if category != ALL_CATEGORIES and project.category != category:
            return False
        if not needle:
            return True
        return (
            needle in project.title.lower()
            or needle in project.description.lower()
            or any(needle in tech.lower() for tech in project.technologies)
        )

    return [project for project in projects if matches(project)]


def sort_projects(projects: list[Project], featured_first: bool = False) -> list[Project]:
    """Newest first, optionally with featured projects ahead of the rest."""
    by_date = sorted(projects, key=lambda p: _parse_timestamp(p.created_at), reverse=True)
    if featured_first:
        # stable: keeps date order within each group
        return sorted(by_date, key=lambda p: not p.featured)
    return by_date


def category_count(projects: list[Project], category: str) -> int:
    if category == ALL_CATEGORIES:
        return len(projects)
    return sum(1 for project in projects if project.category == category)


def _parse_timestamp(value: str) -> float:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    except ValueError:
        return 0.0
