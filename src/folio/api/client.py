"""Async HTTP client for the portfolio REST API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from result import Err, Ok, Result

from folio.models.contact import ContactMessage
from folio.models.errors import ApiError
from folio.models.profile import Profile, UpdateProfile
from folio.models.projects import CreateProject, Project, UpdateProject
from folio.models.skills import CreateSkill, Skill, UpdateSkill

logger = logging.getLogger(__name__)

_PROJECT_LIST = TypeAdapter(list[Project])
_SKILL_LIST = TypeAdapter(list[Skill])


class ApiClient:
    """Translates domain operations into REST calls.

    Every public method returns ``Ok(value)`` or ``Err(ApiError)`` and never
    raises: transport failures, non-2xx statuses and malformed bodies are all
    folded into the error side.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # ── Transport ──

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Result[Any, ApiError]:
        """Perform one request and unwrap the ``{success, data, error}`` envelope."""
        try:
            response = await self._client.request(
                method,
                endpoint,
                params=params,
                json=payload,
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, endpoint, exc)
            return Err(ApiError.network())

        body = _decode_body(response)

        if not response.is_success:
            error = _envelope_error(body)
            if error is None:
                error = ApiError.http(response.status_code, response.reason_phrase)
            logger.warning("%s %s -> %s %s", method, endpoint, response.status_code, error.code)
            return Err(error)

        if not isinstance(body, dict) or "success" not in body:
            logger.warning("%s %s returned a malformed body", method, endpoint)
            return Err(ApiError.unknown("Malformed server response"))

        if not body.get("success"):
            error = _envelope_error(body) or ApiError.unknown()
            logger.warning("%s %s reported failure: %s", method, endpoint, error.code)
            return Err(error)

        return Ok(body.get("data"))

    async def _fetch[T](
        self,
        adapter: TypeAdapter[T] | type[BaseModel],
        method: str,
        endpoint: str,
        **kwargs: Any,
    ) -> Result[T, ApiError]:
        """Request ``endpoint`` and validate its ``data`` against ``adapter``."""
        result = await self._request(method, endpoint, **kwargs)
        if isinstance(result, Err):
            return result
        data = result.ok_value
        if data is None:
            return Err(ApiError.unknown("Empty response data"))
        try:
            if isinstance(adapter, TypeAdapter):
                return Ok(adapter.validate_python(data))
            return Ok(adapter.model_validate(data))  # type: ignore[return-value]
        except ValidationError as exc:
            logger.warning("%s %s returned invalid data: %s", method, endpoint, exc)
            return Err(ApiError.unknown("Invalid response data"))

    async def _send(
        self, method: str, endpoint: str, **kwargs: Any
    ) -> Result[None, ApiError]:
        result = await self._request(method, endpoint, **kwargs)
        if isinstance(result, Err):
            return result
        return Ok(None)

    # ── Projects ──

    async def get_projects(
        self, category: str | None = None, featured: bool | None = None
    ) -> Result[list[Project], ApiError]:
        params: dict[str, str] = {}
        if category:
            params["category"] = category
        if featured is not None:
            params["featured"] = "true" if featured else "false"
        return await self._fetch(_PROJECT_LIST, "GET", "/api/projects", params=params or None)

    async def get_project(self, project_id: int) -> Result[Project, ApiError]:
        return await self._fetch(Project, "GET", f"/api/projects/{project_id}")

    async def create_project(self, project: CreateProject) -> Result[Project, ApiError]:
        return await self._fetch(
            Project, "POST", "/api/projects", payload=project.model_dump(exclude_none=True)
        )

    async def update_project(
        self, project_id: int, project: UpdateProject
    ) -> Result[Project, ApiError]:
        return await self._fetch(
            Project,
            "PUT",
            f"/api/projects/{project_id}",
            payload=project.model_dump(exclude_unset=True),
        )

    async def delete_project(self, project_id: int) -> Result[None, ApiError]:
        return await self._send("DELETE", f"/api/projects/{project_id}")

    # ── Skills ──

    async def get_skills(self, category: str | None = None) -> Result[list[Skill], ApiError]:
        params = {"category": category} if category else None
        return await self._fetch(_SKILL_LIST, "GET", "/api/skills", params=params)

    async def create_skill(self, skill: CreateSkill) -> Result[Skill, ApiError]:
        return await self._fetch(
            Skill, "POST", "/api/skills", payload=skill.model_dump(exclude_none=True)
        )

    async def update_skill(self, skill_id: int, skill: UpdateSkill) -> Result[Skill, ApiError]:
        return await self._fetch(
            Skill, "PUT", f"/api/skills/{skill_id}", payload=skill.model_dump(exclude_unset=True)
        )

    async def delete_skill(self, skill_id: int) -> Result[None, ApiError]:
        return await self._send("DELETE", f"/api/skills/{skill_id}")

    # ── Profile ──

    async def get_profile(self) -> Result[Profile, ApiError]:
        return await self._fetch(Profile, "GET", "/api/profile")

    async def update_profile(self, profile: UpdateProfile) -> Result[Profile, ApiError]:
        return await self._fetch(
            Profile, "PUT", "/api/profile", payload=profile.model_dump(exclude_unset=True)
        )

    # ── Contact ──

    async def send_contact_message(self, message: ContactMessage) -> Result[None, ApiError]:
        return await self._send("POST", "/api/contact", payload=message.model_dump())

    # ── Health ──

    async def health(self) -> Result[bool, ApiError]:
        """Liveness probe. Any 2xx counts as healthy; the body is ignored."""
        try:
            response = await self._client.get("/health")
        except httpx.TransportError as exc:
            logger.warning("GET /health failed: %s", exc)
            return Err(ApiError.network())
        if not response.is_success:
            return Err(ApiError.http(response.status_code, response.reason_phrase))
        return Ok(True)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _envelope_error(body: Any) -> ApiError | None:
    """Return the structured ``error`` of a response body, if it has one."""
    if not isinstance(body, dict):
        return None
    raw = body.get("error")
    if not isinstance(raw, dict):
        return None
    try:
        return ApiError.model_validate(raw)
    except ValidationError:
        return None
