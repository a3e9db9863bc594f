"""Normalized API error model."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, field_validator

NETWORK_ERROR = "NETWORK_ERROR"
HTTP_ERROR = "HTTP_ERROR"
UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ErrorKind(StrEnum):
    """Broad category of an API failure."""

    NETWORK = "network"
    HTTP = "http"
    SERVER = "server"
    UNKNOWN = "unknown"


class ApiError(BaseModel):
    """Error payload, either produced locally or passed through from the server."""

    code: str
    message: str
    details: list[str] | None = None

    @field_validator("code", mode="before")
    @classmethod
    def code_as_text(cls, v: object) -> object:
        """The backend sends its HTTP status as an integer code."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("details", mode="before")
    @classmethod
    def details_as_list(cls, v: object) -> object:
        if isinstance(v, str):
            return [v]
        return v

    @property
    def kind(self) -> ErrorKind:
        match self.code:
            case "NETWORK_ERROR":
                return ErrorKind.NETWORK
            case "HTTP_ERROR":
                return ErrorKind.HTTP
            case "UNKNOWN_ERROR":
                return ErrorKind.UNKNOWN
            case _:
                return ErrorKind.SERVER

    @classmethod
    def network(cls) -> ApiError:
        return cls(code=NETWORK_ERROR, message="Failed to connect to server")

    @classmethod
    def http(cls, status: int, reason: str) -> ApiError:
        return cls(code=HTTP_ERROR, message=f"HTTP {status}: {reason}")

    @classmethod
    def unknown(cls, message: str = "Unknown error occurred") -> ApiError:
        return cls(code=UNKNOWN_ERROR, message=message)
