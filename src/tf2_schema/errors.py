"""
Error classification for failed Steam Web API responses.

Every failed request surfaces as a single ``SteamError`` carrying a
``SteamErrorKind`` and the preserved response (body, status, status text).
Callers branch on ``error.kind`` rather than on exception subclasses.
"""

from __future__ import annotations

import logging
from enum import Enum

import httpx
from pydantic import BaseModel, Field

from .constants import HttpStatus

logger = logging.getLogger("tf2-schema")


class SteamErrorKind(str, Enum):
    """Classification of a failed Steam Web API response."""
    MALFORMED_REQUEST = "malformed_request"
    ACCESS_DENIED = "access_denied"
    REQUEST_TIMEOUT = "request_timeout"
    SERVER_ERROR = "server_error"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UNKNOWN = "unknown"

    @property
    def message(self) -> str:
        """Human-readable message for this kind."""
        return _MESSAGES[self]

    @property
    def retryable(self) -> bool:
        """Whether retrying the same request may succeed."""
        return self in (SteamErrorKind.REQUEST_TIMEOUT, SteamErrorKind.UPSTREAM_UNAVAILABLE)


_MESSAGES: dict[SteamErrorKind, str] = {
    SteamErrorKind.MALFORMED_REQUEST: "The request was malformed or invalid. Check the error cause or try again",
    SteamErrorKind.ACCESS_DENIED: "Access is denied. Retrying will not help. Please verify your API key",
    SteamErrorKind.REQUEST_TIMEOUT: "The request timed out. Please try again later",
    SteamErrorKind.SERVER_ERROR: "An unexpected error occurred when communicating with the Steam Web API",
    SteamErrorKind.UPSTREAM_UNAVAILABLE: "Steam servers are currently unavailable or not responding. Please try again later",
    SteamErrorKind.UNKNOWN: "Unknown error occurred while processing the Steam API response",
}

_STATUS_KINDS: dict[int, SteamErrorKind] = {
    HttpStatus.BAD_REQUEST: SteamErrorKind.MALFORMED_REQUEST,
    HttpStatus.UNAUTHORIZED: SteamErrorKind.ACCESS_DENIED,
    HttpStatus.FORBIDDEN: SteamErrorKind.ACCESS_DENIED,
    HttpStatus.REQUEST_TIMEOUT: SteamErrorKind.REQUEST_TIMEOUT,
    HttpStatus.INTERNAL_SERVER_ERROR: SteamErrorKind.SERVER_ERROR,
    HttpStatus.BAD_GATEWAY: SteamErrorKind.UPSTREAM_UNAVAILABLE,
    HttpStatus.GATEWAY_TIMEOUT: SteamErrorKind.UPSTREAM_UNAVAILABLE,
}


def classify_status(status: int) -> SteamErrorKind:
    """Map an HTTP status code to its error kind."""
    return _STATUS_KINDS.get(status, SteamErrorKind.UNKNOWN)


class ErrorCause(BaseModel):
    """The failed response, kept for diagnostics."""
    body: str = Field(default="", description="Raw response body")
    status: int = Field(description="HTTP status code")
    status_text: str = Field(default="", description="HTTP reason phrase")


class SteamError(Exception):
    """Raised when a Steam Web API request returns a non-success status.

    Attributes:
        kind: Classification of the failure
        message: Fixed message for ``kind``
        cause: The preserved response body, status and status text
    """

    def __init__(self, kind: SteamErrorKind, cause: ErrorCause):
        # args must match the signature so the error survives pickling
        super().__init__(kind, cause)
        self.kind = kind
        self.message = kind.message
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    def __repr__(self) -> str:
        return f"SteamError(kind={self.kind.value!r}, status={self.cause.status})"

    @classmethod
    def from_status(cls, status: int, body: str = "", status_text: str = "") -> "SteamError":
        """Build a classified error from raw response parts."""
        cause = ErrorCause(body=body, status=status, status_text=status_text)
        return cls(classify_status(status), cause)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "SteamError":
        """Build a classified error from a failed ``httpx.Response``.

        The response body must already be loaded, which is the case for
        responses returned by ``AsyncClient.get``.
        """
        error = cls.from_status(response.status_code, response.text, response.reason_phrase)
        logger.debug(f"Steam API responded {error.cause.status} ({error.kind.value})")
        return error
