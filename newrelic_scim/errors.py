"""Exceptions raised by the SCIM client.

SCIM error payloads returned with a 2xx status are *not* raised; they are
returned as ``error_response`` on the operation result.
"""
from __future__ import annotations

from typing import Optional


class SCIMClientError(Exception):
    """Base class for every error raised by :mod:`newrelic_scim`."""


class TransportError(SCIMClientError):
    """The HTTP exchange failed or returned a status outside 200-299.

    ``status_code`` is ``None`` for network failures, in which case the
    underlying ``httpx`` exception is available as ``__cause__``.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, body: bytes) -> "TransportError":
        text = body.decode("utf-8", errors="replace")
        return cls(f"error body: {text}\nstatus Code: {status_code}", status_code=status_code, body=body)


class CodecError(SCIMClientError, ValueError):
    """A request or response body could not be encoded or decoded."""
