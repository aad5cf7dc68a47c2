"""Two-pass decoding of SCIM response bodies."""
from __future__ import annotations

import logging
from typing import Any, NamedTuple, Type

from pydantic import ValidationError

from .constants import ERROR_SCHEMA
from .errors import CodecError
from .models.base import ErrorResponse, SCIMBaseModel

logger = logging.getLogger(__name__)


class SCIMResult(NamedTuple):
    """Outcome of a SCIM call that reached the server and returned 2xx.

    ``error_response`` is zero-valued unless the body declared the SCIM
    error schema, in which case ``response`` holds whatever fields of the
    success shape could be read and should not be trusted.
    """

    response: Any
    error_response: ErrorResponse

    @property
    def ok(self) -> bool:
        return not self.error_response.has_error


def decode_response(
    raw: bytes,
    success_model: Type[SCIMBaseModel],
    error_model: Type[ErrorResponse],
) -> SCIMResult:
    """Decode ``raw`` into ``success_model``; re-decode as ``error_model`` on the error sentinel."""

    response = _decode(raw, success_model)
    error_response = error_model()

    schemas = getattr(response, "schemas", None) or []
    if schemas and schemas[0] == ERROR_SCHEMA:
        error_response = _decode(raw, error_model)
        logger.info(
            "SCIM error response: status=%s scimType=%s detail=%s",
            error_response.status,
            error_response.scim_type,
            error_response.detail,
        )

    return SCIMResult(response, error_response)


def _decode(raw: bytes, model: Type[SCIMBaseModel]) -> Any:
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise CodecError(f"could not decode {model.__name__}: {exc}") from exc
