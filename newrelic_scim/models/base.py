"""Shared base for the SCIM wire models."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SCIMBaseModel(BaseModel):
    """Base model mapping snake_case attributes onto SCIM JSON names.

    Unknown incoming attributes are ignored and JSON ``null`` values are
    dropped before validation, so absent or null fields take the field's
    zero value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serialisable representation using SCIM names."""

        return self.model_dump(mode="json", by_alias=True)


class Meta(SCIMBaseModel):
    resource_type: str = Field(default="", alias="resourceType")
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = Field(default=None, alias="lastModified")


class MemberReference(SCIMBaseModel):
    """A group membership entry (``groups`` on users, ``members`` on groups)."""

    type: str = ""
    value: str = ""
    display: str = ""


class ErrorResponse(SCIMBaseModel):
    """Body of a SCIM error message (``urn:...:messages:2.0:Error``)."""

    schemas: List[str] = Field(default_factory=list)
    scim_type: str = Field(default="", alias="scimType")
    detail: str = ""
    status: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _status_as_text(cls, value: Any) -> Any:
        # Some servers send the status as a JSON number.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def has_error(self) -> bool:
        return bool(self.status or self.schemas)
