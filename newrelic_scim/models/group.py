"""Group wire models."""
from __future__ import annotations

from typing import List

from pydantic import Field

from ..constants import GROUP_SCHEMA, MEMBERS_PATH, PATCH_SCHEMA
from .base import ErrorResponse, MemberReference, Meta, SCIMBaseModel


class Group(SCIMBaseModel):
    schemas: List[str] = Field(default_factory=list)
    display_name: str = Field(default="", alias="displayName")

    def fill_defaults(self) -> "Group":
        if not self.schemas:
            self.schemas = [GROUP_SCHEMA]
        return self


class GroupResponse(SCIMBaseModel):
    schemas: List[str] = Field(default_factory=list)
    id: str = ""
    display_name: str = Field(default="", alias="displayName")
    meta: Meta = Field(default_factory=Meta)
    members: List[MemberReference] = Field(default_factory=list)


class GroupsResponse(SCIMBaseModel):
    total_results: int = Field(default=0, alias="totalResults")
    schemas: List[str] = Field(default_factory=list)
    resources: List[GroupResponse] = Field(default_factory=list, alias="Resources")


class GroupErrorResponse(ErrorResponse):
    pass


class PatchValue(SCIMBaseModel):
    value: str = ""


class PatchOperation(SCIMBaseModel):
    op: str = ""
    path: str = ""
    value: List[PatchValue] = Field(default_factory=list)


class UpdateGroup(SCIMBaseModel):
    """SCIM PatchOp message sent to ``Groups/{id}``."""

    schemas: List[str] = Field(default_factory=list)
    operations: List[PatchOperation] = Field(default_factory=list, alias="Operations")

    @classmethod
    def member_operation(cls, operation: str, user_id: str) -> "UpdateGroup":
        """Build a single ``members`` operation (``Add`` or ``Remove``) for one user."""

        return cls(
            operations=[
                PatchOperation(op=operation, path=MEMBERS_PATH, value=[PatchValue(value=user_id)])
            ]
        )

    def fill_defaults(self) -> "UpdateGroup":
        if not self.schemas:
            self.schemas = [PATCH_SCHEMA]
        return self
