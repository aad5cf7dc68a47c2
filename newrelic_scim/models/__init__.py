"""SCIM 2.0 wire models used for New Relic request and response payloads."""
from .base import ErrorResponse, MemberReference, Meta, SCIMBaseModel
from .group import (
    Group,
    GroupErrorResponse,
    GroupResponse,
    GroupsResponse,
    PatchOperation,
    PatchValue,
    UpdateGroup,
)
from .user import (
    Email,
    Name,
    NewRelicUserExtension,
    User,
    UserErrorResponse,
    UserResponse,
    UsersResponse,
    UserType,
    UserTypeBody,
)

__all__ = [
    "Email",
    "ErrorResponse",
    "Group",
    "GroupErrorResponse",
    "GroupResponse",
    "GroupsResponse",
    "MemberReference",
    "Meta",
    "Name",
    "NewRelicUserExtension",
    "PatchOperation",
    "PatchValue",
    "SCIMBaseModel",
    "UpdateGroup",
    "User",
    "UserErrorResponse",
    "UserResponse",
    "UsersResponse",
    "UserType",
    "UserTypeBody",
]
