"""User wire models."""
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field

from ..constants import DEFAULT_TIMEZONE, NEWRELIC_USER_ATTRIBUTE, NEWRELIC_USER_SCHEMA, USER_SCHEMA
from .base import ErrorResponse, MemberReference, Meta, SCIMBaseModel


class UserType(str, Enum):
    FULL = "Full User"
    CORE = "Core User"
    BASIC = "Basic User"


class Name(SCIMBaseModel):
    family_name: str = Field(default="", alias="familyName")
    given_name: str = Field(default="", alias="givenName")


class Email(SCIMBaseModel):
    value: str = ""
    primary: bool = False


class User(SCIMBaseModel):
    """Outgoing user payload for create and update requests."""

    schemas: List[str] = Field(default_factory=list)
    user_name: str = Field(default="", alias="userName")
    name: Name = Field(default_factory=Name)
    emails: List[Email] = Field(default_factory=list)
    active: bool = False
    timezone: str = ""

    def fill_defaults(self) -> "User":
        """Set the core User schema and default timezone when they are empty."""

        if not self.schemas:
            self.schemas = [USER_SCHEMA]
        if not self.timezone:
            self.timezone = DEFAULT_TIMEZONE
        return self


class UserResponse(SCIMBaseModel):
    schemas: List[str] = Field(default_factory=list)
    id: str = ""
    external_id: str = Field(default="", alias="externalId")
    user_name: str = Field(default="", alias="userName")
    name: Name = Field(default_factory=Name)
    emails: List[Email] = Field(default_factory=list)
    timezone: str = ""
    active: bool = False
    meta: Meta = Field(default_factory=Meta)
    groups: List[MemberReference] = Field(default_factory=list)


class UsersResponse(SCIMBaseModel):
    total_results: int = Field(default=0, alias="totalResults")
    schemas: List[str] = Field(default_factory=list)
    resources: List[UserResponse] = Field(default_factory=list, alias="Resources")


class UserErrorResponse(ErrorResponse):
    pass


class NewRelicUserExtension(SCIMBaseModel):
    nr_user_type: str = Field(default="", alias="nrUserType")


class UserTypeBody(SCIMBaseModel):
    """PUT body that only changes the New Relic user type of an account."""

    schemas: List[str] = Field(default_factory=list)
    newrelic_user: NewRelicUserExtension = Field(
        default_factory=NewRelicUserExtension, alias=NEWRELIC_USER_ATTRIBUTE
    )

    @classmethod
    def for_type(cls, user_type: UserType) -> "UserTypeBody":
        return cls(newrelic_user=NewRelicUserExtension(nr_user_type=UserType(user_type).value))

    def fill_defaults(self) -> "UserTypeBody":
        if not self.schemas:
            self.schemas = [USER_SCHEMA, NEWRELIC_USER_SCHEMA]
        return self
