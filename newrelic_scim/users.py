"""User endpoints of the New Relic SCIM API."""
from __future__ import annotations

from .constants import USER_PATH
from .filters import eq_filter
from .models.user import User, UserErrorResponse, UserResponse, UsersResponse, UserType, UserTypeBody
from .response import SCIMResult, decode_response
from .utils.telemetry import traced


class UserOperations:
    """Operations on ``/Users``; mixed into :class:`newrelic_scim.client.Client`."""

    @traced("GET", USER_PATH)
    def list_users(self) -> SCIMResult:
        raw = self._do_request("GET", USER_PATH)
        return decode_response(raw, UsersResponse, UserErrorResponse)

    @traced("GET", USER_PATH)
    def get_user_by_id(self, user_id: str) -> SCIMResult:
        raw = self._do_request("GET", f"{USER_PATH}/{user_id}")
        return decode_response(raw, UserResponse, UserErrorResponse)

    @traced("GET", USER_PATH)
    def get_user_by_name(self, user_name: str) -> SCIMResult:
        """Search users with ``userName eq "<user_name>"``.

        The server answers a filter query with a list response, so the
        result holds a :class:`UsersResponse`.
        """
        params = {"filter": eq_filter("userName", user_name)}
        raw = self._do_request("GET", USER_PATH, params=params)
        return decode_response(raw, UsersResponse, UserErrorResponse)

    @traced("POST", USER_PATH)
    def create_user(self, user: User) -> SCIMResult:
        body = user.model_copy(deep=True).fill_defaults()
        raw = self._do_request("POST", USER_PATH, body=body.to_dict())
        return decode_response(raw, UserResponse, UserErrorResponse)

    @traced("PUT", USER_PATH)
    def update_user(self, user_id: str, user: User) -> SCIMResult:
        body = user.model_copy(deep=True).fill_defaults()
        raw = self._do_request("PUT", f"{USER_PATH}/{user_id}", body=body.to_dict())
        return decode_response(raw, UserResponse, UserErrorResponse)

    @traced("PUT", USER_PATH)
    def change_user_type(self, user_id: str, user_type: UserType) -> SCIMResult:
        """Switch the account between Full, Core and Basic user types.

        ``user_type`` is a :class:`UserType` or its display string (``"Core User"``);
        anything else raises ``ValueError`` before a request is sent.
        """
        body = UserTypeBody.for_type(user_type).fill_defaults()
        raw = self._do_request("PUT", f"{USER_PATH}/{user_id}", body=body.to_dict())
        return decode_response(raw, UserResponse, UserErrorResponse)

    @traced("DELETE", USER_PATH)
    def delete_user(self, user_id: str) -> None:
        self._do_request("DELETE", f"{USER_PATH}/{user_id}")
