"""Group endpoints of the New Relic SCIM API."""
from __future__ import annotations

from .constants import GROUP_PATH
from .filters import eq_filter
from .models.group import Group, GroupErrorResponse, GroupResponse, GroupsResponse, UpdateGroup
from .response import SCIMResult, decode_response
from .utils.telemetry import traced

ADD = "Add"
REMOVE = "Remove"


class GroupOperations:
    """Operations on ``/Groups``; mixed into :class:`newrelic_scim.client.Client`."""

    @traced("GET", GROUP_PATH)
    def list_groups(self) -> SCIMResult:
        raw = self._do_request("GET", GROUP_PATH)
        return decode_response(raw, GroupsResponse, GroupErrorResponse)

    @traced("GET", GROUP_PATH)
    def get_group_by_id(self, group_id: str) -> SCIMResult:
        raw = self._do_request("GET", f"{GROUP_PATH}/{group_id}")
        return decode_response(raw, GroupResponse, GroupErrorResponse)

    @traced("GET", GROUP_PATH)
    def get_group_by_name(self, group_name: str) -> SCIMResult:
        params = {"filter": eq_filter("displayName", group_name)}
        raw = self._do_request("GET", GROUP_PATH, params=params)
        return decode_response(raw, GroupsResponse, GroupErrorResponse)

    @traced("POST", GROUP_PATH)
    def create_group(self, group_name: str) -> SCIMResult:
        body = Group(display_name=group_name).fill_defaults()
        raw = self._do_request("POST", GROUP_PATH, body=body.to_dict())
        return decode_response(raw, GroupResponse, GroupErrorResponse)

    @traced("PUT", GROUP_PATH)
    def update_group(self, group_id: str, group_name: str) -> SCIMResult:
        """Replace the group at ``Groups/{group_id}`` with the new display name."""
        body = Group(display_name=group_name).fill_defaults()
        raw = self._do_request("PUT", f"{GROUP_PATH}/{group_id}", body=body.to_dict())
        return decode_response(raw, GroupResponse, GroupErrorResponse)

    @traced("PATCH", GROUP_PATH)
    def group_member_ops(self, group_id: str, user_id: str, operation: str) -> SCIMResult:
        """Apply one ``members`` PatchOp (``Add`` or ``Remove``) for a single user."""
        body = UpdateGroup.member_operation(operation, user_id).fill_defaults()
        raw = self._do_request("PATCH", f"{GROUP_PATH}/{group_id}", body=body.to_dict())
        return decode_response(raw, GroupResponse, GroupErrorResponse)

    def add_user_to_group(self, group_id: str, user_id: str) -> SCIMResult:
        return self.group_member_ops(group_id, user_id, ADD)

    def remove_user_from_group(self, group_id: str, user_id: str) -> SCIMResult:
        return self.group_member_ops(group_id, user_id, REMOVE)

    @traced("DELETE", GROUP_PATH)
    def delete_group(self, group_id: str) -> None:
        self._do_request("DELETE", f"{GROUP_PATH}/{group_id}")
