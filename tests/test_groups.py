import pytest

from newrelic_scim import TransportError
from newrelic_scim.constants import BASE_URL, ERROR_SCHEMA, GROUP_SCHEMA
from newrelic_scim.models import GroupErrorResponse, GroupResponse, GroupsResponse

GROUP_BODY = (
    b'{"schemas": ["' + GROUP_SCHEMA.encode() + b'"], "id": "g-456", "displayName": "Admins",'
    b' "meta": {"resourceType": "Group", "created": "2023-03-01T10:00:00Z",'
    b' "lastModified": "2023-03-01T10:00:00Z"},'
    b' "members": [{"type": "User", "value": "u-123"}]}'
)


@pytest.fixture
def group_server(scim_server):
    scim_server.content = GROUP_BODY
    return scim_server


def test_list_groups(client, scim_server):
    scim_server.content = b'{"totalResults": 1, "schemas": [], "Resources": [{"id": "g-1", "displayName": "Ops"}]}'

    result = client.list_groups()

    assert str(scim_server.last_request.url) == f"{BASE_URL}Groups"
    assert isinstance(result.response, GroupsResponse)
    assert result.response.resources[0].display_name == "Ops"


def test_get_group_by_id(client, group_server):
    result = client.get_group_by_id("g-456")

    assert str(group_server.last_request.url) == f"{BASE_URL}Groups/g-456"
    assert isinstance(result.response, GroupResponse)
    assert result.response.members[0].value == "u-123"
    assert result.response.meta.resource_type == "Group"


def test_get_group_by_name_builds_filter(client, scim_server):
    scim_server.content = b'{"totalResults": 0, "schemas": [], "Resources": []}'

    client.get_group_by_name("Admins")

    assert scim_server.last_request.url.params["filter"] == 'displayName eq "Admins"'


def test_create_group(client, group_server):
    result = client.create_group("Admins")

    assert group_server.last_request.method == "POST"
    assert str(group_server.last_request.url) == f"{BASE_URL}Groups"
    assert group_server.last_json() == {"schemas": [GROUP_SCHEMA], "displayName": "Admins"}
    assert result.response.id == "g-456"


def test_update_group_targets_id(client, group_server):
    client.update_group("g-456", "Administrators")

    assert group_server.last_request.method == "PUT"
    assert str(group_server.last_request.url) == f"{BASE_URL}Groups/g-456"
    assert group_server.last_json() == {"schemas": [GROUP_SCHEMA], "displayName": "Administrators"}


def test_add_user_to_group(client, group_server):
    client.add_user_to_group("g-456", "u-123")

    assert group_server.last_request.method == "PATCH"
    assert str(group_server.last_request.url) == f"{BASE_URL}Groups/g-456"
    assert group_server.last_json() == {
        "schemas": ["urn:ietf:params:scim:api:messages:2.0:PatchOp"],
        "Operations": [{"op": "Add", "path": "members", "value": [{"value": "u-123"}]}],
    }


def test_remove_user_from_group(client, group_server):
    client.remove_user_from_group("g-456", "u-123")

    assert group_server.last_json()["Operations"][0]["op"] == "Remove"


def test_member_op_error_response(client, scim_server):
    scim_server.content = (
        b'{"schemas": ["' + ERROR_SCHEMA.encode() + b'"], "detail": "no such member", "status": "404"}'
    )

    result = client.group_member_ops("g-456", "u-999", "Add")

    assert isinstance(result.error_response, GroupErrorResponse)
    assert result.error_response.status == "404"
    assert result.error_response.detail == "no such member"


def test_delete_group(client, scim_server):
    scim_server.status_code = 204
    scim_server.content = b""

    assert client.delete_group("g-456") is None
    assert scim_server.last_request.method == "DELETE"
    assert str(scim_server.last_request.url) == f"{BASE_URL}Groups/g-456"


def test_delete_group_failure(client, scim_server):
    scim_server.status_code = 500
    scim_server.content = b"boom"

    with pytest.raises(TransportError) as exc_info:
        client.delete_group("g-456")

    assert exc_info.value.status_code == 500
