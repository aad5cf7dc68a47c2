import json

import pytest

from newrelic_scim.constants import BASE_URL, DEFAULT_TIMEZONE, NEWRELIC_USER_ATTRIBUTE, NEWRELIC_USER_SCHEMA, USER_SCHEMA
from newrelic_scim.models import User, UserResponse, UsersResponse, UserType
from newrelic_scim.models.user import Email, Name

USER_BODY = {
    "schemas": [USER_SCHEMA],
    "id": "u-123",
    "externalId": "ext-1",
    "userName": "jdoe@example.com",
    "name": {"familyName": "Doe", "givenName": "Jane"},
    "emails": [{"value": "jdoe@example.com", "primary": True}],
    "timezone": "Europe/Istanbul",
    "active": True,
    "meta": {
        "resourceType": "User",
        "created": "2023-03-01T10:00:00Z",
        "lastModified": "2023-03-02T10:00:00Z",
    },
    "groups": [],
}


@pytest.fixture
def user_server(scim_server):
    scim_server.content = json.dumps(USER_BODY).encode()
    return scim_server


def test_list_users(client, scim_server):
    scim_server.content = (
        b'{"totalResults": 1, "schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"],'
        b' "Resources": [{"id": "u-1", "userName": "a", "groups": [{"type": "Group", "value": "g-1"}]}]}'
    )

    result = client.list_users()

    assert scim_server.last_request.method == "GET"
    assert str(scim_server.last_request.url) == f"{BASE_URL}Users"
    assert isinstance(result.response, UsersResponse)
    assert result.response.resources[0].groups[0].value == "g-1"


def test_get_user_by_id(client, user_server):
    result = client.get_user_by_id("u-123")

    assert str(user_server.last_request.url) == f"{BASE_URL}Users/u-123"
    assert isinstance(result.response, UserResponse)
    assert result.response.external_id == "ext-1"
    assert result.response.name.given_name == "Jane"


def test_get_user_by_name_builds_filter(client, scim_server):
    scim_server.content = b'{"totalResults": 0, "schemas": [], "Resources": []}'

    result = client.get_user_by_name("jdoe")

    request = scim_server.last_request
    assert request.url.path.endswith("/Users")
    assert request.url.params["filter"] == 'userName eq "jdoe"'
    assert result.response.total_results == 0


def test_create_user_fills_defaults(client, user_server):
    user = User(
        user_name="jdoe@example.com",
        name=Name(family_name="Doe", given_name="Jane"),
        emails=[Email(value="jdoe@example.com", primary=True)],
        active=True,
    )

    result = client.create_user(user)

    assert user_server.last_request.method == "POST"
    assert str(user_server.last_request.url) == f"{BASE_URL}Users"
    body = user_server.last_json()
    assert body["schemas"] == [USER_SCHEMA]
    assert body["timezone"] == DEFAULT_TIMEZONE
    assert body["userName"] == "jdoe@example.com"
    assert result.response.id == "u-123"
    assert user.schemas == []


def test_update_user_targets_id(client, user_server):
    client.update_user("u-123", User(user_name="jdoe", schemas=["custom"], timezone="UTC"))

    assert user_server.last_request.method == "PUT"
    assert str(user_server.last_request.url) == f"{BASE_URL}Users/u-123"
    body = user_server.last_json()
    assert body["schemas"] == ["custom"]
    assert body["timezone"] == "UTC"


@pytest.mark.parametrize(
    "user_type, expected",
    [(UserType.FULL, "Full User"), (UserType.CORE, "Core User"), (UserType.BASIC, "Basic User")],
)
def test_change_user_type(client, user_server, user_type, expected):
    client.change_user_type("u-123", user_type)

    assert user_server.last_request.method == "PUT"
    assert str(user_server.last_request.url) == f"{BASE_URL}Users/u-123"
    assert user_server.last_json() == {
        "schemas": [USER_SCHEMA, NEWRELIC_USER_SCHEMA],
        NEWRELIC_USER_ATTRIBUTE: {"nrUserType": expected},
    }


def test_delete_user_ignores_body(client, scim_server):
    scim_server.status_code = 204
    scim_server.content = b"not json at all"

    assert client.delete_user("u-123") is None
    assert scim_server.last_request.method == "DELETE"
    assert str(scim_server.last_request.url) == f"{BASE_URL}Users/u-123"


def test_get_user_by_name_escapes_quotes(client, scim_server):
    client.get_user_by_name('a"b')

    assert scim_server.last_request.url.params["filter"] == 'userName eq "a\\"b"'


def test_change_user_type_rejects_short_name(client, scim_server):
    with pytest.raises(ValueError):
        client.change_user_type("u-123", "Core")

    assert scim_server.requests == []
