"""Fixed values of the New Relic SCIM v2 API."""

BASE_URL = "https://scim-provisioning.service.newrelic.com/scim/v2/"
DEFAULT_TIMEOUT = 20.0

USER_PATH = "Users"
GROUP_PATH = "Groups"

USER_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:User"
GROUP_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Group"
PATCH_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:PatchOp"
ERROR_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:Error"

# The API lists the 2.0 extension in "schemas" but keys the attribute on 2.1.
NEWRELIC_USER_SCHEMA = "urn:ietf:params:scim:schemas:extension:newrelic:2.0:User"
NEWRELIC_USER_ATTRIBUTE = "urn:ietf:params:scim:schemas:extension:newrelic:2.1:User"

DEFAULT_TIMEZONE = "Europe/Istanbul"

MEMBERS_PATH = "members"
