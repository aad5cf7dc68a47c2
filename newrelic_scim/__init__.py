"""
New Relic SCIM client

Python client for the New Relic SCIM v2 provisioning API:
- Users: list, lookup by id or userName, create, update, change user type, delete
- Groups: list, lookup by id or displayName, create, update, member add/remove, delete
"""

from .client import Client, new_client
from .errors import CodecError, SCIMClientError, TransportError
from .models import Group, User, UserType
from .response import SCIMResult

__version__ = "0.1.0"

__all__ = [
    "Client",
    "CodecError",
    "Group",
    "SCIMClientError",
    "SCIMResult",
    "TransportError",
    "User",
    "UserType",
    "new_client",
]
