"""Demonstrate user provisioning against the New Relic SCIM API."""

from newrelic_scim import Client, TransportError, User, UserType
from newrelic_scim.models.user import Email, Name


def main() -> None:
    try:
        client = Client.from_settings()
    except ValueError as exc:
        print(f"SCIM client not configured: {exc}")
        return

    with client:
        user = User(
            user_name="newuser@contoso.com",
            name=Name(given_name="New", family_name="User"),
            emails=[Email(value="newuser@contoso.com", primary=True)],
            active=True,
        )

        print("\n--- Joiner workflow ---")
        created, error = client.create_user(user)
        if error.has_error:
            print(f"Create failed: {error.status} {error.detail}")
            return
        print(f"Created {created.user_name} ({created.id})")

        print("\n--- Mover workflow ---")
        _, error = client.change_user_type(created.id, UserType.CORE)
        print(error.detail if error.has_error else "User type set to Core User")

        print("\n--- Leaver workflow ---")
        try:
            client.delete_user(created.id)
        except TransportError as exc:
            print(f"Delete failed: {exc}")
            return
        print(f"Deleted {created.id}")


if __name__ == "__main__":
    main()
