"""Demonstrate SCIM group provisioning with the New Relic client."""
import sys

from newrelic_scim import Client


def main(user_id: str) -> None:
    try:
        client = Client.from_settings()
    except ValueError as exc:
        print(f"[WARN] SCIM client disabled: {exc}")
        return

    with client:
        created, error = client.create_group("Test-Group")
        if error.has_error:
            print(f"Create failed: {error.detail}")
            return
        print(f"Created group {created.display_name} ({created.id})")

        _, error = client.add_user_to_group(created.id, user_id)
        print(error.detail if error.has_error else f"Added {user_id}")

        found, _ = client.get_group_by_name("Test-Group")
        for group in found.resources:
            print(f"{group.display_name}: {[member.value for member in group.members]}")

        _, error = client.remove_user_from_group(created.id, user_id)
        print(error.detail if error.has_error else f"Removed {user_id}")

        client.delete_group(created.id)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: group_demo.py <user-id>")
        raise SystemExit(2)
    main(sys.argv[1])
