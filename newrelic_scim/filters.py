"""SCIM filter expressions."""


def eq_filter(attribute: str, value: str) -> str:
    """Return an equality filter such as ``userName eq "jdoe"``.

    Backslashes and double quotes in ``value`` are backslash-escaped so the
    string literal stays well formed.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'{attribute} eq "{escaped}"'
