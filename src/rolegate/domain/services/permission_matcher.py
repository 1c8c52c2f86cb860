"""Wildcard permission matching.

Permission strings are colon-delimited segments, most specific last. A final
segment of ``*`` turns the string into a wildcard grant that matches any
permission starting with the remaining prefix.
"""

SEPARATOR = ":"
WILDCARD = "*"


def is_wildcard(permission: str) -> bool:
    """Check whether the last segment of a permission is the wildcard marker."""
    return permission.split(SEPARATOR)[-1] == WILDCARD


def wildcard_prefix(permission: str) -> str:
    """Get the prefix a wildcard permission grants.

    Args:
        permission: Permission string, e.g. ``channel:*``.

    Returns:
        All segments except the last joined by the separator. A bare ``*``
        yields an empty prefix, which matches every permission.
    """
    return SEPARATOR.join(permission.split(SEPARATOR)[:-1])


def matches_prefix(prefix: str, permission: str) -> bool:
    """Case-insensitive starts-with test of a permission against a prefix."""
    return permission.lower().startswith(prefix.lower())
