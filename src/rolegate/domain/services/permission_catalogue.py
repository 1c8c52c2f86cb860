"""Catalogue of known permission strings and what they allow."""

from collections.abc import Mapping
from types import MappingProxyType

PERMISSION_CATALOGUE: Mapping[str, str] = MappingProxyType(
    {
        "*": "Grants every permission.",
        "user:voice": "Allow the bot to process the users messages.",
        "user:timeout": "Allow the user to time out other users.",
        "command:run": "Allow the user to run commands.",
        "quote:run": "Allow the user to fetch quotes.",
        "quote:add": "Allow the user to add quotes.",
        "channel:*": "Grants every channel permission.",
        "channel:command:add": "Allow the user to add channel commands.",
        "channel:command:edit": "Allow the user to edit channel commands.",
        "channel:command:delete": "Allow the user to delete channel commands.",
        "channel:quote:delete": "Allow the user to delete channel quotes.",
    }
)


def describe_permission(
    permission: str, catalogue: Mapping[str, str] | None = None
) -> str | None:
    """Look up the description of a permission.

    Args:
        permission: Exact permission string.
        catalogue: Catalogue to search. Defaults to the built-in one.

    Returns:
        The description, or None for unknown permissions.
    """
    return (PERMISSION_CATALOGUE if catalogue is None else catalogue).get(permission)
