"""Built-in role definitions.

Definitions are listed in dependency order: every parent appears before
the roles inheriting from it.
"""

from typing import TYPE_CHECKING, Any

from rolegate.domain.entities.role import RoleKind

if TYPE_CHECKING:
    from rolegate.application.services.role_registry import RoleRegistry

BUILTIN_ROLES: tuple[dict[str, Any], ...] = (
    {
        "id": "user",
        "name": "User",
        "permissions": ["user:voice", "command:run", "quote:run"],
    },
    {
        "id": "regular",
        "name": "Regular",
        "permissions": ["quote:add"],
        "inherits": ["User"],
        "boost": 0.1,
    },
    {
        "id": "moderator",
        "name": "Moderator",
        "permissions": [
            "user:timeout",
            "channel:command:add",
            "channel:command:edit",
            "channel:command:delete",
            "channel:quote:delete",
        ],
        "inherits": ["Regular"],
        "boost": 0.2,
    },
    {
        "id": "owner",
        "name": "Owner",
        "permissions": ["channel:*"],
        "inherits": ["Moderator"],
        "boost": 0.3,
    },
    {
        "id": "developer",
        "name": "Developer",
        "permissions": ["*"],
        "inherits": ["Owner"],
    },
)


def register_builtin_roles(registry: "RoleRegistry") -> None:
    """Register every built-in role as an internal role."""
    for definition in BUILTIN_ROLES:
        registry.create(kind=RoleKind.INTERNAL, **definition)
