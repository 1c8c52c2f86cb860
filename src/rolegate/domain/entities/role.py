"""Role entity for authorization.

A role is a named bundle of permission strings that may be composed from
parent roles. Parent permissions are unioned in once, at construction.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from rolegate.domain.services.permission_matcher import (
    is_wildcard,
    matches_prefix,
    wildcard_prefix,
)
from rolegate.domain.services.slug_generator import kebab_case


class RoleKind(str, Enum):
    """Origin of a role. Descriptive only, matching ignores it."""

    INTERNAL = "internal"
    CUSTOM = "custom"


def union(*sequences: Iterable[str]) -> list[str]:
    """Order-preserving union of string sequences, first seen wins."""
    return list(dict.fromkeys(item for sequence in sequences for item in sequence))


class Role:
    """Role entity for permission resolution.

    Attributes:
        id: Stable identifier.
        name: Display name.
        slug: Kebab-case form of the name, computed once.
        kind: Whether the role is built in or user created.
        raw_permissions: Permissions declared on the role itself.
        permissions: Effective permissions, including inherited ones.
        inherits: Direct parent roles, shared with other children.
        boost: Auxiliary score with no effect on matching.

    Construction never fails on permissions or parents. The one exception is
    ``kind``: a string other than ``internal`` or ``custom`` raises ValueError.
    """

    def __init__(
        self,
        id: str,
        name: str,
        kind: RoleKind | str,
        permissions: Iterable[str],
        inherits: Iterable["Role"] | None = None,
        boost: float = 0,
    ) -> None:
        self._id = id
        self._name = name
        self._slug = kebab_case(name)
        self._kind = RoleKind(kind)
        self._raw_permissions = tuple(permissions)
        self._inherits = tuple(inherits or ())
        self._boost = boost

        self._permissions = union(
            self._raw_permissions,
            *(parent.permissions for parent in self._inherits),
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def kind(self) -> RoleKind:
        return self._kind

    @property
    def boost(self) -> float:
        return self._boost

    @property
    def raw_permissions(self) -> tuple[str, ...]:
        return self._raw_permissions

    @property
    def permissions(self) -> list[str]:
        """Effective permissions. Callers must not mutate the returned list."""
        return self._permissions

    @property
    def inherits(self) -> tuple["Role", ...]:
        return self._inherits

    def has(self, permission: str) -> bool:
        """Check whether the role grants a permission.

        An exact entry always grants. Otherwise the first wildcard entry in
        effective order decides alone: later wildcards are never consulted.

        Args:
            permission: Permission string to check, e.g. ``channel:quote:delete``.

        Returns:
            True if the permission is granted.
        """
        if permission in self._permissions:
            return True

        for granted in self._permissions:
            if is_wildcard(granted):
                return matches_prefix(wildcard_prefix(granted), permission)

        return False

    def has_in_raw(self, permission: str) -> bool:
        """Check for an exact permission among the role's own declared grants."""
        return permission in self._raw_permissions

    def inherits_from(self, name: str) -> bool:
        """Check whether the role is, or transitively inherits, the named role."""
        if self._name == name:
            return True
        return any(parent.inherits_from(name) for parent in self._inherits)

    def set(self, permissions: Iterable[str]) -> "Role":
        """Replace the effective permissions outright.

        Parents are not re-applied. Returns the role for chaining.
        """
        self._permissions = list(permissions)
        return self

    def add(self, permission: str) -> None:
        """Grant a permission if the role does not list it already."""
        if permission not in self._permissions:
            self._permissions.append(permission)

    def remove(self, permission: str) -> None:
        """Drop every occurrence of a permission."""
        self._permissions = [p for p in self._permissions if p != permission]

    def set_boost(self, boost: float) -> float:
        self._boost = boost
        return self._boost

    def to_dict(self) -> dict[str, Any]:
        """Convert the role to a JSON-serializable dictionary."""
        return {
            "id": self._id,
            "name": self._name,
            "slug": self._slug,
            "kind": self._kind.value,
            "boost": self._boost,
            "permissions": list(self._permissions),
            "raw_permissions": list(self._raw_permissions),
            "inherits": [parent.name for parent in self._inherits],
        }

    def __repr__(self) -> str:
        return f"Role(id={self._id!r}, name={self._name!r}, kind={self._kind.value!r})"
