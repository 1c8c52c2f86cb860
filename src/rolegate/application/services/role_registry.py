"""Role registry service.

Owns Role instances keyed by name and wires inheritance between them.
Parents must be registered before the children that name them, so roles
are always built in dependency order.
"""

import uuid
from collections.abc import Iterable, Iterator, Mapping

from rolegate.application.services.builtin_roles import register_builtin_roles
from rolegate.core.exceptions import DuplicateRoleError, RoleNotFoundError
from rolegate.core.logging import get_logger
from rolegate.domain.entities.role import Role, RoleKind
from rolegate.domain.services.permission_catalogue import (
    PERMISSION_CATALOGUE,
    describe_permission,
)

logger = get_logger(__name__)


class RoleRegistry:
    """Name to Role lookup table.

    Iteration yields roles in registration order. The registry defines no
    locking; callers sharing one across threads synchronize externally.
    """

    def __init__(self, catalogue: Mapping[str, str] | None = None):
        """Initialize an empty registry.

        Args:
            catalogue: Permission descriptions used by ``describe``.
                Defaults to the built-in catalogue.
        """
        self._roles: dict[str, Role] = {}
        self.catalogue = PERMISSION_CATALOGUE if catalogue is None else catalogue

    @classmethod
    def with_builtin_roles(cls, catalogue: Mapping[str, str] | None = None) -> "RoleRegistry":
        """Create a registry seeded with the built-in roles."""
        registry = cls(catalogue)
        register_builtin_roles(registry)
        return registry

    def register(self, role: Role, replace: bool = False) -> Role:
        """Register a role under its name.

        Args:
            role: Role to register.
            replace: Overwrite an existing role with the same name.

        Returns:
            The registered role.

        Raises:
            DuplicateRoleError: If the name is taken and replace is False.
        """
        if role.name in self._roles and not replace:
            raise DuplicateRoleError(role.name)

        self._roles[role.name] = role
        logger.debug(
            "Registered role",
            role=role.name,
            kind=role.kind.value,
            permissions=len(role.permissions),
        )
        return role

    def create(
        self,
        name: str,
        kind: RoleKind | str,
        permissions: Iterable[str],
        inherits: Iterable[str] = (),
        boost: float = 0,
        id: str | None = None,
    ) -> Role:
        """Build a role from parent names and register it.

        Args:
            name: Role name.
            kind: Role kind.
            permissions: Permissions declared on the role.
            inherits: Names of registered parent roles, in union order.
            boost: Auxiliary score.
            id: Role identifier. Generated when omitted.

        Returns:
            The registered role.

        Raises:
            RoleNotFoundError: If a parent name is not registered.
            DuplicateRoleError: If the name is already registered.
        """
        if name in self._roles:
            raise DuplicateRoleError(name)

        parents = [self.require(parent) for parent in inherits]
        role = Role(
            id=id or uuid.uuid4().hex,
            name=name,
            kind=kind,
            permissions=permissions,
            inherits=parents,
            boost=boost,
        )
        return self.register(role)

    def unregister(self, name: str) -> Role:
        """Remove a role.

        Children built from it keep the permissions they already unioned.

        Raises:
            RoleNotFoundError: If the name is not registered.
        """
        role = self._roles.pop(name, None)
        if role is None:
            raise RoleNotFoundError(name)

        logger.info("Unregistered role", role=name)
        return role

    def get(self, name: str) -> Role | None:
        """Get a role by name, or None if it is not registered."""
        return self._roles.get(name)

    def require(self, name: str) -> Role:
        """Get a role by name.

        Raises:
            RoleNotFoundError: If the name is not registered.
        """
        role = self._roles.get(name)
        if role is None:
            raise RoleNotFoundError(name)
        return role

    def names(self) -> list[str]:
        return list(self._roles)

    def check(self, role_name: str, permission: str) -> bool:
        """Check whether a registered role grants a permission.

        Raises:
            RoleNotFoundError: If the role is not registered.
        """
        granted = self.require(role_name).has(permission)
        logger.debug(
            "Checked permission",
            role=role_name,
            permission=permission,
            granted=granted,
        )
        return granted

    def describe(self, permission: str) -> str | None:
        """Get the catalogue description of a permission."""
        return describe_permission(permission, self.catalogue)

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._roles.values()))

    def __len__(self) -> int:
        return len(self._roles)
