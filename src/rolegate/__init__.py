"""RoleGate - role-based permission resolution.

Roles compose permission strings from parent roles and answer membership
queries with hierarchical wildcard matching.
"""

__version__ = "0.1.0"

from rolegate.application.services.role_registry import RoleRegistry
from rolegate.domain.entities.role import Role, RoleKind

__all__ = ["Role", "RoleKind", "RoleRegistry", "__version__"]
