"""Domain entities for RoleGate.

Entities represent core authorization concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from rolegate.domain.entities.role import Role, RoleKind

__all__ = [
    "Role",
    "RoleKind",
]
