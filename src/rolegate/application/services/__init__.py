"""Application services for RoleGate."""

from rolegate.application.services.builtin_roles import (
    BUILTIN_ROLES,
    register_builtin_roles,
)
from rolegate.application.services.role_registry import RoleRegistry

__all__ = [
    "BUILTIN_ROLES",
    "RoleRegistry",
    "register_builtin_roles",
]
