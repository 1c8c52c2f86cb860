"""Exceptions for role registration and lookup."""

class RoleRegistryError(Exception):
    """Base class for all registry errors."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)

class RoleNotFoundError(RoleRegistryError):
    """Raised when a role name is not registered."""

    def __init__(self, name: str):
        super().__init__(name, f"Role '{name}' is not registered")

class DuplicateRoleError(RoleRegistryError):
    """Raised when registering a role name that is already taken."""

    def __init__(self, name: str):
        super().__init__(name, f"Role '{name}' is already registered")
