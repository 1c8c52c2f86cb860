"""Core RoleGate utilities.

This module exports core utilities for use throughout the application.
"""

from rolegate.core.config import Settings, get_settings
from rolegate.core.exceptions import (
    DuplicateRoleError,
    RoleNotFoundError,
    RoleRegistryError,
)
from rolegate.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "DuplicateRoleError",
    "RoleNotFoundError",
    "RoleRegistryError",
]
