"""Pytest configuration for all tests."""

import pytest
import structlog

from rolegate.core.config import get_settings
from rolegate.domain.entities.role import Role, RoleKind


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    """Restore default structlog config and clear cached settings between tests.

    CLI tests configure structlog against the runner's stream, which is
    closed once the invocation ends.
    """
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def user_role() -> Role:
    """A parentless internal role."""
    return Role(
        id="user",
        name="User",
        kind=RoleKind.INTERNAL,
        permissions=["user:voice", "command:run"],
    )


@pytest.fixture
def moderator_role(user_role: Role) -> Role:
    """An internal role inheriting from User."""
    return Role(
        id="moderator",
        name="Moderator",
        kind=RoleKind.INTERNAL,
        permissions=["channel:command:edit", "channel:quote:delete"],
        inherits=[user_role],
        boost=0.2,
    )
