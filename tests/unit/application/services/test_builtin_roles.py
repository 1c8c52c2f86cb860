"""Unit tests for the built-in roles."""

import pytest

from rolegate.application.services import RoleRegistry


@pytest.fixture(scope="module")
def registry() -> RoleRegistry:
    return RoleRegistry.with_builtin_roles()


def test_moderator_permissions(registry):
    """Test Moderator grants its own and inherited permissions."""
    moderator = registry.require("Moderator")
    assert moderator.has("channel:command:edit") is True
    assert moderator.has("channel:command:cheese") is False
    assert moderator.has("quote:add") is True
    assert moderator.has("user:voice") is True


def test_moderator_inherits(registry):
    """Test the Moderator inheritance chain."""
    moderator = registry.require("Moderator")
    assert moderator.inherits_from("Moderator") is True
    assert moderator.inherits_from("User") is True
    assert moderator.inherits_from("Cheese") is False


def test_user_has_no_channel_permissions(registry):
    """Test User is the least privileged role."""
    user = registry.require("User")
    assert user.has("user:voice") is True
    assert user.has("channel:quote:delete") is False
    assert user.inherits == ()


def test_owner_channel_wildcard(registry):
    """Test Owner's wildcard covers any channel permission."""
    owner = registry.require("Owner")
    assert owner.permissions[0] == "channel:*"
    assert owner.has("channel:settings:edit") is True
    assert owner.has("user:timeout") is True
    assert owner.has("billing:refund") is False


def test_developer_grants_everything(registry):
    """Test the bare wildcard grants any permission."""
    developer = registry.require("Developer")
    assert developer.has("billing:refund") is True
    assert developer.has_in_raw("billing:refund") is False
    assert developer.inherits_from("User") is True


@pytest.mark.parametrize(
    ("name", "slug", "boost"),
    [
        ("User", "user", 0),
        ("Regular", "regular", 0.1),
        ("Moderator", "moderator", 0.2),
        ("Owner", "owner", 0.3),
        ("Developer", "developer", 0),
    ],
)
def test_builtin_attributes(registry, name, slug, boost):
    """Test slugs and boosts of the built-in roles."""
    role = registry.require(name)
    assert role.slug == slug
    assert role.boost == boost
    assert role.id == slug
