"""Domain services for RoleGate.

Services contain logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure or external frameworks.
"""

from rolegate.domain.services.permission_catalogue import (
    PERMISSION_CATALOGUE,
    describe_permission,
)
from rolegate.domain.services.permission_matcher import (
    SEPARATOR,
    WILDCARD,
    is_wildcard,
    matches_prefix,
    wildcard_prefix,
)
from rolegate.domain.services.slug_generator import kebab_case, split_words

__all__ = [
    "PERMISSION_CATALOGUE",
    "SEPARATOR",
    "WILDCARD",
    "describe_permission",
    "is_wildcard",
    "kebab_case",
    "matches_prefix",
    "split_words",
    "wildcard_prefix",
]
