"""Permission checking utilities.

The evaluator is a pure function of two permission sets and a
combination mode. It knows nothing about roles: the Super Admin bypass
lives in the policy engine, not here.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Union

from .permissions import Permission


class CombinationMode(str, Enum):
    """How a set of required permissions is combined."""

    ANY = "any"    # at least one required permission held
    ALL = "all"    # every required permission held


PermissionLike = Union[str, Permission]


def _as_permissions(permissions: Iterable[PermissionLike]) -> FrozenSet[Permission]:
    return frozenset(Permission(p) for p in permissions)


def satisfies_permissions(
    held: Iterable[Permission],
    required: Iterable[Permission],
    mode: CombinationMode = CombinationMode.ANY,
) -> bool:
    """Check a held permission set against a requirement.

    Args:
        held: Permissions the actor carries
        required: Permissions the requirement names
        mode: ANY needs a non-empty intersection, ALL needs a subset

    Returns:
        True if the requirement is satisfied. An empty requirement passes.
    """
    required = frozenset(required)
    if not required:
        return True

    held = frozenset(held)
    if mode is CombinationMode.ALL:
        return required <= held
    return not required.isdisjoint(held)


def missing_permissions(
    held: Iterable[Permission],
    required: Iterable[Permission],
    mode: CombinationMode = CombinationMode.ANY,
) -> FrozenSet[Permission]:
    """Permissions that would have to be granted for the requirement to pass.

    For ALL this is the set difference. For ANY, holding none of the
    required permissions reports the whole required set (any one of them
    would do); otherwise nothing is missing.
    """
    required = frozenset(required)
    held = frozenset(held)
    if mode is CombinationMode.ALL:
        return required - held
    if required and required.isdisjoint(held):
        return required
    return frozenset()


class PermissionChecker:
    """Checks an actor's explicitly granted permissions."""

    def __init__(self, user_permissions: Iterable[PermissionLike]):
        """
        Initialize with the actor's permissions.

        Args:
            user_permissions: Permission enum members or their string values

        Raises:
            ValueError: If a permission string is not in the catalog
        """
        self.permissions = _as_permissions(user_permissions)

    def has_permission(self, permission: PermissionLike) -> bool:
        """Check if the actor holds a specific permission."""
        return Permission(permission) in self.permissions

    def has_any_permission(self, permissions: Iterable[PermissionLike]) -> bool:
        """Check if the actor has any of the given permissions."""
        return self.satisfies(permissions, CombinationMode.ANY)

    def has_all_permissions(self, permissions: Iterable[PermissionLike]) -> bool:
        """Check if the actor has all of the given permissions."""
        return self.satisfies(permissions, CombinationMode.ALL)

    def satisfies(
        self,
        permissions: Iterable[PermissionLike],
        mode: CombinationMode = CombinationMode.ANY,
    ) -> bool:
        """Check a permission requirement under the given combination mode."""
        return satisfies_permissions(self.permissions, _as_permissions(permissions), mode)

    def missing(
        self,
        permissions: Iterable[PermissionLike],
        mode: CombinationMode = CombinationMode.ANY,
    ) -> FrozenSet[Permission]:
        """Get the permissions standing between the actor and the requirement."""
        return missing_permissions(self.permissions, _as_permissions(permissions), mode)
