"""RBAC (Role-Based Access Control) primitives for the HR portal.

This module defines the permission catalog, the role hierarchy, and the
permission evaluator.
"""

from .permissions import Permission, PermissionCategory, PERMISSION_CATEGORIES
from .roles import Role, ROLE_HIERARCHY, satisfies_role
from .checker import CombinationMode, PermissionChecker, satisfies_permissions

__all__ = [
    "Permission",
    "PermissionCategory",
    "PERMISSION_CATEGORIES",
    "Role",
    "ROLE_HIERARCHY",
    "satisfies_role",
    "CombinationMode",
    "PermissionChecker",
    "satisfies_permissions",
]
