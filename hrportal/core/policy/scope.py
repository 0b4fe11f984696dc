"""Data-scope resolution.

Answers two questions for downstream data-fetching code:

* may this actor act on this target boundary (``resolve_scope``), and
* what is the broadest boundary this actor may read for a class of
  records (``effective_scope``).

Scope is independent of role requirements and permission requirements;
only the Super Admin override reaches across departments.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role

from .models import Actor, ScopeType, TargetScope


class ResourceClass(str, Enum):
    """Classes of records that downstream collaborators fetch."""

    USERS = "users"
    PAYROLL = "payroll"
    LEAVE = "leave"
    ALLOWANCES = "allowances"
    DEDUCTIONS = "deductions"
    BONUSES = "bonuses"
    ONBOARDING = "onboarding"
    OFFBOARDING = "offboarding"


# Permissions that widen an actor's read boundary from SELF to DEPARTMENT
DEPARTMENT_SCOPE_PERMISSIONS: Dict[ResourceClass, FrozenSet[Permission]] = {
    ResourceClass.USERS: frozenset([
        Permission.VIEW_ALL_USERS,
        Permission.MANAGE_DEPARTMENT_USERS,
    ]),
    ResourceClass.PAYROLL: frozenset([
        Permission.VIEW_DEPARTMENT_PAYROLL,
        Permission.VIEW_DEPARTMENT_PAYSLIPS,
        Permission.CREATE_PAYROLL,
        Permission.EDIT_PAYROLL,
    ]),
    ResourceClass.LEAVE: frozenset([
        Permission.VIEW_TEAM_LEAVE,
        Permission.APPROVE_LEAVE,
    ]),
    ResourceClass.ALLOWANCES: frozenset([
        Permission.VIEW_DEPARTMENT_ALLOWANCES,
        Permission.MANAGE_DEPARTMENT_ALLOWANCES,
        Permission.VIEW_ALLOWANCES,
        Permission.APPROVE_ALLOWANCES,
    ]),
    ResourceClass.DEDUCTIONS: frozenset([
        Permission.VIEW_DEPARTMENT_DEDUCTIONS,
        Permission.MANAGE_DEPARTMENT_DEDUCTIONS,
        Permission.VIEW_DEDUCTIONS,
    ]),
    ResourceClass.BONUSES: frozenset([
        Permission.VIEW_DEPARTMENT_BONUSES,
        Permission.MANAGE_DEPARTMENT_BONUSES,
        Permission.VIEW_BONUSES,
    ]),
    ResourceClass.ONBOARDING: frozenset([
        Permission.VIEW_ONBOARDING,
        Permission.MANAGE_ONBOARDING,
    ]),
    ResourceClass.OFFBOARDING: frozenset([
        Permission.VIEW_OFFBOARDING,
        Permission.MANAGE_OFFBOARDING,
        Permission.APPROVE_OFFBOARDING,
    ]),
}


def resolve_scope(actor: Actor, target_scope: Optional[TargetScope]) -> bool:
    """
    Check whether an actor may act on a target boundary.

    Args:
        actor: The actor being authorized
        target_scope: Boundary the action targets, or None when unconstrained

    Returns:
        True if the boundary is within the actor's reach
    """
    if target_scope is None:
        return True

    if target_scope.type is ScopeType.SELF:
        return True

    if target_scope.type is ScopeType.DEPARTMENT:
        if actor.role is Role.SUPER_ADMIN:
            return True
        return (
            actor.department_id is not None
            and actor.department_id == target_scope.department_id
        )

    # ScopeType.ALL
    return actor.role is Role.SUPER_ADMIN


def effective_scope(actor: Actor, resource: ResourceClass) -> TargetScope:
    """
    Get the broadest boundary an actor may read for a resource class.

    Super admins read the whole organization. Other actors read their own
    department when they hold one of the resource's department-level
    permissions and belong to a department; otherwise only their own
    records.
    """
    if actor.role is Role.SUPER_ADMIN:
        return TargetScope.organization()

    widening = DEPARTMENT_SCOPE_PERMISSIONS.get(ResourceClass(resource), frozenset())
    if actor.department_id and not widening.isdisjoint(actor.permissions):
        return TargetScope.department(actor.department_id)

    return TargetScope.own()
