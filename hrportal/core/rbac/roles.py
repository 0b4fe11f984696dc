"""Role definitions for the HR/payroll portal.

Three roles in a fixed total order:
1. Super Admin - organization-wide access, overrides every role check
2. Admin - department administration, inherits everything a user can do
3. User - self-service access to own records

The hierarchy is a hardcoded table. It is never derived from the size of
a role's permission set, so adding or removing permissions cannot change
who satisfies which role.
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Union

from .permissions import Permission


class Role(str, Enum):
    """Roles an actor can hold. Exactly one per actor."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    USER = "USER"

    def __str__(self) -> str:
        return self.value


# Which required roles each held role satisfies
ROLE_HIERARCHY: Dict[Role, FrozenSet[Role]] = {
    Role.SUPER_ADMIN: frozenset([Role.SUPER_ADMIN, Role.ADMIN, Role.USER]),
    Role.ADMIN: frozenset([Role.ADMIN, Role.USER]),
    Role.USER: frozenset([Role.USER]),
}


def satisfies_role(role: Role, required_roles: Iterable[Role]) -> bool:
    """Check whether a held role satisfies any of the required roles.

    An empty requirement declares no role restriction and always passes.
    """
    required = frozenset(required_roles)
    if not required:
        return True
    return not ROLE_HIERARCHY[role].isdisjoint(required)


def _build_permissions(*perms: Permission) -> FrozenSet[Permission]:
    return frozenset(perms)


P = Permission

# Super Admin: full organizational permission set
SUPER_ADMIN_PERMISSIONS = _build_permissions(
    # User management
    P.CREATE_ADMIN, P.EDIT_ADMIN, P.DELETE_ADMIN, P.VIEW_ALL_ADMINS,
    P.CREATE_USER, P.EDIT_USER, P.DELETE_USER, P.VIEW_ALL_USERS,

    # Departments
    P.CREATE_DEPARTMENT, P.EDIT_DEPARTMENT, P.DELETE_DEPARTMENT,
    P.VIEW_ALL_DEPARTMENTS, P.MANAGE_DEPARTMENT_USERS,

    # Payroll
    P.CREATE_PAYROLL, P.EDIT_PAYROLL, P.DELETE_PAYROLL, P.VIEW_ALL_PAYROLL,
    P.APPROVE_PAYROLL, P.GENERATE_PAYSLIP, P.VIEW_REPORTS,

    # Leave
    P.APPROVE_LEAVE, P.VIEW_TEAM_LEAVE, P.VIEW_ALL_LEAVE,

    # Basic
    P.VIEW_PERSONAL_INFO, P.REQUEST_LEAVE, P.VIEW_OWN_LEAVE,
    P.CANCEL_OWN_LEAVE, P.VIEW_OWN_PAYSLIP,

    # Employee lifecycle
    P.MANAGE_ONBOARDING, P.VIEW_ONBOARDING, P.MANAGE_OFFBOARDING,
    P.VIEW_OFFBOARDING, P.APPROVE_OFFBOARDING,

    # System
    P.VIEW_PAYROLL_STATS, P.MANAGE_SYSTEM, P.VIEW_SYSTEM_HEALTH,
    P.VIEW_AUDIT_LOGS,

    # Salary structure
    P.MANAGE_SALARY_STRUCTURE, P.VIEW_SALARY_STRUCTURE,
    P.EDIT_SALARY_STRUCTURE,

    # Deductions
    P.MANAGE_DEDUCTIONS, P.VIEW_DEDUCTIONS, P.EDIT_DEDUCTIONS,

    # Allowances
    P.MANAGE_ALLOWANCES, P.VIEW_ALLOWANCES, P.EDIT_ALLOWANCES,
    P.CREATE_ALLOWANCES, P.DELETE_ALLOWANCES, P.APPROVE_ALLOWANCES,
    P.REQUEST_ALLOWANCES, P.VIEW_OWN_ALLOWANCES,

    # Bonuses and overtime
    P.MANAGE_BONUSES, P.VIEW_BONUSES, P.EDIT_BONUSES, P.MANAGE_OVERTIME,

    # Reports
    P.VIEW_PAYROLL_REPORTS, P.VIEW_EMPLOYEE_REPORTS, P.VIEW_TAX_REPORTS,

    # Additional system settings
    P.MANAGE_TAX_CONFIG, P.MANAGE_COMPLIANCE, P.MANAGE_NOTIFICATIONS,
    P.MANAGE_INTEGRATIONS, P.MANAGE_DOCUMENTS, P.EDIT_PERSONAL_INFO,

    # Disciplinary
    P.VIEW_DISCIPLINARY_RECORDS, P.MANAGE_DISCIPLINARY_ACTIONS,
)

# Admin: department administration plus everything a user can do
ADMIN_PERMISSIONS = _build_permissions(
    # User management (user-level accounts only)
    P.CREATE_USER, P.EDIT_USER, P.DELETE_USER, P.VIEW_ALL_USERS,

    # Departments
    P.VIEW_ALL_DEPARTMENTS, P.MANAGE_DEPARTMENT_USERS,

    # Payroll
    P.CREATE_PAYROLL, P.EDIT_PAYROLL, P.VIEW_DEPARTMENT_PAYROLL,
    P.GENERATE_PAYSLIP, P.VIEW_REPORTS,

    # Leave
    P.APPROVE_LEAVE, P.VIEW_TEAM_LEAVE,

    # Basic
    P.VIEW_PERSONAL_INFO, P.REQUEST_LEAVE, P.VIEW_OWN_LEAVE,
    P.CANCEL_OWN_LEAVE, P.VIEW_OWN_PAYSLIP,

    # Employee lifecycle
    P.VIEW_ONBOARDING, P.MANAGE_ONBOARDING, P.VIEW_OFFBOARDING,
    P.MANAGE_OFFBOARDING,

    # Salary structure
    P.VIEW_SALARY_STRUCTURE, P.EDIT_SALARY_STRUCTURE,

    # Allowances
    P.VIEW_ALLOWANCES, P.APPROVE_ALLOWANCES, P.VIEW_OWN_ALLOWANCES,
    P.REQUEST_ALLOWANCES,

    # Deductions
    P.VIEW_DEDUCTIONS, P.EDIT_DEDUCTIONS,
)

# User: self-service only
USER_PERMISSIONS = _build_permissions(
    P.VIEW_PERSONAL_INFO,
    P.REQUEST_LEAVE,
    P.VIEW_OWN_LEAVE,
    P.CANCEL_OWN_LEAVE,
    P.VIEW_OWN_PAYSLIP,
    P.VIEW_OWN_ALLOWANCES,
    P.REQUEST_ALLOWANCES,
    P.VIEW_OWN_DEDUCTIONS,
)

del P


# Default roles configuration
DEFAULT_ROLES: Dict[Role, dict] = {
    Role.SUPER_ADMIN: {
        "name": "Super Admin",
        "description": "Organization-wide administration across all departments",
        "permissions": SUPER_ADMIN_PERMISSIONS,
    },
    Role.ADMIN: {
        "name": "Admin",
        "description": "Manages users, payroll and leave within a department",
        "permissions": ADMIN_PERMISSIONS,
    },
    Role.USER: {
        "name": "User",
        "description": "Self-service access to own profile, leave and payslips",
        "permissions": USER_PERMISSIONS,
    },
}


def get_default_role_permissions(role: Union[Role, str]) -> FrozenSet[Permission]:
    """Get the permission set assigned when a role is first granted."""
    try:
        role = Role(role)
    except ValueError:
        raise ValueError(f"Unknown default role: {role}") from None
    return DEFAULT_ROLES[role]["permissions"]


def get_all_default_roles() -> Dict[Role, dict]:
    """Get all default role definitions."""
    return DEFAULT_ROLES.copy()
