"""Permission catalog for the HR/payroll portal.

Permissions are atomic and flat: holding one never implies holding
another. Categories exist for listing and administration screens only.

Permission string format: the upper-case enum value, e.g.
  - VIEW_ALL_USERS
  - APPROVE_LEAVE
  - MANAGE_PAYROLL_SETTINGS
"""

from enum import Enum
from typing import Dict, FrozenSet, List


class Permission(str, Enum):
    """Capabilities an actor can be granted."""

    # Dashboard
    VIEW_DASHBOARD = "VIEW_DASHBOARD"
    VIEW_DEPARTMENT_STATS = "VIEW_DEPARTMENT_STATS"

    # Admin management (super admin only)
    CREATE_ADMIN = "CREATE_ADMIN"
    EDIT_ADMIN = "EDIT_ADMIN"
    DELETE_ADMIN = "DELETE_ADMIN"
    VIEW_ALL_ADMINS = "VIEW_ALL_ADMINS"
    ASSIGN_DEPARTMENT_ADMIN = "ASSIGN_DEPARTMENT_ADMIN"

    # User management
    CREATE_USER = "CREATE_USER"
    EDIT_USER = "EDIT_USER"
    DELETE_USER = "DELETE_USER"
    VIEW_ALL_USERS = "VIEW_ALL_USERS"
    VIEW_EMPLOYEE_DETAILS = "VIEW_EMPLOYEE_DETAILS"
    MANAGE_DEPARTMENT_USERS = "MANAGE_DEPARTMENT_USERS"

    # Departments
    CREATE_DEPARTMENT = "CREATE_DEPARTMENT"
    EDIT_DEPARTMENT = "EDIT_DEPARTMENT"
    DELETE_DEPARTMENT = "DELETE_DEPARTMENT"
    VIEW_ALL_DEPARTMENTS = "VIEW_ALL_DEPARTMENTS"

    # Employee lifecycle
    MANAGE_ONBOARDING = "MANAGE_ONBOARDING"
    VIEW_ONBOARDING = "VIEW_ONBOARDING"
    MANAGE_OFFBOARDING = "MANAGE_OFFBOARDING"
    VIEW_OFFBOARDING = "VIEW_OFFBOARDING"
    APPROVE_OFFBOARDING = "APPROVE_OFFBOARDING"

    # Leave
    APPROVE_LEAVE = "APPROVE_LEAVE"
    VIEW_TEAM_LEAVE = "VIEW_TEAM_LEAVE"
    VIEW_ALL_LEAVE = "VIEW_ALL_LEAVE"
    REQUEST_LEAVE = "REQUEST_LEAVE"
    VIEW_OWN_LEAVE = "VIEW_OWN_LEAVE"
    CANCEL_OWN_LEAVE = "CANCEL_OWN_LEAVE"

    # Payroll
    VIEW_PAYROLL = "VIEW_PAYROLL"
    VIEW_ALL_PAYROLL = "VIEW_ALL_PAYROLL"
    VIEW_DEPARTMENT_PAYROLL = "VIEW_DEPARTMENT_PAYROLL"
    VIEW_OWN_PAYSLIP = "VIEW_OWN_PAYSLIP"
    VIEW_DEPARTMENT_PAYSLIPS = "VIEW_DEPARTMENT_PAYSLIPS"
    MANAGE_PAYROLL = "MANAGE_PAYROLL"
    CREATE_PAYROLL = "CREATE_PAYROLL"
    EDIT_PAYROLL = "EDIT_PAYROLL"
    DELETE_PAYROLL = "DELETE_PAYROLL"
    SUBMIT_PAYROLL = "SUBMIT_PAYROLL"
    APPROVE_PAYROLL = "APPROVE_PAYROLL"
    GENERATE_PAYSLIP = "GENERATE_PAYSLIP"
    MANAGE_APPROVALS = "MANAGE_APPROVALS"

    # Salary structure
    MANAGE_SALARY_STRUCTURE = "MANAGE_SALARY_STRUCTURE"
    VIEW_SALARY_STRUCTURE = "VIEW_SALARY_STRUCTURE"
    EDIT_SALARY_STRUCTURE = "EDIT_SALARY_STRUCTURE"

    # Deductions
    MANAGE_DEDUCTIONS = "MANAGE_DEDUCTIONS"
    VIEW_DEDUCTIONS = "VIEW_DEDUCTIONS"
    EDIT_DEDUCTIONS = "EDIT_DEDUCTIONS"
    VIEW_OWN_DEDUCTIONS = "VIEW_OWN_DEDUCTIONS"
    MANAGE_DEPARTMENT_DEDUCTIONS = "MANAGE_DEPARTMENT_DEDUCTIONS"
    VIEW_DEPARTMENT_DEDUCTIONS = "VIEW_DEPARTMENT_DEDUCTIONS"

    # Allowances
    MANAGE_ALLOWANCES = "MANAGE_ALLOWANCES"
    VIEW_ALLOWANCES = "VIEW_ALLOWANCES"
    EDIT_ALLOWANCES = "EDIT_ALLOWANCES"
    CREATE_ALLOWANCES = "CREATE_ALLOWANCES"
    DELETE_ALLOWANCES = "DELETE_ALLOWANCES"
    APPROVE_ALLOWANCES = "APPROVE_ALLOWANCES"
    VIEW_OWN_ALLOWANCES = "VIEW_OWN_ALLOWANCES"
    REQUEST_ALLOWANCES = "REQUEST_ALLOWANCES"
    MANAGE_DEPARTMENT_ALLOWANCES = "MANAGE_DEPARTMENT_ALLOWANCES"
    VIEW_DEPARTMENT_ALLOWANCES = "VIEW_DEPARTMENT_ALLOWANCES"

    # Bonuses and overtime
    MANAGE_BONUSES = "MANAGE_BONUSES"
    VIEW_BONUSES = "VIEW_BONUSES"
    EDIT_BONUSES = "EDIT_BONUSES"
    CREATE_BONUSES = "CREATE_BONUSES"
    DELETE_BONUSES = "DELETE_BONUSES"
    VIEW_OWN_BONUS = "VIEW_OWN_BONUS"
    MANAGE_DEPARTMENT_BONUSES = "MANAGE_DEPARTMENT_BONUSES"
    VIEW_DEPARTMENT_BONUSES = "VIEW_DEPARTMENT_BONUSES"
    MANAGE_OVERTIME = "MANAGE_OVERTIME"

    # Payments
    PROCESS_PAYMENT = "PROCESS_PAYMENT"
    MARK_PAYMENT_FAILED = "MARK_PAYMENT_FAILED"
    VIEW_PAYMENT_HISTORY = "VIEW_PAYMENT_HISTORY"
    MANAGE_PAYMENT_METHODS = "MANAGE_PAYMENT_METHODS"

    # Reports and analytics
    VIEW_REPORTS = "VIEW_REPORTS"
    VIEW_AUDIT_LOGS = "VIEW_AUDIT_LOGS"
    VIEW_PAYROLL_REPORTS = "VIEW_PAYROLL_REPORTS"
    VIEW_EMPLOYEE_REPORTS = "VIEW_EMPLOYEE_REPORTS"
    VIEW_TAX_REPORTS = "VIEW_TAX_REPORTS"
    VIEW_PAYROLL_STATS = "VIEW_PAYROLL_STATS"

    # System
    MANAGE_SYSTEM = "MANAGE_SYSTEM"
    VIEW_SYSTEM_HEALTH = "VIEW_SYSTEM_HEALTH"
    MANAGE_COMPANY_PROFILE = "MANAGE_COMPANY_PROFILE"
    MANAGE_TAX_CONFIG = "MANAGE_TAX_CONFIG"
    MANAGE_COMPLIANCE = "MANAGE_COMPLIANCE"
    MANAGE_NOTIFICATIONS = "MANAGE_NOTIFICATIONS"
    MANAGE_INTEGRATIONS = "MANAGE_INTEGRATIONS"
    MANAGE_DOCUMENTS = "MANAGE_DOCUMENTS"

    # Profile
    VIEW_PERSONAL_INFO = "VIEW_PERSONAL_INFO"
    EDIT_PERSONAL_INFO = "EDIT_PERSONAL_INFO"
    UPDATE_PROFILE = "UPDATE_PROFILE"
    CHANGE_PASSWORD = "CHANGE_PASSWORD"

    # Documents and notifications
    UPLOAD_DOCUMENTS = "UPLOAD_DOCUMENTS"
    VIEW_OWN_DOCUMENTS = "VIEW_OWN_DOCUMENTS"
    VIEW_NOTIFICATIONS = "VIEW_NOTIFICATIONS"
    MARK_NOTIFICATIONS_READ = "MARK_NOTIFICATIONS_READ"

    # Disciplinary
    VIEW_DISCIPLINARY_RECORDS = "VIEW_DISCIPLINARY_RECORDS"
    MANAGE_DISCIPLINARY_ACTIONS = "MANAGE_DISCIPLINARY_ACTIONS"

    # Feedback
    MANAGE_FEEDBACK = "MANAGE_FEEDBACK"
    SUBMIT_FEEDBACK = "SUBMIT_FEEDBACK"
    APPROVE_FEEDBACK = "APPROVE_FEEDBACK"

    # Settings management
    MANAGE_DEPARTMENT_SETTINGS = "MANAGE_DEPARTMENT_SETTINGS"
    MANAGE_SYSTEM_SETTINGS = "MANAGE_SYSTEM_SETTINGS"
    MANAGE_USER_SETTINGS = "MANAGE_USER_SETTINGS"
    MANAGE_PAYROLL_SETTINGS = "MANAGE_PAYROLL_SETTINGS"
    MANAGE_LEAVE_SETTINGS = "MANAGE_LEAVE_SETTINGS"
    MANAGE_DOCUMENT_SETTINGS = "MANAGE_DOCUMENT_SETTINGS"
    MANAGE_NOTIFICATION_SETTINGS = "MANAGE_NOTIFICATION_SETTINGS"
    MANAGE_INTEGRATION_SETTINGS = "MANAGE_INTEGRATION_SETTINGS"
    MANAGE_TAX_SETTINGS = "MANAGE_TAX_SETTINGS"
    MANAGE_COMPLIANCE_SETTINGS = "MANAGE_COMPLIANCE_SETTINGS"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, perm_str: str) -> "Permission":
        """Parse a permission string like 'APPROVE_LEAVE'."""
        try:
            return cls(perm_str)
        except ValueError:
            raise ValueError(f"Unknown permission: {perm_str!r}") from None


class PermissionCategory(str, Enum):
    """Groupings used when listing permissions."""

    DASHBOARD = "dashboard"
    ADMIN_MANAGEMENT = "admin_management"
    USER_MANAGEMENT = "user_management"
    DEPARTMENTS = "departments"
    EMPLOYEE_LIFECYCLE = "employee_lifecycle"
    LEAVE = "leave"
    PAYROLL = "payroll"
    SALARY_STRUCTURE = "salary_structure"
    DEDUCTIONS = "deductions"
    ALLOWANCES = "allowances"
    BONUSES = "bonuses"
    PAYMENTS = "payments"
    REPORTS = "reports"
    SYSTEM = "system"
    PROFILE = "profile"
    DOCUMENTS = "documents"
    DISCIPLINARY = "disciplinary"
    FEEDBACK = "feedback"
    SETTINGS = "settings"


P = Permission

PERMISSION_CATEGORIES: Dict[PermissionCategory, FrozenSet[Permission]] = {
    PermissionCategory.DASHBOARD: frozenset([
        P.VIEW_DASHBOARD, P.VIEW_DEPARTMENT_STATS,
    ]),
    PermissionCategory.ADMIN_MANAGEMENT: frozenset([
        P.CREATE_ADMIN, P.EDIT_ADMIN, P.DELETE_ADMIN, P.VIEW_ALL_ADMINS,
        P.ASSIGN_DEPARTMENT_ADMIN,
    ]),
    PermissionCategory.USER_MANAGEMENT: frozenset([
        P.CREATE_USER, P.EDIT_USER, P.DELETE_USER, P.VIEW_ALL_USERS,
        P.VIEW_EMPLOYEE_DETAILS, P.MANAGE_DEPARTMENT_USERS,
    ]),
    PermissionCategory.DEPARTMENTS: frozenset([
        P.CREATE_DEPARTMENT, P.EDIT_DEPARTMENT, P.DELETE_DEPARTMENT,
        P.VIEW_ALL_DEPARTMENTS,
    ]),
    PermissionCategory.EMPLOYEE_LIFECYCLE: frozenset([
        P.MANAGE_ONBOARDING, P.VIEW_ONBOARDING, P.MANAGE_OFFBOARDING,
        P.VIEW_OFFBOARDING, P.APPROVE_OFFBOARDING,
    ]),
    PermissionCategory.LEAVE: frozenset([
        P.APPROVE_LEAVE, P.VIEW_TEAM_LEAVE, P.VIEW_ALL_LEAVE, P.REQUEST_LEAVE,
        P.VIEW_OWN_LEAVE, P.CANCEL_OWN_LEAVE,
    ]),
    PermissionCategory.PAYROLL: frozenset([
        P.VIEW_PAYROLL, P.VIEW_ALL_PAYROLL, P.VIEW_DEPARTMENT_PAYROLL,
        P.VIEW_OWN_PAYSLIP, P.VIEW_DEPARTMENT_PAYSLIPS, P.MANAGE_PAYROLL,
        P.CREATE_PAYROLL, P.EDIT_PAYROLL, P.DELETE_PAYROLL, P.SUBMIT_PAYROLL,
        P.APPROVE_PAYROLL, P.GENERATE_PAYSLIP, P.MANAGE_APPROVALS,
    ]),
    PermissionCategory.SALARY_STRUCTURE: frozenset([
        P.MANAGE_SALARY_STRUCTURE, P.VIEW_SALARY_STRUCTURE,
        P.EDIT_SALARY_STRUCTURE,
    ]),
    PermissionCategory.DEDUCTIONS: frozenset([
        P.MANAGE_DEDUCTIONS, P.VIEW_DEDUCTIONS, P.EDIT_DEDUCTIONS,
        P.VIEW_OWN_DEDUCTIONS, P.MANAGE_DEPARTMENT_DEDUCTIONS,
        P.VIEW_DEPARTMENT_DEDUCTIONS,
    ]),
    PermissionCategory.ALLOWANCES: frozenset([
        P.MANAGE_ALLOWANCES, P.VIEW_ALLOWANCES, P.EDIT_ALLOWANCES,
        P.CREATE_ALLOWANCES, P.DELETE_ALLOWANCES, P.APPROVE_ALLOWANCES,
        P.VIEW_OWN_ALLOWANCES, P.REQUEST_ALLOWANCES,
        P.MANAGE_DEPARTMENT_ALLOWANCES, P.VIEW_DEPARTMENT_ALLOWANCES,
    ]),
    PermissionCategory.BONUSES: frozenset([
        P.MANAGE_BONUSES, P.VIEW_BONUSES, P.EDIT_BONUSES, P.CREATE_BONUSES,
        P.DELETE_BONUSES, P.VIEW_OWN_BONUS, P.MANAGE_DEPARTMENT_BONUSES,
        P.VIEW_DEPARTMENT_BONUSES, P.MANAGE_OVERTIME,
    ]),
    PermissionCategory.PAYMENTS: frozenset([
        P.PROCESS_PAYMENT, P.MARK_PAYMENT_FAILED, P.VIEW_PAYMENT_HISTORY,
        P.MANAGE_PAYMENT_METHODS,
    ]),
    PermissionCategory.REPORTS: frozenset([
        P.VIEW_REPORTS, P.VIEW_AUDIT_LOGS, P.VIEW_PAYROLL_REPORTS,
        P.VIEW_EMPLOYEE_REPORTS, P.VIEW_TAX_REPORTS, P.VIEW_PAYROLL_STATS,
    ]),
    PermissionCategory.SYSTEM: frozenset([
        P.MANAGE_SYSTEM, P.VIEW_SYSTEM_HEALTH, P.MANAGE_COMPANY_PROFILE,
        P.MANAGE_TAX_CONFIG, P.MANAGE_COMPLIANCE, P.MANAGE_NOTIFICATIONS,
        P.MANAGE_INTEGRATIONS, P.MANAGE_DOCUMENTS,
    ]),
    PermissionCategory.PROFILE: frozenset([
        P.VIEW_PERSONAL_INFO, P.EDIT_PERSONAL_INFO, P.UPDATE_PROFILE,
        P.CHANGE_PASSWORD,
    ]),
    PermissionCategory.DOCUMENTS: frozenset([
        P.UPLOAD_DOCUMENTS, P.VIEW_OWN_DOCUMENTS, P.VIEW_NOTIFICATIONS,
        P.MARK_NOTIFICATIONS_READ,
    ]),
    PermissionCategory.DISCIPLINARY: frozenset([
        P.VIEW_DISCIPLINARY_RECORDS, P.MANAGE_DISCIPLINARY_ACTIONS,
    ]),
    PermissionCategory.FEEDBACK: frozenset([
        P.MANAGE_FEEDBACK, P.SUBMIT_FEEDBACK, P.APPROVE_FEEDBACK,
    ]),
    PermissionCategory.SETTINGS: frozenset([
        P.MANAGE_DEPARTMENT_SETTINGS, P.MANAGE_SYSTEM_SETTINGS,
        P.MANAGE_USER_SETTINGS, P.MANAGE_PAYROLL_SETTINGS,
        P.MANAGE_LEAVE_SETTINGS, P.MANAGE_DOCUMENT_SETTINGS,
        P.MANAGE_NOTIFICATION_SETTINGS, P.MANAGE_INTEGRATION_SETTINGS,
        P.MANAGE_TAX_SETTINGS, P.MANAGE_COMPLIANCE_SETTINGS,
    ]),
}

del P


def is_valid_permission(perm_str: str) -> bool:
    """Check if a permission string is valid."""
    return perm_str in Permission._value2member_map_


def get_permissions_for_category(category: PermissionCategory) -> List[str]:
    """Get all permission strings in a category, sorted."""
    return sorted(p.value for p in PERMISSION_CATEGORIES.get(category, frozenset()))


def get_all_permissions() -> List[str]:
    """Get all valid permission strings in declaration order."""
    return [p.value for p in Permission]
