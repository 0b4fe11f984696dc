"""Tests for the role hierarchy and default role permissions."""

import pytest

from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import (
    Role, ROLE_HIERARCHY, satisfies_role,
    DEFAULT_ROLES, get_default_role_permissions, get_all_default_roles,
    SUPER_ADMIN_PERMISSIONS, ADMIN_PERMISSIONS, USER_PERMISSIONS,
)


class TestRoleHierarchy:
    """Test role hierarchy checks."""

    def test_each_role_satisfies_itself(self):
        """Test reflexivity."""
        for role in Role:
            assert satisfies_role(role, {role})

    def test_higher_roles_satisfy_lower(self):
        """Test downward inheritance."""
        assert satisfies_role(Role.ADMIN, {Role.USER})
        assert satisfies_role(Role.SUPER_ADMIN, {Role.USER})
        assert satisfies_role(Role.SUPER_ADMIN, {Role.ADMIN})

    def test_lower_roles_do_not_satisfy_higher(self):
        """Test no upward inheritance."""
        assert not satisfies_role(Role.USER, {Role.ADMIN})
        assert not satisfies_role(Role.ADMIN, {Role.SUPER_ADMIN})
        assert not satisfies_role(Role.USER, {Role.SUPER_ADMIN, Role.ADMIN})

    def test_any_required_role_is_enough(self):
        """Test required roles are alternatives."""
        assert satisfies_role(Role.USER, {Role.SUPER_ADMIN, Role.USER})

    def test_empty_requirement_passes(self):
        """Test no role restriction."""
        for role in Role:
            assert satisfies_role(role, set())

    def test_hierarchy_is_total_order(self):
        """Test the hierarchy nests strictly."""
        assert ROLE_HIERARCHY[Role.USER] < ROLE_HIERARCHY[Role.ADMIN]
        assert ROLE_HIERARCHY[Role.ADMIN] < ROLE_HIERARCHY[Role.SUPER_ADMIN]


class TestDefaultRoles:
    """Test default role definitions."""

    def test_all_roles_defined(self):
        """Test every role has a default entry."""
        assert set(DEFAULT_ROLES) == set(Role)
        for role_def in get_all_default_roles().values():
            assert role_def["name"]
            assert role_def["permissions"]

    def test_user_is_self_service_only(self):
        """Test user defaults."""
        assert Permission.VIEW_OWN_PAYSLIP in USER_PERMISSIONS
        assert Permission.REQUEST_LEAVE in USER_PERMISSIONS
        assert Permission.VIEW_ALL_USERS not in USER_PERMISSIONS
        assert Permission.APPROVE_LEAVE not in USER_PERMISSIONS

    def test_admin_has_department_permissions(self):
        """Test admin defaults."""
        assert Permission.APPROVE_LEAVE in ADMIN_PERMISSIONS
        assert Permission.VIEW_DEPARTMENT_PAYROLL in ADMIN_PERMISSIONS
        assert Permission.VIEW_ALL_PAYROLL not in ADMIN_PERMISSIONS
        assert Permission.CREATE_ADMIN not in ADMIN_PERMISSIONS

    def test_super_admin_can_manage_admins(self):
        """Test super admin defaults."""
        assert Permission.CREATE_ADMIN in SUPER_ADMIN_PERMISSIONS
        assert Permission.VIEW_ALL_PAYROLL in SUPER_ADMIN_PERMISSIONS

    def test_get_default_role_permissions(self):
        """Test lookup by enum and by string."""
        assert get_default_role_permissions(Role.USER) == USER_PERMISSIONS
        assert get_default_role_permissions("ADMIN") == ADMIN_PERMISSIONS

    def test_unknown_role(self):
        """Test lookup of an unknown role."""
        with pytest.raises(ValueError, match="Unknown default role"):
            get_default_role_permissions("MANAGER")
