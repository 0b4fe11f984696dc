"""Tests for the permission catalog."""

import pytest

from hrportal.core.rbac.permissions import (
    Permission, PermissionCategory, PERMISSION_CATEGORIES,
    is_valid_permission, get_permissions_for_category, get_all_permissions,
)


class TestPermissionModel:
    """Test permission definitions."""

    def test_permission_string_format(self):
        """Test permission string format."""
        assert str(Permission.APPROVE_LEAVE) == "APPROVE_LEAVE"

    def test_permission_from_string(self):
        """Test parsing permission from string."""
        assert Permission.from_string("VIEW_ALL_USERS") is Permission.VIEW_ALL_USERS

    def test_invalid_permission_string(self):
        """Test parsing unknown permission string."""
        with pytest.raises(ValueError, match="Unknown permission"):
            Permission.from_string("NONEXISTENT_PERM")

        with pytest.raises(ValueError):
            Permission.from_string("approve_leave")  # Case sensitive

    def test_is_valid_permission(self):
        """Test permission validation."""
        assert is_valid_permission("MANAGE_ONBOARDING")
        assert is_valid_permission("VIEW_DEPARTMENT_PAYROLL")
        assert not is_valid_permission("NONEXISTENT_PERM")
        assert not is_valid_permission("")

    def test_all_permissions_listed(self):
        """Test that every enum member is listed once."""
        all_perms = get_all_permissions()
        assert len(all_perms) == len(Permission)
        assert len(set(all_perms)) == len(all_perms)
        assert "VIEW_DASHBOARD" in all_perms
        assert "MANAGE_PAYROLL_SETTINGS" in all_perms


class TestPermissionCategories:
    """Test permission groupings."""

    def test_every_category_has_permissions(self):
        """Test no category is empty."""
        for category in PermissionCategory:
            assert PERMISSION_CATEGORIES[category], category

    def test_permissions_for_category(self):
        """Test getting permissions for a specific category."""
        leave_perms = get_permissions_for_category(PermissionCategory.LEAVE)
        assert "APPROVE_LEAVE" in leave_perms
        assert "REQUEST_LEAVE" in leave_perms
        assert "CREATE_PAYROLL" not in leave_perms
        assert leave_perms == sorted(leave_perms)

    def test_categories_only_hold_known_permissions(self):
        """Test category members are Permission values."""
        for perms in PERMISSION_CATEGORIES.values():
            assert all(isinstance(p, Permission) for p in perms)
