"""Tests for the scope resolver."""

import pytest

from hrportal.core.policy.models import Actor, ScopeType, TargetScope
from hrportal.core.policy.scope import ResourceClass, effective_scope, resolve_scope
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role


class TestResolveScope:
    """Test scope resolution."""

    def test_no_scope_passes(self):
        """Test an unconstrained action."""
        assert resolve_scope(Actor(role=Role.USER), None)

    def test_self_always_passes(self):
        """Test own-record scope."""
        for role in Role:
            assert resolve_scope(Actor(role=role), TargetScope.own())

    def test_department_match(self):
        """Test same-department access."""
        actor = Actor(role=Role.ADMIN, department_id="D1")
        assert resolve_scope(actor, TargetScope.department("D1"))

    def test_department_mismatch(self):
        """Test cross-department access."""
        actor = Actor(role=Role.ADMIN, department_id="D1")
        assert not resolve_scope(actor, TargetScope.department("D2"))

    def test_actor_without_department(self):
        """Test an actor with no department never matches."""
        actor = Actor(role=Role.ADMIN)
        assert not resolve_scope(actor, TargetScope.department("D1"))

    def test_super_admin_any_department(self):
        """Test super admin crosses departments."""
        actor = Actor(role=Role.SUPER_ADMIN, department_id="D1")
        assert resolve_scope(actor, TargetScope.department("D2"))
        assert resolve_scope(Actor(role=Role.SUPER_ADMIN), TargetScope.department("D2"))

    @pytest.mark.parametrize("role,expected", [
        (Role.SUPER_ADMIN, True),
        (Role.ADMIN, False),
        (Role.USER, False),
    ])
    def test_organization_scope(self, role, expected):
        """Test organization-wide access."""
        actor = Actor(role=role, department_id="D1")
        assert resolve_scope(actor, TargetScope.organization()) is expected


class TestEffectiveScope:
    """Test the broadest readable boundary per resource class."""

    def test_super_admin_reads_organization(self):
        """Test super admin boundary."""
        actor = Actor(role=Role.SUPER_ADMIN)
        for resource in ResourceClass:
            assert effective_scope(actor, resource).type is ScopeType.ALL

    def test_admin_with_department_permission(self):
        """Test department boundary."""
        actor = Actor(
            role=Role.ADMIN,
            permissions={Permission.VIEW_DEPARTMENT_PAYROLL},
            department_id="D1",
        )
        assert effective_scope(actor, ResourceClass.PAYROLL) == TargetScope.department("D1")
        assert effective_scope(actor, ResourceClass.LEAVE) == TargetScope.own()

    def test_department_permission_without_department(self):
        """Test an actor with no department stays on own records."""
        actor = Actor(role=Role.ADMIN, permissions={Permission.APPROVE_LEAVE})
        assert effective_scope(actor, ResourceClass.LEAVE) == TargetScope.own()

    def test_user_reads_own_records(self, employee):
        """Test self-service boundary."""
        for resource in ResourceClass:
            assert effective_scope(employee, resource) == TargetScope.own()

    def test_resource_from_string(self, department_admin):
        """Test resource class strings are accepted."""
        assert effective_scope(department_admin, "leave") == TargetScope.department("D1")
