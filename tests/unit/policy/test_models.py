"""Tests for actor, scope and requirement construction."""

import pytest

from hrportal.core.errors import (
    InvalidActorError, InvalidRequirementError, PolicyConfigurationError,
)
from hrportal.core.policy.models import (
    Actor, Requirement, ScopeType, TargetScope, department_requirement,
)
from hrportal.core.rbac.checker import CombinationMode
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role, USER_PERMISSIONS


class TestActor:
    """Test Actor construction."""

    def test_coerces_strings(self):
        """Test role and permission strings become enums."""
        actor = Actor(role="ADMIN", permissions=["APPROVE_LEAVE"], department_id="D1")
        assert actor.role is Role.ADMIN
        assert actor.permissions == frozenset({Permission.APPROVE_LEAVE})
        assert isinstance(actor.permissions, frozenset)

    def test_unknown_role(self):
        """Test an unknown role fails loudly."""
        with pytest.raises(InvalidActorError) as exc_info:
            Actor(role="MANAGER")
        assert exc_info.value.field == "role"
        assert exc_info.value.value == "MANAGER"

    def test_unknown_permission(self):
        """Test an unknown permission fails loudly."""
        with pytest.raises(InvalidActorError) as exc_info:
            Actor(role=Role.USER, permissions=["NONEXISTENT_PERM"])
        assert exc_info.value.field == "permissions"

    def test_bare_string_permissions(self):
        """Test a bare string is not split into characters."""
        with pytest.raises(InvalidActorError):
            Actor(role=Role.USER, permissions="APPROVE_LEAVE")

    def test_errors_are_value_errors(self):
        """Test the error hierarchy."""
        with pytest.raises(PolicyConfigurationError):
            Actor(role=None)
        assert issubclass(InvalidActorError, ValueError)

    def test_immutable(self):
        """Test actors cannot be modified."""
        actor = Actor(role=Role.USER)
        with pytest.raises(AttributeError):
            actor.role = Role.SUPER_ADMIN

    def test_with_default_permissions(self):
        """Test building an actor from its role defaults."""
        actor = Actor.with_default_permissions("USER", department_id="D1")
        assert actor.role is Role.USER
        assert actor.permissions == USER_PERMISSIONS
        assert actor.department_id == "D1"
        assert not actor.is_super_admin

    def test_with_default_permissions_unknown_role(self):
        """Test defaults for an unknown role."""
        with pytest.raises(InvalidActorError):
            Actor.with_default_permissions("MANAGER")


class TestTargetScope:
    """Test TargetScope construction."""

    def test_constructors(self):
        """Test named constructors."""
        assert TargetScope.own().type is ScopeType.SELF
        assert TargetScope.organization().type is ScopeType.ALL
        scope = TargetScope.department("D2")
        assert scope.type is ScopeType.DEPARTMENT
        assert scope.department_id == "D2"

    def test_department_needs_id(self):
        """Test a department scope without an id."""
        with pytest.raises(InvalidRequirementError):
            TargetScope(ScopeType.DEPARTMENT)

    def test_type_by_member_name(self):
        """Test upper-case scope names are accepted."""
        assert TargetScope("DEPARTMENT", "D1") == TargetScope.department("D1")
        assert TargetScope("SELF").type is ScopeType.SELF
        assert TargetScope("ALL") == TargetScope.organization()

    def test_unknown_type(self):
        """Test an unknown scope type."""
        with pytest.raises(InvalidRequirementError):
            TargetScope("company")

    def test_to_dict(self):
        """Test serialization."""
        assert TargetScope.department("D2").to_dict() == {
            "type": "department",
            "department_id": "D2",
        }


class TestRequirement:
    """Test Requirement construction."""

    def test_defaults_are_unrestricted(self):
        """Test an empty requirement."""
        requirement = Requirement()
        assert requirement.is_unrestricted
        assert requirement.combination_mode is CombinationMode.ANY

    def test_mode_cannot_be_none(self):
        """Test an unset combination mode fails loudly."""
        with pytest.raises(InvalidRequirementError) as exc_info:
            Requirement(required_permissions={Permission.APPROVE_LEAVE}, combination_mode=None)
        assert exc_info.value.field == "combination_mode"

    def test_mode_from_string(self):
        """Test mode strings are coerced."""
        assert Requirement(combination_mode="all").combination_mode is CombinationMode.ALL
        assert Requirement(combination_mode="ALL").combination_mode is CombinationMode.ALL
        assert Requirement(combination_mode="ANY").combination_mode is CombinationMode.ANY
        with pytest.raises(InvalidRequirementError):
            Requirement(combination_mode="most")

    def test_unknown_required_role(self):
        """Test an unknown required role."""
        with pytest.raises(InvalidRequirementError):
            Requirement(required_roles={"MANAGER"})

    def test_target_scope_type_checked(self):
        """Test a raw dict is not accepted as scope."""
        with pytest.raises(InvalidRequirementError):
            Requirement(target_scope={"type": "department", "department_id": "D1"})

    def test_without_scope(self):
        """Test dropping the scope keeps the gate."""
        requirement = Requirement(
            required_roles={Role.ADMIN},
            required_permissions={Permission.APPROVE_LEAVE},
            target_scope=TargetScope.department("D1"),
        )
        stripped = requirement.without_scope()
        assert stripped.target_scope is None
        assert stripped.required_roles == requirement.required_roles
        assert stripped.required_permissions == requirement.required_permissions
        assert Requirement().without_scope() == Requirement()


class TestDepartmentRequirement:
    """Test the department access helper."""

    def test_defaults_to_admin_gate(self):
        """Test default roles and scope."""
        requirement = department_requirement("D1")
        assert requirement.required_roles == {Role.ADMIN}
        assert requirement.target_scope == TargetScope.department("D1")

    def test_with_permissions(self):
        """Test extra permissions and mode."""
        requirement = department_requirement(
            "D1",
            permissions=[Permission.CREATE_PAYROLL, Permission.SUBMIT_PAYROLL],
            mode=CombinationMode.ALL,
        )
        assert requirement.combination_mode is CombinationMode.ALL
        assert len(requirement.required_permissions) == 2
