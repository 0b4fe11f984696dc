"""Tests for Decision construction."""

import pytest

from hrportal.core.errors import PolicyConfigurationError
from hrportal.core.policy.decision import Decision, DenialReason
from hrportal.core.policy.models import TargetScope
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role


class TestDecisionShape:
    """Test that every denial names a reason and grants carry none."""

    def test_denial_without_reason(self):
        """Test a generic denial is rejected."""
        with pytest.raises(PolicyConfigurationError) as exc_info:
            Decision(allowed=False)
        assert exc_info.value.field == "reason"

    def test_denial_with_string_reason(self):
        """Test the reason must be a DenialReason."""
        with pytest.raises(ValueError):
            Decision(allowed=False, reason="missing_role")

    def test_grant_with_reason(self):
        """Test an allowed decision cannot carry a reason."""
        with pytest.raises(PolicyConfigurationError):
            Decision(allowed=True, reason=DenialReason.MISSING_ROLE)

    def test_grant_with_missing_identifiers(self):
        """Test an allowed decision cannot carry missing identifiers."""
        with pytest.raises(ValueError):
            Decision(allowed=True, missing_roles=frozenset({Role.ADMIN}))
        with pytest.raises(ValueError):
            Decision(allowed=True, missing_permissions=frozenset({Permission.APPROVE_LEAVE}))
        with pytest.raises(ValueError):
            Decision(allowed=True, missing_scope=TargetScope.organization())

    def test_allowed_must_be_bool(self):
        """Test truthy non-bool values are rejected."""
        with pytest.raises(PolicyConfigurationError) as exc_info:
            Decision(allowed=1)
        assert exc_info.value.field == "allowed"

    def test_constructors_build_valid_decisions(self):
        """Test the named constructors."""
        assert Decision.allow().allowed
        assert Decision.deny_role({Role.ADMIN}).reason is DenialReason.MISSING_ROLE
        assert Decision.deny_permission({Permission.APPROVE_LEAVE}).reason is DenialReason.MISSING_PERMISSION
        assert Decision.deny_scope(TargetScope.department("D2")).reason is DenialReason.MISSING_SCOPE
