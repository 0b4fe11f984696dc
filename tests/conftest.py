"""Pytest configuration and shared fixtures."""

import pytest

from hrportal.core.navigation.catalog import FeatureNode
from hrportal.core.policy.models import Actor
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role


@pytest.fixture
def super_admin():
    """Super admin with no explicit permissions."""
    return Actor(role=Role.SUPER_ADMIN)


@pytest.fixture
def department_admin():
    """Admin of department D1 with the default admin permission set."""
    return Actor.with_default_permissions(Role.ADMIN, department_id="D1", actor_id="admin-1")


@pytest.fixture
def employee():
    """Plain user in department D1 with the default user permission set."""
    return Actor.with_default_permissions(Role.USER, department_id="D1", actor_id="user-1")


@pytest.fixture
def employees_catalog():
    """Employees group with one onboarding child and one directory child."""
    return (
        FeatureNode(
            id="employees",
            required_permissions={Permission.VIEW_ALL_USERS},
            children=(
                FeatureNode(
                    id="employees.onboarding",
                    display_order=0,
                    required_permissions={Permission.MANAGE_ONBOARDING},
                ),
                FeatureNode(
                    id="employees.list",
                    display_order=1,
                    required_permissions={Permission.VIEW_ALL_USERS},
                ),
            ),
        ),
    )


@pytest.fixture
def catalog_yaml(tmp_path):
    """Write a small catalog file and return its path."""
    path = tmp_path / "catalog.yaml"
    path.write_text(
        """
features:
  - id: dashboard
  - id: payroll
    roles: [ADMIN]
    children:
      - id: payroll.process
        permissions: [CREATE_PAYROLL, SUBMIT_PAYROLL]
        mode: all
      - id: payroll.my_payslips
        permissions: [VIEW_OWN_PAYSLIP]
        hidden_from_roles: [SUPER_ADMIN]
"""
    )
    return path
