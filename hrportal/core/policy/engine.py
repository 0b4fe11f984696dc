"""Decision aggregator for the access engine.

Combines the role hierarchy, the permission evaluator and the scope
resolver into a single allow/deny decision with one precise reason.
"""

from typing import Dict, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from hrportal.core.rbac.checker import missing_permissions, satisfies_permissions
from hrportal.core.rbac.roles import Role, satisfies_role

from .decision import Decision
from .models import Actor, Requirement
from .scope import resolve_scope

if TYPE_CHECKING:
    from hrportal.core.navigation.catalog import CatalogStore, FeatureNode


def evaluate(actor: Actor, requirement: Requirement) -> Decision:
    """
    Evaluate a requirement for an actor.

    Checks run in a fixed order and stop at the first failure:

    1. Super Admin short-circuit (always allowed)
    2. Role hierarchy -> MISSING_ROLE
    3. Permissions -> MISSING_PERMISSION
    4. Scope -> MISSING_SCOPE

    Role failures are reported before permission failures because the
    role is the coarser, more actionable signal.

    Args:
        actor: The actor being authorized
        requirement: The access constraint to evaluate

    Returns:
        Decision with the first failing reason, or allowed
    """
    if actor.role is Role.SUPER_ADMIN:
        return Decision.allow()

    if not satisfies_role(actor.role, requirement.required_roles):
        return Decision.deny_role(requirement.required_roles)

    if not satisfies_permissions(
        actor.permissions,
        requirement.required_permissions,
        requirement.combination_mode,
    ):
        return Decision.deny_permission(
            missing_permissions(
                actor.permissions,
                requirement.required_permissions,
                requirement.combination_mode,
            )
        )

    if not resolve_scope(actor, requirement.target_scope):
        return Decision.deny_scope(requirement.target_scope)

    return Decision.allow()


def evaluate_many(
    actor: Actor,
    requirements: Mapping[str, Requirement],
) -> Dict[str, Decision]:
    """
    Evaluate several named requirements for one actor.

    Useful for building a screen's capability map, e.g.
    ``{"create_admin": ..., "approve_leave": ...}``.
    """
    return {name: evaluate(actor, requirement) for name, requirement in requirements.items()}


class PolicyEngine:
    """
    Entry point used by the action layer and the presentation layer.

    Holds only a reference to the navigation catalog store; every
    evaluation is a pure function of its arguments.
    """

    def __init__(self, catalog_store: Optional["CatalogStore"] = None):
        """
        Initialize the policy engine.

        Args:
            catalog_store: Navigation catalog used by ``navigation_for``
        """
        self.catalog_store = catalog_store

    def evaluate(self, actor: Actor, requirement: Requirement) -> Decision:
        return evaluate(actor, requirement)

    def evaluate_many(
        self,
        actor: Actor,
        requirements: Mapping[str, Requirement],
    ) -> Dict[str, Decision]:
        return evaluate_many(actor, requirements)

    def filter_tree(
        self,
        actor: Actor,
        catalog: Sequence["FeatureNode"],
    ) -> Tuple["FeatureNode", ...]:
        from hrportal.core.navigation.filter import filter_tree

        return filter_tree(actor, catalog)

    def navigation_for(self, actor: Actor) -> Tuple["FeatureNode", ...]:
        """Filter the current catalog snapshot for an actor."""
        if self.catalog_store is None:
            raise RuntimeError("PolicyEngine was created without a catalog store")
        return self.filter_tree(actor, self.catalog_store.snapshot())
