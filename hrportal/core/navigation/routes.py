"""Route guard for portal URL areas.

Some areas of the portal carry a role-specific gate on top of the
requirement a route declares itself: an admin needs at least one
employee-management permission to enter ``/pms/employees`` for example.

YAML format::

    routes:
      - prefix: /pms/payroll
        applies_to: [ADMIN]
        permissions: [VIEW_ALL_PAYROLL, VIEW_DEPARTMENT_PAYROLL]
        mode: any
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from hrportal.common.config import load_config
from hrportal.common.logger import get_logger
from hrportal.core.errors import CatalogError
from hrportal.core.policy.decision import Decision
from hrportal.core.policy.engine import evaluate
from hrportal.core.policy.models import Actor, Requirement
from hrportal.core.rbac.checker import CombinationMode
from hrportal.core.rbac.roles import Role

logger = get_logger("routes")

DEFAULT_ROUTES_PATH = Path(__file__).with_name("default_routes.yaml")


def normalize_path(path: str) -> str:
    """Lowercase a path and drop its query string and trailing slash."""
    path = path.split("?", 1)[0].split("#", 1)[0].strip().lower()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/")
    return path


@dataclass(frozen=True)
class RouteRule:
    """A role-specific requirement for every path under a prefix."""
    prefix: str
    requirement: Requirement
    applies_to: FrozenSet[Role] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.prefix or not isinstance(self.prefix, str):
            raise CatalogError("Route rule needs a prefix", field="prefix", value=self.prefix)
        if not isinstance(self.requirement, Requirement):
            raise CatalogError(
                "Route rule requirement must be a Requirement",
                field="requirement",
                value=self.requirement,
            )
        object.__setattr__(self, "prefix", normalize_path(self.prefix))
        object.__setattr__(
            self,
            "applies_to",
            Requirement(required_roles=self.applies_to).required_roles,
        )

    def matches(self, path: str) -> bool:
        """Segment-aware prefix match: ``/pms/pay`` does not match ``/pms/payroll``."""
        path = normalize_path(path)
        if self.prefix == "/":
            return True
        return path == self.prefix or path.startswith(self.prefix + "/")

    def applies(self, actor: Actor, path: str) -> bool:
        if self.applies_to and actor.role not in self.applies_to:
            return False
        return self.matches(path)


class RouteGuard:
    """Evaluates a route's own requirement plus every matching area rule."""

    def __init__(self, rules: Iterable[RouteRule] = ()):
        self._rules: List[RouteRule] = []
        for rule in rules:
            self.add_rule(rule)

    @classmethod
    def from_path(cls, routes_path: Union[str, Path, None] = None) -> "RouteGuard":
        return cls(load_route_rules(routes_path))

    @property
    def rules(self) -> Tuple[RouteRule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: RouteRule) -> None:
        self._rules.append(rule)
        roles = ", ".join(sorted(r.value for r in rule.applies_to)) or "all roles"
        logger.debug(f"Registered route rule: {rule.prefix} ({roles})")

    def rules_for(self, actor: Actor, path: str) -> List[RouteRule]:
        """The rules that apply to an actor on a path, in registration order."""
        return [rule for rule in self._rules if rule.applies(actor, path)]

    def check(
        self,
        actor: Actor,
        path: str,
        requirement: Optional[Requirement] = None,
    ) -> Decision:
        """
        Decide whether an actor may open a path.

        Args:
            actor: The actor navigating
            path: Requested URL path
            requirement: The route's own declared requirement, if any

        Returns:
            The first denial, or allowed when every check passes
        """
        if requirement is not None:
            decision = evaluate(actor, requirement)
            if not decision.allowed:
                return decision

        for rule in self.rules_for(actor, path):
            decision = evaluate(actor, rule.requirement)
            if not decision.allowed:
                return decision

        return Decision.allow()


def parse_route_rule(rule_dict: Dict[str, Any]) -> RouteRule:
    """Parse one ``routes`` entry.

    Raises:
        CatalogError: On a missing prefix or unknown role, permission or
            mode values
    """
    if not isinstance(rule_dict, dict):
        raise CatalogError("Route entries must be mappings", value=rule_dict)

    prefix = rule_dict.get("prefix")
    try:
        return RouteRule(
            prefix=prefix,
            requirement=Requirement(
                required_roles=rule_dict.get("roles") or (),
                required_permissions=rule_dict.get("permissions") or (),
                combination_mode=rule_dict.get("mode", CombinationMode.ANY.value),
            ),
            applies_to=rule_dict.get("applies_to") or (),
        )
    except CatalogError:
        raise
    except ValueError as e:
        raise CatalogError(
            f"Route {prefix!r}: {e}",
            field=getattr(e, "field", None),
            value=getattr(e, "value", None),
        ) from e


def load_route_rules(routes_path: Union[str, Path, None] = None) -> Tuple[RouteRule, ...]:
    """Load route rules from YAML; the bundled defaults when no path is given."""
    path = Path(routes_path) if routes_path else DEFAULT_ROUTES_PATH
    config = load_config(path)

    routes = config.get("routes")
    if not isinstance(routes, list):
        raise CatalogError("Route file must define a 'routes' list", field="routes")

    rules = tuple(parse_route_rule(rule_dict) for rule_dict in routes)
    logger.info(f"Loaded {len(rules)} route rules from {path}")
    return rules
