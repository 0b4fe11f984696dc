"""Human-readable explanations of access decisions.

The presentation layer decides how a denial is shown; this module only
turns a Decision into a stable message plus the structured identifiers
behind it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .decision import Decision, DenialReason
from .models import ScopeType

GRANTED_MESSAGE = "Access granted."

DENIAL_MESSAGES: Dict[DenialReason, str] = {
    DenialReason.MISSING_ROLE: "Access denied. Insufficient role privileges.",
    DenialReason.MISSING_PERMISSION: "Access denied. Insufficient permissions.",
    DenialReason.MISSING_SCOPE: "Access denied. You can only access your own department.",
}

ORGANIZATION_SCOPE_MESSAGE = (
    "Access denied. Organization-wide access requires Super Admin."
)


@dataclass(frozen=True)
class DecisionExplanation:
    """Structured, serializable reason behind a decision."""
    allowed: bool
    message: str
    reason: Optional[DenialReason] = None
    missing_roles: List[str] = field(default_factory=list)
    missing_permissions: List[str] = field(default_factory=list)
    missing_scope: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed": self.allowed,
            "message": self.message,
            "reason": self.reason.value if self.reason else None,
            "missing_roles": list(self.missing_roles),
            "missing_permissions": list(self.missing_permissions),
            "missing_scope": self.missing_scope,
        }


def explain(decision: Decision) -> DecisionExplanation:
    """Explain a decision for diagnostics and user-facing messaging."""
    if decision.allowed:
        return DecisionExplanation(allowed=True, message=GRANTED_MESSAGE)

    message = DENIAL_MESSAGES[decision.reason]
    if (
        decision.reason is DenialReason.MISSING_SCOPE
        and decision.missing_scope is not None
        and decision.missing_scope.type is ScopeType.ALL
    ):
        message = ORGANIZATION_SCOPE_MESSAGE

    return DecisionExplanation(
        allowed=False,
        message=message,
        reason=decision.reason,
        missing_roles=sorted(r.value for r in decision.missing_roles),
        missing_permissions=sorted(p.value for p in decision.missing_permissions),
        missing_scope=decision.missing_scope.to_dict() if decision.missing_scope else None,
    )
