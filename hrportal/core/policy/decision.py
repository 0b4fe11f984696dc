"""Access decisions returned by the policy engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional

from hrportal.core.errors import PolicyConfigurationError
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role

from .models import TargetScope


class DenialReason(str, Enum):
    """Why a request was denied. Every denial carries exactly one."""

    MISSING_ROLE = "missing_role"
    MISSING_PERMISSION = "missing_permission"
    MISSING_SCOPE = "missing_scope"


@dataclass(frozen=True)
class Decision:
    """
    Result of evaluating a requirement for an actor.

    Allowed decisions carry no reason. Denied decisions name the first
    check that failed and the identifiers that check was missing.
    """
    allowed: bool
    reason: Optional[DenialReason] = None
    missing_roles: FrozenSet[Role] = field(default_factory=frozenset)
    missing_permissions: FrozenSet[Permission] = field(default_factory=frozenset)
    missing_scope: Optional[TargetScope] = None

    def __post_init__(self):
        if not isinstance(self.allowed, bool):
            raise PolicyConfigurationError(
                f"Decision.allowed must be a bool, got {type(self.allowed).__name__}",
                field="allowed",
                value=self.allowed,
            )
        if self.allowed:
            if (
                self.reason is not None
                or self.missing_roles
                or self.missing_permissions
                or self.missing_scope is not None
            ):
                raise PolicyConfigurationError(
                    "An allowed decision carries no denial reason or missing identifiers",
                    field="reason",
                    value=self.reason,
                )
        elif not isinstance(self.reason, DenialReason):
            raise PolicyConfigurationError(
                "A denied decision must name a DenialReason",
                field="reason",
                value=self.reason,
            )

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny_role(cls, roles: Iterable[Role]) -> "Decision":
        return cls(
            allowed=False,
            reason=DenialReason.MISSING_ROLE,
            missing_roles=frozenset(roles),
        )

    @classmethod
    def deny_permission(cls, permissions: Iterable[Permission]) -> "Decision":
        return cls(
            allowed=False,
            reason=DenialReason.MISSING_PERMISSION,
            missing_permissions=frozenset(permissions),
        )

    @classmethod
    def deny_scope(cls, scope: TargetScope) -> "Decision":
        return cls(
            allowed=False,
            reason=DenialReason.MISSING_SCOPE,
            missing_scope=scope,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert decision to a JSON-ready dictionary."""
        return {
            "allowed": self.allowed,
            "reason": self.reason.value if self.reason else None,
            "missing_roles": sorted(r.value for r in self.missing_roles),
            "missing_permissions": sorted(p.value for p in self.missing_permissions),
            "missing_scope": self.missing_scope.to_dict() if self.missing_scope else None,
        }
