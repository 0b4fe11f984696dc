"""Value types evaluated by the policy engine.

Actors and requirements are built fresh for each evaluation and are
immutable. Construction coerces string values into enums and rejects
anything it does not recognize, so a malformed input can never reach an
access decision.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional

from hrportal.core.errors import InvalidActorError, InvalidRequirementError
from hrportal.core.rbac.checker import CombinationMode
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role, get_default_role_permissions


class ScopeType(str, Enum):
    """Data-access boundaries, narrowest first."""

    SELF = "self"              # the actor's own records
    DEPARTMENT = "department"  # one department's records
    ALL = "all"                # the entire organization


def _coerce(enum_cls, value: Any, error_cls, field_name: str):
    if isinstance(value, enum_cls):
        return value
    # Member names ("ANY", "DEPARTMENT") are accepted alongside values
    if isinstance(value, str) and value in enum_cls.__members__:
        return enum_cls[value]
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        raise error_cls(
            f"Unknown {field_name} value: {value!r}",
            field=field_name,
            value=value,
        ) from None


def _coerce_set(enum_cls, values: Optional[Iterable[Any]], error_cls, field_name: str):
    if values is None:
        return frozenset()
    if isinstance(values, (str, bytes)):
        raise error_cls(
            f"{field_name} must be a collection, got a bare string: {values!r}",
            field=field_name,
            value=values,
        )
    return frozenset(_coerce(enum_cls, v, error_cls, field_name) for v in values)


@dataclass(frozen=True)
class Actor:
    """The authenticated identity being authorized for one evaluation."""

    role: Role
    permissions: FrozenSet[Permission] = field(default_factory=frozenset)
    department_id: Optional[str] = None
    actor_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "role", _coerce(Role, self.role, InvalidActorError, "role")
        )
        object.__setattr__(
            self,
            "permissions",
            _coerce_set(Permission, self.permissions, InvalidActorError, "permissions"),
        )

    @classmethod
    def with_default_permissions(
        cls,
        role: Role,
        department_id: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> "Actor":
        """Build an actor carrying the default permission set of its role."""
        role = _coerce(Role, role, InvalidActorError, "role")
        return cls(
            role=role,
            permissions=get_default_role_permissions(role),
            department_id=department_id,
            actor_id=actor_id,
        )

    @property
    def is_super_admin(self) -> bool:
        return self.role is Role.SUPER_ADMIN


@dataclass(frozen=True)
class TargetScope:
    """The data boundary an action targets."""

    type: ScopeType
    department_id: Optional[str] = None

    def __post_init__(self):
        scope_type = _coerce(ScopeType, self.type, InvalidRequirementError, "target_scope")
        object.__setattr__(self, "type", scope_type)
        if scope_type is ScopeType.DEPARTMENT and not self.department_id:
            raise InvalidRequirementError(
                "Department scope requires a department_id",
                field="target_scope",
                value=self.department_id,
            )

    @classmethod
    def own(cls) -> "TargetScope":
        return cls(ScopeType.SELF)

    @classmethod
    def department(cls, department_id: str) -> "TargetScope":
        return cls(ScopeType.DEPARTMENT, department_id)

    @classmethod
    def organization(cls) -> "TargetScope":
        return cls(ScopeType.ALL)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "department_id": self.department_id}


@dataclass(frozen=True)
class Requirement:
    """
    The access constraint an action or feature declares.

    Empty role and permission sets mean "no restriction". The combination
    mode has no implicit fallback: passing ``None`` is an error.
    """

    required_roles: FrozenSet[Role] = field(default_factory=frozenset)
    required_permissions: FrozenSet[Permission] = field(default_factory=frozenset)
    combination_mode: CombinationMode = CombinationMode.ANY
    target_scope: Optional[TargetScope] = None

    def __post_init__(self):
        object.__setattr__(
            self,
            "required_roles",
            _coerce_set(Role, self.required_roles, InvalidRequirementError, "required_roles"),
        )
        object.__setattr__(
            self,
            "required_permissions",
            _coerce_set(
                Permission,
                self.required_permissions,
                InvalidRequirementError,
                "required_permissions",
            ),
        )
        if self.combination_mode is None:
            raise InvalidRequirementError(
                "combination_mode must be set", field="combination_mode", value=None
            )
        object.__setattr__(
            self,
            "combination_mode",
            _coerce(
                CombinationMode,
                self.combination_mode,
                InvalidRequirementError,
                "combination_mode",
            ),
        )
        if self.target_scope is not None and not isinstance(self.target_scope, TargetScope):
            raise InvalidRequirementError(
                f"target_scope must be a TargetScope, got {type(self.target_scope).__name__}",
                field="target_scope",
                value=self.target_scope,
            )

    @property
    def is_unrestricted(self) -> bool:
        return (
            not self.required_roles
            and not self.required_permissions
            and self.target_scope is None
        )

    def without_scope(self) -> "Requirement":
        """The same role and permission constraint with no scope attached."""
        if self.target_scope is None:
            return self
        return Requirement(
            required_roles=self.required_roles,
            required_permissions=self.required_permissions,
            combination_mode=self.combination_mode,
        )


def department_requirement(
    department_id: str,
    roles: Iterable[Role] = (Role.ADMIN,),
    permissions: Iterable[Permission] = (),
    mode: CombinationMode = CombinationMode.ANY,
) -> Requirement:
    """Requirement for operating on one department's records.

    Defaults to the department-admin gate: an admin of that department,
    or a super admin of any department.
    """
    return Requirement(
        required_roles=frozenset(roles),
        required_permissions=frozenset(permissions),
        combination_mode=mode,
        target_scope=TargetScope.department(department_id),
    )
