"""FastAPI dependencies for access control.

Authentication is handled upstream: whatever authenticates the request
stores an ``Actor`` on ``request.state.actor``. These dependencies only
evaluate requirements against that actor and turn a denial into a 403
carrying the decision explanation.

Usage:
    @router.post(
        "/users",
        dependencies=[Depends(require_access(roles=[Role.ADMIN],
                                             permissions=[Permission.CREATE_USER]))],
    )
    async def create_user():
        ...
"""

from typing import Iterable

from fastapi import Depends, HTTPException, Request, status

from hrportal.core.navigation.routes import RouteGuard
from hrportal.core.policy.decision import Decision
from hrportal.core.policy.engine import PolicyEngine, evaluate
from hrportal.core.policy.explain import explain
from hrportal.core.policy.models import Actor, Requirement, department_requirement
from hrportal.core.rbac.checker import CombinationMode
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role


def get_current_actor(request: Request) -> Actor:
    """Get the authenticated actor for this request."""
    actor = getattr(request.state, "actor", None)
    if not isinstance(actor, Actor):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return actor


def get_engine(request: Request) -> PolicyEngine:
    return request.app.state.engine


def get_route_guard(request: Request) -> RouteGuard:
    return request.app.state.route_guard


def enforce(decision: Decision) -> Decision:
    """Raise 403 for a denied decision, return it otherwise."""
    if not decision.allowed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=explain(decision).to_dict(),
        )
    return decision


class AccessDependency:
    """
    FastAPI dependency evaluating a fixed requirement.

    The requirement is built when the route is declared, so a malformed
    role or permission fails at import time rather than on a request.
    """

    def __init__(self, requirement: Requirement):
        if not isinstance(requirement, Requirement):
            raise TypeError(
                f"AccessDependency needs a Requirement, got {type(requirement).__name__}"
            )
        self.requirement = requirement

    async def __call__(self, actor: Actor = Depends(get_current_actor)) -> Decision:
        return enforce(evaluate(actor, self.requirement))


def require_access(
    roles: Iterable[Role] = (),
    permissions: Iterable[Permission] = (),
    mode: CombinationMode = CombinationMode.ANY,
) -> AccessDependency:
    """Build an AccessDependency from roles and permissions."""
    return AccessDependency(
        Requirement(
            required_roles=frozenset(roles),
            required_permissions=frozenset(permissions),
            combination_mode=mode,
        )
    )


class DepartmentAccessDependency:
    """
    Gate for routes addressing one department's records.

    The target department is read from the path parameter named by
    ``param``. Super admins pass for any department; everyone else must
    satisfy the role and permission gate and belong to that department.
    """

    def __init__(
        self,
        roles: Iterable[Role] = (Role.ADMIN,),
        permissions: Iterable[Permission] = (),
        mode: CombinationMode = CombinationMode.ANY,
        param: str = "department_id",
    ):
        # Validates roles, permissions and mode up front
        self.base = Requirement(
            required_roles=frozenset(roles),
            required_permissions=frozenset(permissions),
            combination_mode=mode,
        )
        self.param = param

    async def __call__(
        self,
        request: Request,
        actor: Actor = Depends(get_current_actor),
    ) -> Decision:
        department_id = request.path_params.get(self.param)
        if not department_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Missing path parameter: {self.param}",
            )

        requirement = department_requirement(
            str(department_id),
            roles=self.base.required_roles,
            permissions=self.base.required_permissions,
            mode=self.base.combination_mode,
        )
        return enforce(evaluate(actor, requirement))
