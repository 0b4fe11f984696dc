"""Access API endpoints: navigation, route checks and catalog reloads."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query, Request

from hrportal.api.deps import get_current_actor, get_engine, get_route_guard, require_access
from hrportal.api.schemas import DecisionResponse, FeatureNodeResponse, NavigationResponse
from hrportal.common.logger import get_logger
from hrportal.core.navigation.routes import RouteGuard
from hrportal.core.policy.engine import PolicyEngine
from hrportal.core.policy.explain import explain
from hrportal.core.policy.models import Actor
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role

logger = get_logger("api.access")

router = APIRouter(prefix="/access", tags=["access"])


@router.get("/navigation", response_model=NavigationResponse)
async def get_navigation(
    actor: Actor = Depends(get_current_actor),
    engine: PolicyEngine = Depends(get_engine),
):
    """The navigation tree visible to the current actor."""
    generation, snapshot = engine.catalog_store.snapshot_with_generation()
    features = engine.filter_tree(actor, snapshot)
    return NavigationResponse(
        features=[FeatureNodeResponse.from_node(node) for node in features],
        catalog_generation=generation,
    )


@router.get("/routes/check", response_model=DecisionResponse)
async def check_route(
    path: str = Query(..., min_length=1, description="Portal path to check"),
    actor: Actor = Depends(get_current_actor),
    guard: RouteGuard = Depends(get_route_guard),
):
    """Whether the current actor may open a portal path."""
    return DecisionResponse.from_explanation(explain(guard.check(actor, path)))


@router.post(
    "/catalog/reload",
    dependencies=[
        Depends(
            require_access(
                roles=[Role.SUPER_ADMIN],
                permissions=[Permission.MANAGE_SYSTEM_SETTINGS],
            )
        )
    ],
)
def reload_catalog(
    request: Request,
    actor: Actor = Depends(get_current_actor),
    engine: PolicyEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Reload the navigation catalog from its configured file."""
    logger.info(f"Catalog reload requested by {actor.actor_id or actor.role.value}")
    engine.catalog_store.reload(request.app.state.settings.navigation_catalog_path)
    return {"generation": engine.catalog_store.generation}
