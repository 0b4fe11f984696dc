from typing import Optional

from fastapi import FastAPI

from hrportal import __version__
from hrportal.api.routers import access
from hrportal.common.logger import setup_logger
from hrportal.core.config import Settings, get_settings
from hrportal.core.navigation.catalog import CatalogStore
from hrportal.core.navigation.routes import RouteGuard
from hrportal.core.policy.engine import PolicyEngine


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the access API.

    Loads the navigation catalog and route rules once; a malformed file
    fails startup instead of producing a half-configured engine.
    """
    settings = settings or get_settings()

    logger = setup_logger(
        level=settings.effective_log_level,
        log_dir=settings.log_dir if settings.log_to_file else None,
    )

    app = FastAPI(
        title=settings.app_name,
        description="Role, permission and scope policy engine for the HR portal",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.engine = PolicyEngine(CatalogStore.from_path(settings.navigation_catalog_path))
    app.state.route_guard = RouteGuard.from_path(settings.route_rules_path)

    app.include_router(access.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": __version__}

    logger.info(f"{settings.app_name} {__version__} ready")
    return app
