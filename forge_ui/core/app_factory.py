"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from forge_ui import __version__
from forge_ui.config import Settings, get_settings
from forge_ui.core.lifespan import lifespan
from forge_ui.core.middleware import setup_middleware
from forge_ui.middleware.error_handlers import register_error_handlers
from forge_ui.routers import health_router, view_router
from forge_ui.state_managers import InMemoryRepositoryStore


def create_app(settings: Settings | None = None, store: InMemoryRepositoryStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with (defaults to singleton)
        store: Repository store to serve from (defaults to one seeded from
            ``settings.seed_file`` at startup)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
        **Forge UI** - repository settings pages and organization headers

        ## Viewer identity
        Pages are rendered for the viewer named by the reverse proxy
        authentication header (`X-WEBAUTH-USER` by default).

        ## Health
        - `/health` - Basic health check with helper registry sizes

        ## Rate Limits
        - All endpoints: 60 requests/minute per IP
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )
    app.state.settings = settings
    if store is not None:
        app.state.repository_store = store

    # Configure middleware
    setup_middleware(app, settings)

    # Register exception handlers
    register_error_handlers(app)

    # Page routes are app-relative; the sub path is handled by the proxy
    app.include_router(health_router.router, tags=["health"])
    app.include_router(view_router.router, tags=["views"])

    # Pages render with the settings this app was built with
    app.dependency_overrides[get_settings] = lambda: settings

    return app
