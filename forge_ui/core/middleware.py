"""Middleware configuration."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from forge_ui.config import Settings
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.security import get_cors_origins, get_trusted_hosts

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> Limiter:
    """Install host/origin policy, rate limiting and request bookkeeping.

    Pages are read-only, so cross-origin requests are limited to GET.

    Args:
        app: FastAPI application instance
        settings: Application settings

    Returns:
        Limiter instance for rate limiting
    """
    cors_origins = get_cors_origins(settings)
    trusted_hosts = get_trusted_hosts(settings)
    log_with_context(
        logger,
        "info",
        "Configuring host and origin policy",
        origins=cors_origins,
        hosts=trusted_hosts,
        rate_limit=settings.rate_limit,
        event_type="security_config",
    )

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Reject forged Host headers before anything renders links from them
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def track_requests(request: Request, call_next):
        """Count requests and stamp the render start for ``LoadTimes``."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        request.state.page_start_time = datetime.now(UTC)
        return await call_next(request)

    return limiter
