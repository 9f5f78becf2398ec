"""Viewer identity and host/origin policy for Forge UI."""

from fastapi import Depends, Request

from forge_ui.config import Settings, get_settings
from forge_ui.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def get_viewer_name(request: Request, settings: Settings = Depends(get_settings)) -> str | None:
    """Name of the signed in viewer, taken from the reverse proxy header.

    Args:
        request: The FastAPI request object
        settings: Settings instance naming the header

    Returns:
        Viewer name, or None for anonymous requests
    """
    viewer = request.headers.get(settings.reverse_proxy_auth_header, "").strip()

    log_with_context(
        logger,
        "debug",
        "Viewer identified",
        viewer=viewer or "anonymous",
        path=str(request.url.path),
        event_type="auth_check",
    )
    return viewer or None


def get_cors_origins(settings: Settings) -> list[str]:
    """Get allowed CORS origins from settings.

    Args:
        settings: Settings instance with CORS configuration

    Returns:
        List of allowed origins
    """
    return [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]


def get_trusted_hosts(settings: Settings) -> list[str]:
    """Get trusted host patterns from settings.

    Args:
        settings: Settings instance with trusted hosts configuration

    Returns:
        List of trusted host patterns
    """
    return [host.strip() for host in settings.trusted_hosts.split(",") if host.strip()]
