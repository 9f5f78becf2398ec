"""Health endpoints."""

from fastapi import APIRouter, Request

from forge_ui import __version__
from forge_ui.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Basic health check endpoint.

    Reports the number of helpers registered for HTML and text templates.
    """
    helpers: dict[str, int] = {}
    template_renderer = getattr(request.app.state, "template_renderer", None)
    mail_renderer = getattr(request.app.state, "mail_renderer", None)
    if template_renderer is not None:
        helpers["html"] = len(template_renderer.helpers)
    if mail_renderer is not None:
        helpers["text"] = len(mail_renderer.text_helpers)
    return HealthResponse(status="ok", version=__version__, helpers=helpers)
