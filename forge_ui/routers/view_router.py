"""Page/view routes for serving HTML pages and fragments."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from forge_ui.config import Settings, get_settings
from forge_ui.dependencies import get_locale, get_repository_store, get_template_renderer
from forge_ui.i18n import Locale
from forge_ui.security import get_viewer_name
from forge_ui.services import repository_service
from forge_ui.state_managers import InMemoryRepositoryStore
from forge_ui.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/org/{org}/header", response_class=HTMLResponse)
async def org_header(
    request: Request,
    org: str,
    viewer: str | None = Depends(get_viewer_name),
    store: InMemoryRepositoryStore = Depends(get_repository_store),
    renderer: TemplateRenderer = Depends(get_template_renderer),
    i18n: Locale = Depends(get_locale),
    settings: Settings = Depends(get_settings),
):
    """Render the organization header fragment."""
    view = await repository_service.get_org_header_view(store, org, viewer, settings)
    return renderer.render_org_header(request, view, i18n)


@router.get("/{owner}/{repo}/settings", response_class=HTMLResponse)
async def repo_settings(
    request: Request,
    owner: str,
    repo: str,
    viewer: str | None = Depends(get_viewer_name),
    store: InMemoryRepositoryStore = Depends(get_repository_store),
    renderer: TemplateRenderer = Depends(get_template_renderer),
    i18n: Locale = Depends(get_locale),
    settings: Settings = Depends(get_settings),
):
    """Render the repository settings page."""
    view = await repository_service.get_repo_settings_view(store, owner, repo, viewer, settings)
    return renderer.render_repo_settings(request, view, i18n)
