"""Template rendering for HTML pages and fragments."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader

from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.models.views import OrgHeaderView, RepoSettingsView
from forge_ui.protocols import Translator
from forge_ui.registry import HelperRegistry

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

PAGE_TEMPLATES = ("repo/", "org/")


def build_environment(helpers: HelperRegistry, directory: Path = TEMPLATES_DIR) -> Environment:
    """Jinja2 environment for HTML output with ``helpers`` as globals."""
    env = Environment(
        loader=FileSystemLoader(directory),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(helpers)
    return env


class TemplateRenderer:
    """Renders the repository settings page and the organization header.

    The renderer owns one environment built from the HTML helper registry;
    the registry is never mutated after construction.
    """

    def __init__(self, helpers: HelperRegistry, directory: Path = TEMPLATES_DIR):
        self.helpers = helpers
        self.env = build_environment(helpers, directory)
        self.templates = Jinja2Templates(env=self.env)

    def page_template_names(self) -> list[str]:
        return [name for name in self.env.list_templates() if name.startswith(PAGE_TEMPLATES)]

    def render_repo_settings(self, request: Request, view: RepoSettingsView, i18n: Translator) -> HTMLResponse:
        """Render the repository settings page.

        Args:
            request: FastAPI request object
            view: Settings view model for the current viewer
            i18n: Translator for the viewer's language

        Returns:
            HTMLResponse with the rendered settings page
        """
        log_with_context(
            logger,
            "debug",
            "Rendering repository settings",
            repository=view.repo.full_name,
            viewer=view.viewer_name,
            event_type="render_repo_settings",
        )
        return self.templates.TemplateResponse(
            request,
            "repo/settings/options.html",
            {
                "i18n": i18n,
                "view": view,
                "repo": view.repo,
                "sections": view.sections,
                "page_start_time": getattr(request.state, "page_start_time", None),
            },
        )

    def render_org_header(self, request: Request, view: OrgHeaderView, i18n: Translator) -> HTMLResponse:
        """Render the organization header fragment."""
        return self.templates.TemplateResponse(
            request,
            "org/header.html",
            {
                "i18n": i18n,
                "view": view,
                "org": view.org,
            },
        )
