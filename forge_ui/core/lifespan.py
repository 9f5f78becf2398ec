"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from forge_ui import __version__
from forge_ui.config import Settings, get_settings
from forge_ui.exceptions import HelperRegistryException
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.registry import build_html_helpers, build_text_helpers, validate_templates
from forge_ui.state_managers import InMemoryRepositoryStore, load_seed_file
from forge_ui.views.mail_renderer import MailRenderer
from forge_ui.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


def build_renderers(settings: Settings) -> tuple[TemplateRenderer, MailRenderer]:
    """Build both registries and the renderers that install them.

    Every shipped template is checked against its registry, so a template
    calling an unregistered helper stops the application here.

    Raises:
        HelperRegistryException: If a template references an unknown helper
    """
    html_helpers = build_html_helpers(settings)
    text_helpers = build_text_helpers(settings)

    template_renderer = TemplateRenderer(html_helpers)
    validate_templates(template_renderer.env, html_helpers, template_renderer.page_template_names())

    mail_renderer = MailRenderer(html_helpers, text_helpers)
    problems = mail_renderer.validate()
    if problems:
        log_with_context(
            logger,
            "critical",
            "Mail templates reference unregistered helpers",
            problems=problems,
            event_type="helper_registry_error",
        )
        raise HelperRegistryException(
            "Mail templates reference unregistered helpers", details={"templates": problems}
        )

    log_with_context(
        logger,
        "info",
        "Renderers initialized",
        html_helpers=len(html_helpers),
        text_helpers=len(text_helpers),
        mail_templates=mail_renderer.names,
        event_type="renderers_ready",
    )
    return template_renderer, mail_renderer


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup is never skipped.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()

    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Forge UI application",
        version=__version__,
        event_type="app_startup",
    )

    app.state.template_renderer, app.state.mail_renderer = build_renderers(settings)

    # A store handed to create_app() takes precedence over the seed file
    store: InMemoryRepositoryStore | None = getattr(app.state, "repository_store", None)
    if store is None:
        seed = load_seed_file(settings.seed_file)
        store = InMemoryRepositoryStore(seed.repositories, seed.organizations)
        app.state.repository_store = store
    await store.initialize()

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Forge UI application",
            event_type="app_shutdown",
        )

        await store.cleanup()
        log_with_context(
            logger,
            "info",
            "Repository store cleaned up",
            event_type="state_managers_cleanup",
        )
