"""FastAPI dependencies for dependency injection."""

import re

from fastapi import Depends, Request

from forge_ui.config import Settings, get_settings
from forge_ui.i18n import Locale, load_locale
from forge_ui.state_managers import InMemoryRepositoryStore
from forge_ui.views.mail_renderer import MailRenderer
from forge_ui.views.template_renderer import TemplateRenderer

LANG_COOKIE = "lang"
LANG_RE = re.compile(r"^[a-z]{2}-[A-Z]{2}$")


async def get_template_renderer(request: Request) -> TemplateRenderer:
    """
    Get the page renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared TemplateRenderer instance.

    Raises:
        RuntimeError: If the renderer is not initialized.
    """
    renderer: TemplateRenderer | None = getattr(request.app.state, "template_renderer", None)

    if renderer is None:
        raise RuntimeError("Template renderer not initialized. This should never happen.")

    return renderer


async def get_mail_renderer(request: Request) -> MailRenderer:
    """
    Get the mail renderer from app state.

    Raises:
        RuntimeError: If the renderer is not initialized.
    """
    renderer: MailRenderer | None = getattr(request.app.state, "mail_renderer", None)

    if renderer is None:
        raise RuntimeError("Mail renderer not initialized.")

    return renderer


async def get_repository_store(request: Request) -> InMemoryRepositoryStore:
    """
    Get the repository store from app state.

    Raises:
        RuntimeError: If the store is not initialized.
    """
    store: InMemoryRepositoryStore | None = getattr(request.app.state, "repository_store", None)

    if store is None:
        raise RuntimeError("Repository store not initialized.")

    return store


async def get_locale(request: Request, settings: Settings = Depends(get_settings)) -> Locale:
    """Translator for the language chosen by the ``lang`` cookie."""
    lang = request.cookies.get(LANG_COOKIE, "")
    if not LANG_RE.match(lang):
        lang = settings.default_locale
    return load_locale(lang, settings.default_locale)
