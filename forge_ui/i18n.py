"""Translation catalogs.

The real translation service lives outside the presentation layer. This
module provides the small catalog-backed implementation the templates are
rendered with: one JSON file of ``key -> message`` per locale.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from forge_ui.helpers.plural import tr_n
from forge_ui.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

LOCALE_DIR = Path(__file__).parent / "locale"


class Locale:
    """Message catalog for a single language.

    Messages use printf-style placeholders (``%s``, ``%d``). Unknown keys are
    returned unchanged so a missing translation is visible but harmless.
    """

    def __init__(self, lang: str, messages: dict[str, str]):
        self.lang = lang
        self._messages = messages

    def tr(self, key: str, *args: Any) -> str:
        message = self._messages.get(key, key)
        if not args:
            return message
        try:
            return message % args
        except (TypeError, ValueError) as e:
            log_with_context(
                logger,
                "warning",
                "Translation arguments do not match message",
                key=key,
                lang=self.lang,
                error=str(e),
                event_type="i18n_format_error",
            )
            return message

    def tr_n(self, count: Any, key1: str, key_n: str, *args: Any) -> str:
        """Translate the plural form of ``key1``/``key_n`` matching ``count``."""
        return self.tr(tr_n(self.lang, count, key1, key_n), *args)

    def __contains__(self, key: str) -> bool:
        return key in self._messages


def _read_catalog(lang: str, directory: Path) -> dict[str, str] | None:
    path = directory / f"{lang}.json"
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        log_with_context(
            logger,
            "error",
            "Invalid JSON in locale catalog",
            file_path=str(path),
            error=str(e),
            event_type="i18n_catalog_invalid",
        )
        return None
    if not isinstance(data, dict):
        return None
    return {str(k): str(v) for k, v in data.items()}


@lru_cache(maxsize=32)
def load_locale(lang: str, default_lang: str = "en-US", directory: Path = LOCALE_DIR) -> Locale:
    """Load the catalog for ``lang``, falling back to ``default_lang``.

    The default catalog also backs keys the requested language lacks.
    """
    default_messages = _read_catalog(default_lang, directory) or {}
    if lang == default_lang:
        return Locale(lang, default_messages)

    messages = _read_catalog(lang, directory)
    if messages is None:
        log_with_context(
            logger,
            "debug",
            "No catalog for locale, using default",
            lang=lang,
            default_lang=default_lang,
            event_type="i18n_fallback",
        )
        return Locale(default_lang, default_messages)
    return Locale(lang, {**default_messages, **messages})
