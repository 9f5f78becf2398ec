"""Helpers that produce markup the template engine will not escape again.

``markupsafe.Markup`` is the only value Jinja2 inserts verbatim. These helpers
are the single place such values are produced from strings, and none of them
trusts an arbitrary ``str``: plain strings are sanitized or encoded first.
"""

from typing import Any

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup
from markupsafe import escape as _escape

from forge_ui.services.markup_service import sanitize


def safe(raw: Any) -> Markup:
    """Embed HTML without escaping.

    ``Markup`` values (already produced by a renderer or sanitizer) pass
    through untouched; anything else is sanitized.
    """
    if isinstance(raw, Markup):
        return raw
    return sanitize(str(raw))


def safe_js(value: Any) -> Markup:
    """Encode a value as a JavaScript literal safe inside ``<script>``."""
    return htmlsafe_json_dumps(value)


def str2html(raw: str) -> Markup:
    """Sanitize user supplied HTML for embedding."""
    return sanitize(raw)


def escape(raw: Any) -> Markup:
    return _escape(raw)


def escape_text(raw: Any) -> str:
    """Escaped string for text templates, which never auto-escape."""
    return str(_escape(raw))
