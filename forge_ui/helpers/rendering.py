"""Content renderers for commit messages, notes, reactions and emoji.

Every renderer HTML-escapes its input before handing it to the markup
engine, so the engine only ever adds markup. Engine failures are logged and
rendered as empty output: callers must read an empty result as "nothing to
show", not as proof of success.
"""

from collections.abc import Callable, Mapping

from markupsafe import Markup, escape

from forge_ui.exceptions import MarkupRenderException
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.protocols import MarkupRenderer
from forge_ui.services.markup_service import (
    CommitMessageRenderer,
    emoji_from_alias,
    is_emoji_code,
    replace_aliases,
)

logger = get_logger(__name__)

DEFAULT_RENDERER: MarkupRenderer = CommitMessageRenderer()

Metas = Mapping[str, str] | None


def commit_subject(msg: str) -> str:
    """First line of a commit message, trimmed on both sides."""
    line = msg.lstrip()
    line_end = line.find("\n")
    if line_end > 0:
        line = line[:line_end]
    return line.rstrip()


def commit_body(msg: str) -> str:
    """Everything after the first line of a commit message, left-trimmed.

    A message without a newline (or starting with one) has no body.
    """
    trimmed = msg.rstrip()
    line_end = trimmed.find("\n")
    if line_end <= 0:
        return ""
    return trimmed[line_end + 1 :].lstrip()


def is_multiline_commit_message(msg: str) -> bool:
    return msg.strip().count("\n") >= 1


def _guarded(operation: str, render: Callable[[], str]) -> Markup:
    try:
        return Markup(render())
    except MarkupRenderException as e:
        log_with_context(
            logger,
            "error",
            "Markup rendering failed",
            operation=operation,
            error=e.message,
            error_details=e.details,
            event_type="markup_render_error",
        )
        return Markup("")


def render_commit_message(
    msg: str, url_prefix: str, metas: Metas = None, renderer: MarkupRenderer = DEFAULT_RENDERER
) -> Markup:
    """First line of the rendered commit message."""
    return render_commit_message_link(msg, url_prefix, "", metas, renderer)


def render_commit_message_link(
    msg: str,
    url_prefix: str,
    url_default: str,
    metas: Metas = None,
    renderer: MarkupRenderer = DEFAULT_RENDERER,
) -> Markup:
    """First line of the rendered commit message, plain text linking to ``url_default``."""
    clean = str(escape(msg))
    full = _guarded(
        "render_commit_message",
        lambda: renderer.render_commit_message(clean, url_prefix, url_default, metas),
    )
    lines = full.strip().split("\n")
    return Markup(lines[0])


def render_commit_message_link_subject(
    msg: str,
    url_prefix: str,
    url_default: str,
    metas: Metas = None,
    renderer: MarkupRenderer = DEFAULT_RENDERER,
) -> Markup:
    """Rendered subject line; email addresses are left unlinked."""
    subject = commit_subject(msg)
    if not subject:
        return Markup("")
    clean = str(escape(subject))
    return _guarded(
        "render_commit_message_subject",
        lambda: renderer.render_commit_message_subject(clean, url_prefix, url_default, metas),
    )


def render_commit_body(
    msg: str, url_prefix: str, metas: Metas = None, renderer: MarkupRenderer = DEFAULT_RENDERER
) -> Markup:
    """Rendered commit message without its subject line."""
    body = commit_body(msg)
    if not body:
        return Markup("")
    clean = str(escape(body))
    return _guarded(
        "render_commit_body",
        lambda: renderer.render_commit_message(clean, url_prefix, "", metas),
    )


def render_note(msg: str, url_prefix: str, metas: Metas = None, renderer: MarkupRenderer = DEFAULT_RENDERER) -> Markup:
    """Render a git-notes file like a commit message."""
    if not msg.strip():
        return Markup("")
    clean = str(escape(msg))
    return _guarded(
        "render_note",
        lambda: renderer.render_commit_message(clean, url_prefix, "", metas),
    )


def render_emoji(text: str, renderer: MarkupRenderer = DEFAULT_RENDERER) -> Markup:
    """Escape ``text`` and render its emoji shortcodes."""
    if not text.strip():
        return Markup("")
    clean = str(escape(text))
    return _guarded("render_emoji", lambda: renderer.render_emoji(clean))


def render_emoji_plain(text: str) -> str:
    """Replace emoji shortcodes with characters, without any markup."""
    return replace_aliases(text)


def reaction_to_emoji(reaction: str, static_url_prefix: str = "") -> Markup:
    """Emoji for a reaction: the character itself, its alias, or a custom image."""
    if is_emoji_code(reaction):
        return Markup(reaction)
    glyph = emoji_from_alias(reaction)
    if glyph is not None:
        return Markup(glyph)
    return Markup('<img alt=":{0}:" src="{1}/img/emoji/{0}.png"></img>').format(reaction, static_url_prefix)
