"""Markup engine for user supplied text.

Commit messages and notes are not Markdown: they are escaped plain text in
which references (URLs, commit ids, issues, mentions, emails, emoji
shortcodes) are turned into links. Free-form Markdown goes through
``markdown`` and every HTML result meant to be trusted is cleaned with
``nh3``.
"""

import re
from collections.abc import Mapping

import emoji
import markdown
import nh3
from markupsafe import Markup, escape

from forge_ui.exceptions import MarkupRenderException

_TOKEN_RE = re.compile(
    r"(?P<url>https?://[^\s<>\"]+)"
    r"|(?P<email>(?<![\w.+-])[\w.+-]+@[\w-]+(?:\.[\w-]+)+)"
    r"|(?P<mention>(?<![\w.&])@(?P<user>\w(?:[\w.-]*\w)?))"
    r"|(?P<issue>(?<![^\s(\[])#(?P<index>\d+)\b)"
    r"|(?P<alnum_issue>(?<![\w/])(?P<alnum_index>[A-Z]{1,10}-[1-9]\d*)\b)"
    r"|(?P<sha>(?<![\w/])[0-9a-f]{7,40}(?![\w/]))"
    r"|(?P<emoji>:(?P<alias>[a-z0-9_+-]+):)"
)
_TRAILING_RE = re.compile(r"(?:[.,;:!?)\]]|&#34;|&#39;|&gt;|&lt;|&quot;)+$")
_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")

SANITIZER_ATTRIBUTES: dict[str, set[str]] = {
    **{tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()},
    "*": {"class"},
    "span": {"aria-label", "title"},
}
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def sanitize(html: str) -> Markup:
    """Strip everything but a known-safe subset of HTML."""
    return Markup(nh3.clean(html, attributes=SANITIZER_ATTRIBUTES))


def render_markdown(text: str) -> Markup:
    """Render Markdown to sanitized HTML."""
    if not text.strip():
        return Markup("")
    return sanitize(markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS))


def _emoji_span(chars: str, data: dict) -> str:
    label = data.get("en", chars).strip(":").replace("_", " ")
    return f'<span class="emoji" aria-label="{escape(label)}">{chars}</span>'


def wrap_emoji(text: str) -> str:
    """Wrap every emoji character of ``text`` in a labelled span."""
    return emoji.replace_emoji(text, replace=_emoji_span)


def emoji_from_alias(alias: str) -> str | None:
    """Emoji character for a shortcode alias such as ``+1``, or None."""
    code = f":{alias}:"
    rendered = emoji.emojize(code, language="alias")
    return None if rendered == code else rendered


def is_emoji_code(text: str) -> bool:
    """True when ``text`` is exactly one emoji character sequence."""
    return emoji.is_emoji(text)


def replace_aliases(text: str) -> str:
    """Replace ``:alias:`` shortcodes with emoji characters, leaving text as is."""
    return emoji.emojize(text, language="alias")


class CommitMessageRenderer:
    """Reference linker for escaped commit messages and notes.

    Args:
        user_link_prefix: Prefix for ``@mention`` links (the site sub path)
    """

    def __init__(self, user_link_prefix: str = ""):
        self.user_link_prefix = str(escape(user_link_prefix.rstrip("/")))

    def render_commit_message(
        self, text: str, url_prefix: str, url_default: str, metas: Mapping[str, str] | None
    ) -> str:
        return self._render(text, url_prefix, url_default, metas or {}, link_emails=True)

    def render_commit_message_subject(
        self, text: str, url_prefix: str, url_default: str, metas: Mapping[str, str] | None
    ) -> str:
        return self._render(text, url_prefix, url_default, metas or {}, link_emails=False)

    def render_emoji(self, text: str) -> str:
        return self._render(text, "", "", {}, link_emails=False, references=False)

    def _render(
        self,
        text: str,
        url_prefix: str,
        url_default: str,
        metas: Mapping[str, str],
        link_emails: bool,
        references: bool = True,
    ) -> str:
        url_prefix = str(escape(url_prefix.rstrip("/")))
        url_default = str(escape(url_default))
        alphanumeric = metas.get("style") == "alphanumeric"
        out: list[str] = []
        pos = 0

        for match in _TOKEN_RE.finditer(text):
            link = self._link_for(match, url_prefix, metas, link_emails, references, alphanumeric)
            if link is None:
                continue
            html, end = link
            out.append(self._plain(text[pos : match.start()], url_default))
            out.append(html)
            pos = end

        out.append(self._plain(text[pos:], url_default))
        return "".join(out)

    def _link_for(
        self,
        match: re.Match[str],
        url_prefix: str,
        metas: Mapping[str, str],
        link_emails: bool,
        references: bool,
        alphanumeric: bool,
    ) -> tuple[str, int] | None:
        if match.group("emoji"):
            glyph = emoji_from_alias(match.group("alias"))
            if glyph is None:
                return None
            return wrap_emoji(glyph), match.end()

        if not references:
            return None

        if match.group("url"):
            url = match.group("url")
            trailing = _TRAILING_RE.search(url)
            if trailing:
                url = url[: trailing.start()]
            if not url:
                return None
            return f'<a href="{url}" class="link">{url}</a>', match.start() + len(url)

        if match.group("email"):
            if not link_emails:
                return None
            address = match.group("email")
            return f'<a href="mailto:{address}" class="mailto">{address}</a>', match.end()

        if match.group("mention"):
            user = match.group("user")
            return f'<a href="{self.user_link_prefix}/{user}" class="mention">@{user}</a>', match.end()

        if match.group("issue") and not alphanumeric:
            index = match.group("index")
            href = self._issue_link(index, url_prefix, metas)
            return f'<a href="{href}" class="ref-issue">#{index}</a>', match.end()

        if match.group("alnum_issue") and alphanumeric:
            index = match.group("alnum_index")
            href = self._issue_link(index, url_prefix, metas)
            return f'<a href="{href}" class="ref-issue">{index}</a>', match.end()

        if match.group("sha") and url_prefix:
            sha = match.group("sha")
            return (
                f'<a href="{url_prefix}/commit/{sha}" rel="nofollow" class="commit"><code>{sha[:10]}</code></a>',
                match.end(),
            )

        return None

    def _issue_link(self, index: str, url_prefix: str, metas: Mapping[str, str]) -> str:
        fmt = metas.get("format")
        if not fmt:
            return f"{url_prefix}/issues/{index}"

        values = {"user": metas.get("user", ""), "repo": metas.get("repo", ""), "index": index}

        def _expand(m: re.Match[str]) -> str:
            key = m.group(1)
            if key not in values:
                raise MarkupRenderException(
                    f"Unknown placeholder {{{key}}} in external tracker format",
                    details={"format": fmt},
                )
            return values[key]

        return str(escape(_PLACEHOLDER_RE.sub(_expand, fmt)))

    def _plain(self, segment: str, url_default: str) -> str:
        segment = wrap_emoji(segment)
        if not url_default or not segment:
            return segment
        lines = segment.split("\n")
        return "\n".join(
            f'<a href="{url_default}" class="default-link">{line}</a>' if line.strip() else line for line in lines
        )
