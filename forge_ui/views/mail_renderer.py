"""Mail rendering.

A mail template holds the subject and the body in one file, separated by a
line of three or more dashes. The subject is compiled as plain text with the
text helper registry; the body is compiled as HTML with the HTML registry.
"""

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, TemplateSyntaxError

from forge_ui.exceptions import MailTemplateNotFoundException
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.registry import HelperRegistry, missing_helpers
from forge_ui.views.template_renderer import TEMPLATES_DIR, build_environment

logger = get_logger(__name__)

MAIL_PREFIX = "mail/"

SUBJECT_SPLIT_RE = re.compile(r"^-{3,}[\s]*$", re.MULTILINE)


def split_subject_body(content: str) -> tuple[str, str]:
    """Split mail template source at the first dash line.

    Without a dash line the subject is empty and everything is body.
    """
    match = SUBJECT_SPLIT_RE.search(content)
    if match is None:
        return "", content
    return content[: match.start()], content[match.end() :]


class MailRenderer:
    """Renders mail templates into ``(subject, body)`` pairs."""

    def __init__(
        self,
        html_helpers: HelperRegistry,
        text_helpers: HelperRegistry,
        directory: Path = TEMPLATES_DIR,
    ):
        self.html_helpers = html_helpers
        self.text_helpers = text_helpers
        self.html_env = build_environment(html_helpers, directory)
        self.text_env = Environment(loader=FileSystemLoader(directory), autoescape=False)
        self.text_env.globals.update(text_helpers)
        self._subjects: dict[str, Template] = {}
        self._bodies: dict[str, Template] = {}
        self._sources: dict[str, tuple[str, str]] = {}
        self._load()

    def _load(self) -> None:
        for name in self.html_env.list_templates():
            if not name.startswith(MAIL_PREFIX):
                continue
            key = name.removeprefix(MAIL_PREFIX).removesuffix(".html")
            source, _, _ = self.html_env.loader.get_source(self.html_env, name)
            subject, body = split_subject_body(source)
            self._sources[key] = (subject, body)
            try:
                self._subjects[key] = self.text_env.from_string(subject)
            except TemplateSyntaxError as e:
                self._parse_failed(name, "subject", e)
            try:
                self._bodies[key] = self.html_env.from_string(body)
            except TemplateSyntaxError as e:
                self._parse_failed(name, "body", e)

    @staticmethod
    def _parse_failed(name: str, part: str, error: TemplateSyntaxError) -> None:
        log_with_context(
            logger,
            "warning",
            "Failed to parse mail template",
            template=name,
            part=part,
            error=str(error),
            line=error.lineno,
            event_type="mail_template_parse_error",
        )

    @property
    def names(self) -> list[str]:
        """Names of the mail templates whose subject and body both parsed."""
        return sorted(set(self._subjects) & set(self._bodies))

    def validate(self) -> dict[str, list[str]]:
        """Helpers referenced by each mail template that its registry lacks."""
        problems: dict[str, list[str]] = {}
        for key in self.names:
            subject, body = self._sources[key]
            missing = missing_helpers(self.text_env.parse(subject), self.text_helpers, self.text_env)
            missing |= missing_helpers(self.html_env.parse(body), self.html_helpers, self.html_env)
            if missing:
                problems[key] = sorted(missing)
        return problems

    def render(self, name: str, context: dict[str, Any]) -> tuple[str, str]:
        """Render mail ``name`` (e.g. ``repo/transfer_notify``).

        Returns:
            Subject on one line and the HTML body

        Raises:
            MailTemplateNotFoundException: If the template is unknown or failed to parse
        """
        if name not in self._subjects or name not in self._bodies:
            raise MailTemplateNotFoundException(name)
        subject = " ".join(self._subjects[name].render(context).split())
        body = self._bodies[name].render(context).strip()
        return subject, body
