"""Protocol definitions for the collaborators this layer consumes.

The data layer, translation service and markup engine are owned elsewhere;
these protocols describe the calls the presentation layer makes into them so
implementations can be swapped and mocked.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from forge_ui.models.organization import OrganizationSnapshot
    from forge_ui.models.repository import RepositorySnapshot


class Translator(Protocol):
    """Translation lookup for one language."""

    lang: str

    def tr(self, key: str, *args: Any) -> str:
        """Translate ``key`` and substitute printf-style ``args``."""
        ...


class MarkupRenderer(Protocol):
    """Markup engine used for commit messages, notes and emoji.

    Input is already HTML-escaped. Implementations raise
    ``MarkupRenderException`` on failure.
    """

    def render_commit_message(
        self, text: str, url_prefix: str, url_default: str, metas: Mapping[str, str] | None
    ) -> str:
        """Render a full commit message, linking references."""
        ...

    def render_commit_message_subject(
        self, text: str, url_prefix: str, url_default: str, metas: Mapping[str, str] | None
    ) -> str:
        """Render a commit subject line; email addresses are not linked."""
        ...

    def render_emoji(self, text: str) -> str:
        """Replace emoji shortcodes and wrap emoji characters."""
        ...


class TreeEntry(Protocol):
    """Entry of a git tree listing."""

    def is_link(self) -> bool: ...

    def is_dir(self) -> bool: ...

    def is_submodule(self) -> bool: ...


class RepositorySource(Protocol):
    """Read-only access to repository and organization snapshots."""

    async def get_repository(self, owner: str, name: str) -> "RepositorySnapshot | None":
        """Return the repository snapshot or None when it does not exist."""
        ...

    async def get_organization(self, name: str) -> "OrganizationSnapshot | None":
        """Return the organization snapshot or None when it does not exist."""
        ...
