"""Page view models.

A view model is the read-only snapshot a controller assembles for one page.
Every conditional block of the settings template is decided here, through
the ``SECTION_RULES`` table, so the template itself only projects fields.
"""

from collections.abc import Callable
from enum import Enum
from types import MappingProxyType, SimpleNamespace

from pydantic import BaseModel, ConfigDict

from forge_ui.models.organization import OrganizationSnapshot, Visibility
from forge_ui.models.repository import RepositorySnapshot, TrustModel, UnitMode


class SettingsSection(str, Enum):
    """Conditional blocks of the repository settings page."""

    MIRROR = "mirror"
    VISIBILITY_EDITABLE = "visibility_editable"
    WIKI_EXTERNAL_URL = "wiki_external_url"
    ISSUES_INTERNAL_OPTIONS = "issues_internal_options"
    ISSUES_EXTERNAL_FIELDS = "issues_external_fields"
    PULL_REQUEST_UNIT = "pull_request_unit"
    PULL_REQUEST_OPTIONS = "pull_request_options"
    ADMIN = "admin"
    DANGER_ZONE = "danger_zone"
    CONVERT_MIRROR = "convert_mirror"
    TRANSFER = "transfer"
    CANCEL_TRANSFER = "cancel_transfer"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    WIKI_DELETE = "wiki_delete"
    DELETE = "delete"


class RepoSettingsView(BaseModel):
    """Repository settings page for one viewer.

    ``is_owner`` grants the danger-zone actions; ``is_admin`` is the site
    administrator capability.
    """

    model_config = ConfigDict(frozen=True)

    repo: RepositorySnapshot
    viewer_name: str
    is_owner: bool = False
    is_admin: bool = False
    force_private: bool = False

    def visible_sections(self) -> frozenset[SettingsSection]:
        return frozenset(section for section, rule in SECTION_RULES.items() if rule(self))

    @property
    def sections(self) -> SimpleNamespace:
        """Attribute access for templates: ``sections.mirror``."""
        visible = self.visible_sections()
        return SimpleNamespace(**{section.value: section in visible for section in SettingsSection})

    @property
    def trust_model_options(self) -> list[tuple[TrustModel, bool]]:
        return [(model, model == self.repo.trust_model) for model in TrustModel]


def _owner(view: RepoSettingsView) -> bool:
    return view.is_owner


SECTION_RULES: MappingProxyType[SettingsSection, Callable[[RepoSettingsView], bool]] = MappingProxyType(
    {
        SettingsSection.MIRROR: lambda v: v.repo.is_mirror,
        SettingsSection.VISIBILITY_EDITABLE: lambda v: v.is_admin or not v.force_private,
        SettingsSection.WIKI_EXTERNAL_URL: lambda v: v.repo.units.wiki == UnitMode.EXTERNAL,
        SettingsSection.ISSUES_INTERNAL_OPTIONS: lambda v: v.repo.units.issues == UnitMode.INTERNAL,
        SettingsSection.ISSUES_EXTERNAL_FIELDS: lambda v: v.repo.units.issues == UnitMode.EXTERNAL,
        SettingsSection.PULL_REQUEST_UNIT: lambda v: not v.repo.is_mirror,
        SettingsSection.PULL_REQUEST_OPTIONS: lambda v: v.repo.units.pulls and not v.repo.is_mirror,
        SettingsSection.ADMIN: lambda v: v.is_admin,
        SettingsSection.DANGER_ZONE: _owner,
        SettingsSection.CONVERT_MIRROR: lambda v: _owner(v) and v.repo.is_mirror,
        SettingsSection.TRANSFER: lambda v: _owner(v) and v.repo.pending_transfer_to is None,
        SettingsSection.CANCEL_TRANSFER: lambda v: _owner(v) and v.repo.pending_transfer_to is not None,
        SettingsSection.ARCHIVE: lambda v: _owner(v) and not v.repo.is_archived,
        SettingsSection.UNARCHIVE: lambda v: _owner(v) and v.repo.is_archived,
        SettingsSection.WIKI_DELETE: lambda v: _owner(v) and v.repo.units.wiki == UnitMode.INTERNAL,
        SettingsSection.DELETE: _owner,
    }
)


class OrgHeaderView(BaseModel):
    """Organization page header."""

    model_config = ConfigDict(frozen=True)

    org: OrganizationSnapshot
    avatar_link: str
    is_owner: bool = False
    is_member: bool = False

    @property
    def visibility_badge(self) -> str | None:
        """Translation key of the visibility label, None for public organizations."""
        if self.org.visibility == Visibility.PUBLIC:
            return None
        return f"org.settings.visibility.{self.org.visibility.value}_shortname"

    @property
    def show_settings_link(self) -> bool:
        return self.is_owner

    @property
    def show_members_link(self) -> bool:
        """Members are listed for public organizations and to members."""
        return self.is_member or self.org.visibility == Visibility.PUBLIC
