"""Repository snapshots supplied by the data layer.

These are read-only value objects: the presentation layer projects their
fields into markup and never mutates them.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UnitMode(str, Enum):
    """How a repository unit (wiki, issue tracker) is provided."""

    INTERNAL = "internal"
    EXTERNAL = "external"
    DISABLED = "disabled"


class ExternalTrackerStyle(str, Enum):
    """Issue reference syntax of an external tracker."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class MergeStyle(str, Enum):
    MERGE = "merge"
    REBASE = "rebase"
    REBASE_MERGE = "rebase-merge"
    SQUASH = "squash"
    MANUALLY_MERGED = "manually-merged"


class TrustModel(str, Enum):
    """Which signatures the repository treats as trusted."""

    DEFAULT = "default"
    COLLABORATOR = "collaborator"
    COMMITTER = "committer"
    COLLABORATOR_COMMITTER = "collaboratorcommitter"


class MirrorConfig(BaseModel):
    """Pull mirror configuration."""

    model_config = ConfigDict(frozen=True)

    remote_address: str
    interval: str = "8h0m0s"
    enable_prune: bool = True
    updated_unix: int = 0
    next_update_unix: int = 0


class ExternalTracker(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ""
    format: str = ""
    style: ExternalTrackerStyle = ExternalTrackerStyle.NUMERIC


class RepoUnits(BaseModel):
    """Enablement of the optional repository units."""

    model_config = ConfigDict(frozen=True)

    wiki: UnitMode = UnitMode.INTERNAL
    external_wiki_url: str = ""
    issues: UnitMode = UnitMode.INTERNAL
    external_tracker: ExternalTracker = Field(default_factory=ExternalTracker)
    enable_timetracker: bool = True
    allow_only_contributors_to_track_time: bool = True
    enable_issue_dependencies: bool = True
    projects: bool = True
    pulls: bool = True


class PullRequestPolicy(BaseModel):
    """Merge strategies and defaults for pull requests."""

    model_config = ConfigDict(frozen=True)

    ignore_whitespace_conflicts: bool = False
    allow_merge: bool = True
    allow_rebase: bool = True
    allow_rebase_merge: bool = True
    allow_squash: bool = True
    allow_manual_merge: bool = False
    autodetect_manual_merge: bool = False
    default_merge_style: MergeStyle = MergeStyle.MERGE
    default_delete_branch_after_merge: bool = False

    @property
    def merge_styles(self) -> list[tuple[MergeStyle, bool]]:
        """Every merge style paired with whether it is allowed."""
        return [
            (MergeStyle.MERGE, self.allow_merge),
            (MergeStyle.REBASE, self.allow_rebase),
            (MergeStyle.REBASE_MERGE, self.allow_rebase_merge),
            (MergeStyle.SQUASH, self.allow_squash),
            (MergeStyle.MANUALLY_MERGED, self.allow_manual_merge),
        ]


class RepositorySnapshot(BaseModel):
    """Repository record as seen by the settings page."""

    model_config = ConfigDict(frozen=True)

    owner_name: str
    name: str
    description: str = ""
    website: str = ""
    is_private: bool = False
    is_template: bool = False
    is_mirror: bool = False
    is_archived: bool = False
    is_fork: bool = False
    default_branch: str = "main"
    size: int = 0
    mirror: MirrorConfig | None = None
    units: RepoUnits = Field(default_factory=RepoUnits)
    pull_policy: PullRequestPolicy = Field(default_factory=PullRequestPolicy)
    trust_model: TrustModel = TrustModel.DEFAULT
    pending_transfer_to: str | None = None
    original_url: str = ""
    created: datetime | None = None

    @model_validator(mode="after")
    def _mirror_needs_config(self) -> "RepositorySnapshot":
        if self.is_mirror and self.mirror is None:
            raise ValueError(f"mirror repository {self.owner_name}/{self.name} has no mirror config")
        return self

    @property
    def full_name(self) -> str:
        return f"{self.owner_name}/{self.name}"

    @property
    def link(self) -> str:
        return f"/{self.owner_name}/{self.name}"

    @property
    def metas(self) -> dict[str, str]:
        """Markup engine metadata for issue references in this repository."""
        metas = {"user": self.owner_name, "repo": self.name}
        if self.units.issues == UnitMode.EXTERNAL and self.units.external_tracker.format:
            metas["format"] = self.units.external_tracker.format
            metas["style"] = self.units.external_tracker.style.value
        return metas
