"""Forge UI models"""

from forge_ui.models.action import Action, ActionType, PushCommit, PushCommits
from forge_ui.models.base_models import HealthResponse
from forge_ui.models.commit import CommitKind, SignCommit, SignCommitWithStatuses, UserCommit
from forge_ui.models.organization import OrganizationSnapshot, Visibility
from forge_ui.models.repository import (
    MirrorConfig,
    PullRequestPolicy,
    RepositorySnapshot,
    RepoUnits,
    TrustModel,
    UnitMode,
)
from forge_ui.models.views import SECTION_RULES, OrgHeaderView, RepoSettingsView, SettingsSection

__all__ = [
    "Action",
    "ActionType",
    "PushCommit",
    "PushCommits",
    "HealthResponse",
    "CommitKind",
    "SignCommit",
    "SignCommitWithStatuses",
    "UserCommit",
    "OrganizationSnapshot",
    "Visibility",
    "MirrorConfig",
    "PullRequestPolicy",
    "RepositorySnapshot",
    "RepoUnits",
    "TrustModel",
    "UnitMode",
    "SECTION_RULES",
    "OrgHeaderView",
    "RepoSettingsView",
    "SettingsSection",
]
