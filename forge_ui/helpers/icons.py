"""Icon lookups: activity icons, migration sources, file entries and inline SVG."""

import re
from types import MappingProxyType
from typing import Any

from markupsafe import Markup, escape

from forge_ui.models.action import ActionType
from forge_ui.models.commit import CommitKind
from forge_ui.protocols import TreeEntry
from forge_ui.svg import SVGS

DEFAULT_ACTION_ICON = "question"
DEFAULT_MIGRATION_ICON = "fa-git-alt"
DEFAULT_SVG_SIZE = 16

ACTION_ICONS: MappingProxyType[ActionType, str] = MappingProxyType(
    {
        ActionType.CREATE_REPO: "repo",
        ActionType.RENAME_REPO: DEFAULT_ACTION_ICON,
        ActionType.STAR_REPO: DEFAULT_ACTION_ICON,
        ActionType.WATCH_REPO: DEFAULT_ACTION_ICON,
        ActionType.COMMIT_REPO: "git-commit",
        ActionType.CREATE_ISSUE: "issue-opened",
        ActionType.CREATE_PULL_REQUEST: "git-pull-request",
        ActionType.TRANSFER_REPO: "repo",
        ActionType.PUSH_TAG: "git-commit",
        ActionType.COMMENT_ISSUE: "comment-discussion",
        ActionType.MERGE_PULL_REQUEST: "git-merge",
        ActionType.CLOSE_ISSUE: "issue-closed",
        ActionType.REOPEN_ISSUE: "issue-reopened",
        ActionType.CLOSE_PULL_REQUEST: "issue-closed",
        ActionType.REOPEN_PULL_REQUEST: "issue-reopened",
        ActionType.DELETE_TAG: "git-commit",
        ActionType.DELETE_BRANCH: "git-commit",
        ActionType.MIRROR_SYNC_PUSH: "repo-clone",
        ActionType.MIRROR_SYNC_CREATE: "repo-clone",
        ActionType.MIRROR_SYNC_DELETE: "repo-clone",
        ActionType.APPROVE_PULL_REQUEST: "check",
        ActionType.REJECT_PULL_REQUEST: "diff",
        ActionType.COMMENT_PULL: "comment-discussion",
        ActionType.PUBLISH_RELEASE: "tag",
    }
)

MIGRATION_ICONS: MappingProxyType[str, str] = MappingProxyType({"github.com": "fa-github"})

_WIDTH_RE = re.compile(r'width="[0-9]+?"')
_HEIGHT_RE = re.compile(r'height="[0-9]+?"')


def action_icon(op_type: Any) -> str:
    """Octicon name for an activity kind; unknown kinds get ``question``."""
    try:
        return ACTION_ICONS[ActionType(op_type)]
    except (ValueError, TypeError):
        return DEFAULT_ACTION_ICON


def migration_icon(hostname: str) -> str:
    """Font Awesome icon of the service an issue or comment was migrated from."""
    return MIGRATION_ICONS.get(hostname, DEFAULT_MIGRATION_ICON)


def entry_icon(entry: TreeEntry) -> str:
    """Octicon name for a git tree entry."""
    if entry.is_link():
        return "file-symlink-file"
    if entry.is_dir():
        return "file-directory-fill"
    if entry.is_submodule():
        return "file-submodule"
    return "file"


def svg(icon: str, size: int = DEFAULT_SVG_SIZE, class_name: str = "") -> Markup:
    """Inline SVG for ``icon`` at ``size`` pixels with extra classes.

    Unknown icons render as empty markup.
    """
    svg_str = SVGS.get(icon)
    if svg_str is None:
        return Markup("")
    if size and size != DEFAULT_SVG_SIZE:
        svg_str = _WIDTH_RE.sub(f'width="{int(size)}"', svg_str)
        svg_str = _HEIGHT_RE.sub(f'height="{int(size)}"', svg_str)
    if class_name:
        svg_str = svg_str.replace('class="', f'class="{escape(class_name)} ', 1)
    return Markup(svg_str)


def sort_arrow(norm_sort: str, rev_sort: str, url_sort: str, is_default: bool) -> Markup:
    """Arrow for a sortable table header.

    Down when the table is sorted by this column, up when sorted in reverse,
    nothing otherwise. Without an explicit sort in the URL no arrow is shown,
    even for the default column.
    """
    if not norm_sort or not url_sort:
        return Markup("")
    if url_sort == norm_sort:
        return svg("octicon-triangle-down")
    if url_sort == rev_sort:
        return svg("octicon-triangle-up")
    return Markup("")


def commit_type(commit: Any) -> str:
    """Name of the commit variant held by a commit list row, ``""`` if unknown."""
    kind = getattr(type(commit), "kind", None)
    if isinstance(kind, CommitKind):
        return kind.value
    return ""
