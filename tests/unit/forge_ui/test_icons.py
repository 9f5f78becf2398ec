"""Unit tests for icon lookups."""

from dataclasses import dataclass

import pytest

from forge_ui.helpers.icons import (
    ACTION_ICONS,
    DEFAULT_ACTION_ICON,
    action_icon,
    commit_type,
    entry_icon,
    migration_icon,
    sort_arrow,
    svg,
)
from forge_ui.models.action import ActionType
from forge_ui.models.commit import SignCommit, SignCommitWithStatuses, UserCommit
from forge_ui.svg import SVGS


def test_action_icons_cover_every_action_type():
    """Test the icon table is total over ActionType."""
    assert set(ACTION_ICONS) == set(ActionType)


@pytest.mark.parametrize(
    "op_type,expected",
    [
        (ActionType.CREATE_REPO, "repo"),
        (5, "git-commit"),
        (ActionType.MERGE_PULL_REQUEST, "git-merge"),
        (ActionType.PUBLISH_RELEASE, "tag"),
        (ActionType.STAR_REPO, DEFAULT_ACTION_ICON),
        (999, DEFAULT_ACTION_ICON),
        ("nonsense", DEFAULT_ACTION_ICON),
        (None, DEFAULT_ACTION_ICON),
    ],
)
def test_action_icon(op_type, expected):
    assert action_icon(op_type) == expected


def test_every_action_icon_has_an_svg():
    for icon in set(ACTION_ICONS.values()):
        assert f"octicon-{icon}" in SVGS


def test_migration_icon():
    assert migration_icon("github.com") == "fa-github"
    assert migration_icon("gitlab.com") == "fa-git-alt"
    assert migration_icon("") == "fa-git-alt"


@dataclass
class FakeEntry:
    link: bool = False
    directory: bool = False
    submodule: bool = False

    def is_link(self):
        return self.link

    def is_dir(self):
        return self.directory

    def is_submodule(self):
        return self.submodule


@pytest.mark.parametrize(
    "entry,expected",
    [
        (FakeEntry(link=True), "file-symlink-file"),
        (FakeEntry(directory=True), "file-directory-fill"),
        (FakeEntry(submodule=True), "file-submodule"),
        (FakeEntry(), "file"),
    ],
)
def test_entry_icon(entry, expected):
    assert entry_icon(entry) == expected


def test_svg_default_size():
    html = svg("octicon-repo")
    assert 'width="16"' in html
    assert 'height="16"' in html
    assert 'class="svg octicon-repo"' in html


def test_svg_resized_with_class():
    html = svg("octicon-repo", 24, "mr-2 text")
    assert 'width="24"' in html
    assert 'height="24"' in html
    assert 'class="mr-2 text svg octicon-repo"' in html


def test_svg_class_is_escaped():
    html = svg("octicon-repo", 16, '"><script>')
    assert "<script>" not in html


def test_svg_unknown_icon():
    assert svg("octicon-does-not-exist") == ""


def test_sort_arrow():
    down, up = svg("octicon-triangle-down"), svg("octicon-triangle-up")
    assert sort_arrow("name", "revname", "name", False) == down
    assert sort_arrow("name", "revname", "revname", False) == up
    assert sort_arrow("name", "revname", "size", True) == ""
    assert sort_arrow("name", "revname", "", True) == ""
    assert sort_arrow("name", "revname", "", False) == ""
    assert sort_arrow("", "", "name", True) == ""


def test_commit_type():
    base = {"sha": "abc", "message": "m", "author_name": "a"}
    assert commit_type(UserCommit(**base)) == "UserCommit"
    assert commit_type(SignCommit(**base)) == "SignCommit"
    assert commit_type(SignCommitWithStatuses(**base)) == "SignCommitWithStatuses"
    assert commit_type(object()) == ""
    assert commit_type(None) == ""
