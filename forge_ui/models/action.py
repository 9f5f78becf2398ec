"""Activity feed action records consumed by the dashboard templates."""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, Field


class ActionType(IntEnum):
    """Kind of a user activity feed entry."""

    CREATE_REPO = 1
    RENAME_REPO = 2
    STAR_REPO = 3
    WATCH_REPO = 4
    COMMIT_REPO = 5
    CREATE_ISSUE = 6
    CREATE_PULL_REQUEST = 7
    TRANSFER_REPO = 8
    PUSH_TAG = 9
    COMMENT_ISSUE = 10
    MERGE_PULL_REQUEST = 11
    CLOSE_ISSUE = 12
    REOPEN_ISSUE = 13
    CLOSE_PULL_REQUEST = 14
    REOPEN_PULL_REQUEST = 15
    DELETE_TAG = 16
    DELETE_BRANCH = 17
    MIRROR_SYNC_PUSH = 18
    MIRROR_SYNC_CREATE = 19
    MIRROR_SYNC_DELETE = 20
    APPROVE_PULL_REQUEST = 21
    REJECT_PULL_REQUEST = 22
    COMMENT_PULL = 23
    PUBLISH_RELEASE = 24


class PushCommit(BaseModel):
    """One commit summarised in a push action."""

    sha1: str = Field(alias="Sha1")
    message: str = Field(alias="Message")
    author_email: str = Field(default="", alias="AuthorEmail")
    author_name: str = Field(default="", alias="AuthorName")
    committer_email: str = Field(default="", alias="CommitterEmail")
    committer_name: str = Field(default="", alias="CommitterName")
    timestamp: datetime | None = Field(default=None, alias="Timestamp")

    model_config = {"populate_by_name": True}


class PushCommits(BaseModel):
    """Commits carried by a push action, newest first."""

    length: int = Field(default=0, alias="Len")
    commits: list[PushCommit] = Field(default_factory=list, alias="Commits")
    head_commit: PushCommit | None = Field(default=None, alias="HeadCommit")
    compare_url: str = Field(default="", alias="CompareURL")

    model_config = {"populate_by_name": True}


class Action(BaseModel):
    """Activity feed entry as supplied by the data layer."""

    op_type: ActionType
    act_user_name: str
    repo_user_name: str
    repo_name: str
    ref_name: str = ""
    content: str = ""
    created: datetime

    @property
    def repo_path(self) -> str:
        return f"{self.repo_user_name}/{self.repo_name}"

    @property
    def issue_infos(self) -> list[str]:
        """``content`` of issue actions is ``<index>|<title>``."""
        return self.content.split("|", 1)
