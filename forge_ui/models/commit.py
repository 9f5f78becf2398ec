"""Commit variants shown in commit lists."""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class CommitKind(str, Enum):
    """Which commit variant a list row holds; the value is the template name."""

    USER = "UserCommit"
    SIGNED = "SignCommit"
    SIGNED_WITH_STATUSES = "SignCommitWithStatuses"


class CommitStatus(BaseModel):
    """CI status attached to a commit."""

    state: str
    context: str = ""
    target_url: str = ""


class UserCommit(BaseModel):
    """Commit with its author resolved to a site user when possible."""

    kind: ClassVar[CommitKind] = CommitKind.USER

    sha: str
    message: str
    author_name: str
    author_email: str = ""
    user_name: str | None = None


class SignCommit(UserCommit):
    """User commit with signature verification."""

    kind: ClassVar[CommitKind] = CommitKind.SIGNED

    verified: bool = False
    verification_reason: str = ""
    signing_key_id: str = ""


class SignCommitWithStatuses(SignCommit):
    """Signed commit with CI statuses."""

    kind: ClassVar[CommitKind] = CommitKind.SIGNED_WITH_STATUSES

    statuses: list[CommitStatus] = Field(default_factory=list)
