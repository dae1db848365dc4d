"""
Pull Request Commit and Comment Models

Platform-agnostic views of what the hosting platform returns for a pull
request. Rebuilt from the API on every reconciliation pass.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class Identity(BaseModel):
    """Git identity attached to a commit (author or committer)."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    name: str = ""


class Commit(BaseModel):
    """A single commit on a pull request."""

    model_config = ConfigDict(frozen=True)

    sha: str
    message: str = ""
    author: Optional[Identity] = None
    committer: Optional[Identity] = None


class PRComment(BaseModel):
    """A comment on the pull request conversation."""

    id: int
    body: str = ""
    user_login: Optional[str] = None
