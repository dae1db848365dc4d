"""
GitHub Webhook Event Models

Only the fields the CLA check reads are modeled; everything else in the
payload is ignored.
"""

import logging
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class User(_Payload):
    login: str = ""


class Label(_Payload):
    name: str


class Owner(_Payload):
    login: str


class Repository(_Payload):
    name: str
    owner: Owner

    @property
    def org(self) -> str:
        return self.owner.login


class PullRequest(_Payload):
    number: int
    state: str
    user: User = User()
    labels: List[Label] = []


class Issue(_Payload):
    number: int
    state: str
    user: User = User()
    labels: List[Label] = []
    # Present only when the issue is a pull request
    pull_request: Optional[dict] = None


class Comment(_Payload):
    id: int
    body: str = ""


class PullRequestEvent(_Payload):
    """`pull_request` delivery."""

    action: str
    pull_request: PullRequest
    repository: Repository


class IssueCommentEvent(_Payload):
    """`issue_comment` delivery. Pull request comments arrive as issue comments."""

    action: str
    issue: Issue
    comment: Comment
    repository: Repository


WebhookEvent = Union[PullRequestEvent, IssueCommentEvent]

EVENT_MODELS = {
    "pull_request": PullRequestEvent,
    "issue_comment": IssueCommentEvent,
}


def parse_event(event_name: str, payload: dict) -> Optional[WebhookEvent]:
    """
    Build a typed event from a webhook delivery.

    Returns None for event kinds the bot does not handle and for payloads
    that do not have the expected shape.
    """
    model = EVENT_MODELS.get(event_name)
    if model is None:
        logger.debug(f"Ignoring unsupported event: {event_name}")
        return None

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Malformed {event_name} payload, ignoring: {e}")
        return None
