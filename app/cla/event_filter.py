"""
Event Filter

Turns webhook events into CLA check triggers. Only two kinds of events start
a check:

- a pull request was opened or its source branch changed
- someone commented "/check-cla" on an open pull request
"""

import logging
import re
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from app.models.events import IssueCommentEvent, PullRequestEvent, WebhookEvent

logger = logging.getLogger(__name__)

CHECK_CLA_RE = re.compile(r"^\s*/check-cla\s*$", re.IGNORECASE | re.MULTILINE)

PR_STATE_OPEN = "open"
PR_ACTION_OPENED = "opened"
PR_ACTION_SOURCE_BRANCH_CHANGED = "synchronize"
COMMENT_ACTION_CREATED = "created"


@dataclass(frozen=True)
class CheckTrigger:
    """A pull request that needs its CLA state reconciled."""

    org: str
    repo: str
    number: int
    author: str
    labels: FrozenSet[str] = field(default_factory=frozenset)
    # True when a "/check-cla" comment asked for the check
    explicitly_triggered: bool = False


def is_check_cla_command(body: Optional[str]) -> bool:
    return bool(body) and CHECK_CLA_RE.search(body) is not None


def trigger_from_pull_request(event: PullRequestEvent) -> Optional[CheckTrigger]:
    pr = event.pull_request
    if pr.state != PR_STATE_OPEN:
        return None

    if event.action not in (PR_ACTION_OPENED, PR_ACTION_SOURCE_BRANCH_CHANGED):
        return None

    return CheckTrigger(
        org=event.repository.org,
        repo=event.repository.name,
        number=pr.number,
        author=pr.user.login,
        labels=frozenset(label.name for label in pr.labels),
        explicitly_triggered=False,
    )


def trigger_from_comment(event: IssueCommentEvent) -> Optional[CheckTrigger]:
    issue = event.issue
    if event.action != COMMENT_ACTION_CREATED or issue.pull_request is None:
        return None

    if issue.state != PR_STATE_OPEN:
        return None

    if not is_check_cla_command(event.comment.body):
        return None

    return CheckTrigger(
        org=event.repository.org,
        repo=event.repository.name,
        number=issue.number,
        author=issue.user.login,
        labels=frozenset(label.name for label in issue.labels),
        explicitly_triggered=True,
    )


def select_trigger(event: Optional[WebhookEvent]) -> Optional[CheckTrigger]:
    """
    Decide whether an event should start a CLA check.

    Args:
        event: Parsed webhook event, or None if the delivery was not parseable

    Returns:
        CheckTrigger for qualifying events, None for everything else
    """
    if isinstance(event, PullRequestEvent):
        trigger = trigger_from_pull_request(event)
    elif isinstance(event, IssueCommentEvent):
        trigger = trigger_from_comment(event)
    else:
        trigger = None

    if trigger is None:
        logger.debug("Event does not trigger a CLA check")
    return trigger
