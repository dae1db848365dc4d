# Shared data models
from app.models.commit import Commit, Identity, PRComment
from app.models.cla_config import (
    BotConfig,
    Configuration,
    LitePRCommitter,
    RepoFilter,
    load_configuration,
)
from app.models.events import (
    PullRequestEvent,
    IssueCommentEvent,
    WebhookEvent,
    parse_event,
)

__all__ = [
    "Commit",
    "Identity",
    "PRComment",
    "BotConfig",
    "Configuration",
    "LitePRCommitter",
    "RepoFilter",
    "load_configuration",
    "PullRequestEvent",
    "IssueCommentEvent",
    "WebhookEvent",
    "parse_event",
]
