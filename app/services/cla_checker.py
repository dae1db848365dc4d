"""
CLA Check Orchestrator

Full reconciliation pass for one webhook event:
Event -> Trigger -> Config -> Commits -> Unsigned set -> Mutations -> GitHub
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from app.cla.errors import MutationError
from app.cla.event_filter import CheckTrigger, select_trigger
from app.cla.reconciler import Mutation, MutationKind, reconcile
from app.cla.signature import resolve_unsigned
from app.config import get_cla_configuration
from app.integrations.github import GitHubClient
from app.integrations.github.client import API_ERRORS
from app.integrations.signing import SigningServiceClient
from app.models.cla_config import BotConfig, Configuration
from app.models.commit import PRComment
from app.models.events import WebhookEvent

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationResult:
    """Outcome of one reconciliation pass."""

    org: str
    repo: str
    number: int
    signed: bool
    unsigned_shas: List[str] = field(default_factory=list)
    mutations: List[Mutation] = field(default_factory=list)
    failed: List[Mutation] = field(default_factory=list)


class CLAChecker:
    """
    Drives pull request labels and comments from CLA signing status.

    Every pass starts from scratch: commits, comments and signing verdicts
    are fetched again and nothing is kept between passes.
    """

    def __init__(
        self,
        github_client: Optional[GitHubClient] = None,
        signing_client: Optional[SigningServiceClient] = None,
        configuration: Optional[Configuration] = None,
    ):
        self.github_client = github_client or GitHubClient()
        self.signing_client = signing_client or SigningServiceClient()
        self._configuration = configuration

    @property
    def configuration(self) -> Configuration:
        if self._configuration is None:
            self._configuration = get_cla_configuration()
        return self._configuration

    def handle_event(self, event: Optional[WebhookEvent]) -> Optional[ReconciliationResult]:
        """
        Run a pass if the event qualifies.

        Returns:
            ReconciliationResult, or None if the event was ignored

        Raises:
            ConfigurationError, CommitListingError, NoCommitsError,
            SignatureQueryError: Fatal errors; nothing was changed
        """
        trigger = select_trigger(event)
        if trigger is None:
            return None

        cfg = self.configuration.get_config(trigger.org, trigger.repo)
        return self.handle(trigger, cfg)

    def handle(self, trigger: CheckTrigger, cfg: BotConfig) -> ReconciliationResult:
        org, repo, number = trigger.org, trigger.repo, trigger.number
        logger.info(
            f"Checking CLA for {org}/{repo}#{number} "
            f"(explicitly triggered: {trigger.explicitly_triggered})"
        )

        commits = self.github_client.list_commits(org, repo, number)
        unsigned = resolve_unsigned(
            commits, cfg, self.signing_client.query_for(cfg.check_url)
        )

        mutations = reconcile(
            unsigned,
            trigger.labels,
            trigger.explicitly_triggered,
            cfg,
            trigger.author,
            self._existing_comments(org, repo, number),
        )
        failed = self._apply(org, repo, number, mutations)

        result = ReconciliationResult(
            org=org,
            repo=repo,
            number=number,
            signed=not unsigned,
            unsigned_shas=[c.sha for c in unsigned],
            mutations=mutations,
            failed=failed,
        )
        logger.info(
            f"CLA check done for {org}/{repo}#{number}: "
            f"{'signed' if result.signed else f'{len(unsigned)} unsigned commit(s)'}, "
            f"{len(mutations)} mutation(s), {len(failed)} failed"
        )
        return result

    def _existing_comments(self, org: str, repo: str, number: int) -> List[PRComment]:
        try:
            return self.github_client.list_comments(org, repo, number)
        except API_ERRORS as e:
            logger.warning(f"Could not list comments of {org}/{repo}#{number}: {e}")
            return []

    def _apply(
        self, org: str, repo: str, number: int, mutations: List[Mutation]
    ) -> List[Mutation]:
        """Apply mutations in order. Failures are logged and skipped."""
        failed = []
        for mutation in mutations:
            try:
                self._apply_one(org, repo, number, mutation)
            except MutationError as e:
                logger.warning(f"{mutation.describe()} failed on {org}/{repo}#{number}: {e}")
                failed.append(mutation)
        return failed

    def _apply_one(self, org: str, repo: str, number: int, mutation: Mutation) -> None:
        client = self.github_client
        if mutation.kind == MutationKind.DELETE_COMMENT:
            client.delete_comment(org, repo, number, mutation.comment_id)
        elif mutation.kind == MutationKind.REMOVE_LABEL:
            client.remove_label(org, repo, number, mutation.label)
        elif mutation.kind == MutationKind.ADD_LABEL:
            client.add_label(org, repo, number, mutation.label)
        elif mutation.kind == MutationKind.CREATE_COMMENT:
            client.create_comment(org, repo, number, mutation.body)
