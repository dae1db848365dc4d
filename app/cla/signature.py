"""
Signature Resolver

Decides which commits of a pull request are not covered by a signed CLA.
"""

import logging
from typing import Callable, Dict, List

from app.cla.classifier import resolve_identity
from app.cla.errors import NoCommitsError
from app.models.cla_config import BotConfig
from app.models.commit import Commit
from app.utils.helpers import is_valid_email

logger = logging.getLogger(__name__)

SignatureQuery = Callable[[str], bool]


def resolve_unsigned(
    commits: List[Commit],
    cfg: BotConfig,
    query: SignatureQuery,
) -> List[Commit]:
    """
    Find the commits whose authors have not signed the CLA.

    Each distinct email is sent to the signing service at most once per call;
    the verdicts are dropped when the call returns. Commits without a valid
    email are unsigned and never queried.

    Args:
        commits: Pull request commits in listing order
        cfg: Bot configuration for the repository
        query: Returns True if the email has signed; raises SignatureQueryError

    Returns:
        Unsigned commits, in listing order

    Raises:
        NoCommitsError: If there are no commits
        SignatureQueryError: If any signing-status query fails
    """
    if not commits:
        raise NoCommitsError()

    verdicts: Dict[str, bool] = {}
    unsigned: List[Commit] = []

    for commit in commits:
        email = resolve_identity(
            commit, cfg.check_by_committer, cfg.lite_pr_committer.is_lite_pr
        )
        if not is_valid_email(email):
            logger.debug(f"Commit {commit.sha} has no valid email: {email!r}")
            unsigned.append(commit)
            continue

        signed = verdicts.get(email)
        if signed is None:
            signed = query(email)
            verdicts[email] = signed

        if not signed:
            unsigned.append(commit)

    logger.info(
        f"Checked {len(commits)} commit(s), {len(verdicts)} distinct email(s): "
        f"{len(unsigned)} unsigned"
    )
    return unsigned
