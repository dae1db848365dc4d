"""
Commit Classifier

Picks the email whose CLA status decides whether a commit is signed.
"""

from typing import Callable

from app.models.commit import Commit

LitePRCheck = Callable[[str, str], bool]


def resolve_identity(
    commit: Commit,
    check_by_committer: bool,
    is_lite_pr: LitePRCheck,
) -> str:
    """
    Resolve the email to check for a commit.

    When checking by committer, a lite PR committer (an automated account
    that merged someone else's work) does not count, and the author is used
    instead.

    Args:
        commit: Commit to classify
        check_by_committer: Use the committer email rather than the author's
        is_lite_pr: Predicate over (committer_email, committer_name)

    Returns:
        Stripped email, or "" if the commit carries no usable identity
    """
    if check_by_committer:
        committer = commit.committer
        if committer is not None and not is_lite_pr(committer.email, committer.name):
            return committer.email.strip()

    if commit.author is None:
        return ""

    return commit.author.email.strip()
