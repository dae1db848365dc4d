"""
Comment Templates

Bodies of the comments the bot posts on pull requests.
"""

from typing import List

from app.models.commit import Commit
from app.utils.helpers import short_sha

SIGN_GUIDE_TITLE = (
    "Thanks for your pull request.\n\n"
    "The authors of the following commits have not signed the "
    "Contributor License Agreement (CLA):"
)

# Title used by earlier versions of the bot; still purged on every pass
LEGACY_SIGN_GUIDE_TITLE = (
    "Thanks for your pull request. Before we can look at your pull request, "
    "you'll need to sign a Contributor License Agreement (CLA)."
)

SIGN_GUIDE_TEMPLATE = """{title}

{commits}

Please check the [**FAQs**]({faq_url}) first.
You can click [**here**]({sign_url}) to sign the CLA. After signing the CLA, you must comment "/check-cla" to check the CLA status again."""

ALREADY_SIGNED_TEMPLATE = (
    "***@{user}***, thanks for your pull request. "
    "All authors of the commits have signed the CLA. :wave: "
)


def is_sign_guide(body: str) -> bool:
    return body.startswith(SIGN_GUIDE_TITLE) or body.startswith(LEGACY_SIGN_GUIDE_TITLE)


def unsigned_commits_list(commits: List[Commit]) -> str:
    """One `**<sha>** | <message>` line per commit."""
    return "\n".join(f"**{short_sha(c.sha)}** | {c.message}" for c in commits)


def sign_guide(sign_url: str, commits: List[Commit], faq_url: str) -> str:
    return SIGN_GUIDE_TEMPLATE.format(
        title=SIGN_GUIDE_TITLE,
        commits=unsigned_commits_list(commits),
        faq_url=faq_url,
        sign_url=sign_url,
    )


def already_signed(user: str) -> str:
    return ALREADY_SIGNED_TEMPLATE.format(user=user)
