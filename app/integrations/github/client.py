"""
GitHub API Client

Responsibilities:
- Pull request commit listing
- Label add/remove
- Comment create/list/delete

Pull request labels and comments live on the issue that backs the pull
request, so those calls go through the Issues API.
"""

import logging
from typing import List, Optional

import requests
from github import Github
from github.GithubException import GithubException
from github.Issue import Issue
from github.Repository import Repository

from app.cla.errors import CommitListingError, MutationError
from app.config import get_settings
from app.models.commit import Commit, Identity, PRComment

logger = logging.getLogger(__name__)

# PyGithub lets connection failures through as requests exceptions
API_ERRORS = (GithubException, requests.RequestException)


def _identity(git_actor) -> Optional[Identity]:
    if git_actor is None:
        return None
    return Identity(email=git_actor.email or "", name=git_actor.name or "")


class GitHubClient:
    """GitHub API client wrapper scoped by org, repo and PR number."""

    def __init__(self, client: Optional[Github] = None):
        if client is None:
            settings = get_settings()
            client = Github(settings.github_token, base_url=settings.github_api_url)
        self.client = client
        logger.info("GitHub client initialized")

    def _repo(self, org: str, repo: str) -> Repository:
        return self.client.get_repo(f"{org}/{repo}", lazy=True)

    def _issue(self, org: str, repo: str, number: int) -> Issue:
        return self._repo(org, repo).get_issue(number)

    def list_commits(self, org: str, repo: str, number: int) -> List[Commit]:
        """
        List the commits of a pull request.

        Raises:
            CommitListingError: If the commits cannot be fetched
        """
        try:
            pull = self._repo(org, repo).get_pull(number)
            commits = [
                Commit(
                    sha=c.sha,
                    message=c.commit.message or "",
                    author=_identity(c.commit.author),
                    committer=_identity(c.commit.committer),
                )
                for c in pull.get_commits()
            ]
        except API_ERRORS as e:
            logger.error(f"Failed to list commits of {org}/{repo}#{number}: {e}")
            raise CommitListingError(
                f"Failed to list commits of {org}/{repo}#{number}: {e}"
            ) from e

        logger.info(f"Found {len(commits)} commit(s) on {org}/{repo}#{number}")
        return commits

    def list_comments(self, org: str, repo: str, number: int) -> List[PRComment]:
        """List the conversation comments of a pull request."""
        return [
            PRComment(
                id=c.id,
                body=c.body or "",
                user_login=c.user.login if c.user else None,
            )
            for c in self._issue(org, repo, number).get_comments()
        ]

    def add_label(self, org: str, repo: str, number: int, label: str) -> None:
        try:
            self._issue(org, repo, number).add_to_labels(label)
            logger.info(f"Added label {label} to {org}/{repo}#{number}")
        except API_ERRORS as e:
            raise MutationError(f"Could not add {label} label: {e}") from e

    def remove_label(self, org: str, repo: str, number: int, label: str) -> None:
        try:
            self._issue(org, repo, number).remove_from_labels(label)
            logger.info(f"Removed label {label} from {org}/{repo}#{number}")
        except API_ERRORS as e:
            raise MutationError(f"Could not remove {label} label: {e}") from e

    def create_comment(self, org: str, repo: str, number: int, body: str) -> None:
        try:
            self._issue(org, repo, number).create_comment(body)
            logger.info(f"Created comment on {org}/{repo}#{number}")
        except API_ERRORS as e:
            raise MutationError(f"Could not create comment: {e}") from e

    def delete_comment(self, org: str, repo: str, number: int, comment_id: int) -> None:
        try:
            self._issue(org, repo, number).get_comment(comment_id).delete()
            logger.info(f"Deleted comment {comment_id} on {org}/{repo}#{number}")
        except API_ERRORS as e:
            raise MutationError(f"Could not delete comment {comment_id}: {e}") from e
