"""
GitHub Integration Module

Provides GitHub API integration for pull request CLA checks.
"""

from app.integrations.github.client import GitHubClient

__all__ = [
    "GitHubClient",
]
