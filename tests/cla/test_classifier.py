"""
Tests for commit identity resolution.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.cla.classifier import resolve_identity
from app.models.cla_config import LitePRCommitter
from app.models.commit import Commit, Identity

LITE = LitePRCommitter(email="noreply@example.com", name="merge-bot")


def make_commit(author=None, committer=None):
    return Commit(sha="abcdef1234", message="msg", author=author, committer=committer)


def test_author_email_by_default():
    commit = make_commit(
        author=Identity(email="author@example.com", name="Author"),
        committer=Identity(email="committer@example.com", name="Committer"),
    )
    assert resolve_identity(commit, False, LITE.is_lite_pr) == "author@example.com"


def test_committer_email_when_checking_by_committer():
    commit = make_commit(
        author=Identity(email="author@example.com", name="Author"),
        committer=Identity(email="committer@example.com", name="Committer"),
    )
    assert resolve_identity(commit, True, LITE.is_lite_pr) == "committer@example.com"


def test_lite_pr_committer_email_falls_back_to_author():
    commit = make_commit(
        author=Identity(email="author@example.com", name="Author"),
        committer=Identity(email="noreply@example.com", name="Someone"),
    )
    assert resolve_identity(commit, True, LITE.is_lite_pr) == "author@example.com"


def test_lite_pr_committer_name_alone_falls_back_to_author():
    commit = make_commit(
        author=Identity(email="author@example.com", name="Author"),
        committer=Identity(email="other@example.com", name="merge-bot"),
    )
    assert resolve_identity(commit, True, LITE.is_lite_pr) == "author@example.com"


def test_missing_committer_falls_back_to_author():
    commit = make_commit(author=Identity(email="author@example.com", name="Author"))
    assert resolve_identity(commit, True, LITE.is_lite_pr) == "author@example.com"


def test_missing_author_gives_empty_email():
    commit = make_commit(committer=Identity(email="noreply@example.com", name="merge-bot"))
    assert resolve_identity(commit, True, LITE.is_lite_pr) == ""
    assert resolve_identity(make_commit(), False, LITE.is_lite_pr) == ""


def test_email_is_stripped():
    commit = make_commit(author=Identity(email="  author@example.com \t", name="Author"))
    assert resolve_identity(commit, False, LITE.is_lite_pr) == "author@example.com"
