"""
Tests for the webhook event filter.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from app.cla.event_filter import is_check_cla_command, select_trigger
from app.models.events import IssueCommentEvent, PullRequestEvent, parse_event

REPOSITORY = {"name": "community", "owner": {"login": "my-org"}}


def pr_event(action="opened", state="open", labels=()):
    return PullRequestEvent.model_validate(
        {
            "action": action,
            "pull_request": {
                "number": 7,
                "state": state,
                "user": {"login": "alice"},
                "labels": [{"name": name} for name in labels],
            },
            "repository": REPOSITORY,
        }
    )


def comment_event(body="/check-cla", action="created", state="open", is_pr=True):
    issue = {
        "number": 9,
        "state": state,
        "user": {"login": "bob"},
        "labels": [{"name": "cla/no"}],
    }
    if is_pr:
        issue["pull_request"] = {"url": "https://api.github.com/repos/my-org/community/pulls/9"}
    return IssueCommentEvent.model_validate(
        {
            "action": action,
            "issue": issue,
            "comment": {"id": 100, "body": body},
            "repository": REPOSITORY,
        }
    )


class TestCheckCLACommand:
    """Test suite for "/check-cla" detection."""

    @pytest.mark.parametrize(
        "body",
        [
            "/check-cla",
            "/CHECK-CLA",
            "  /check-cla  ",
            "I signed it\n/check-cla\nthanks",
            "/Check-Cla\r\n",
        ],
    )
    def test_matches(self, body):
        assert is_check_cla_command(body)

    @pytest.mark.parametrize(
        "body",
        ["", None, "/check-cla please", "please /check-cla", "/check-clas", "check-cla"],
    )
    def test_does_not_match(self, body):
        assert not is_check_cla_command(body)


class TestPullRequestEvents:
    def test_opened_pr_triggers_implicit_check(self):
        trigger = select_trigger(pr_event(labels=["cla/yes", "bug"]))

        assert trigger is not None
        assert trigger.org == "my-org"
        assert trigger.repo == "community"
        assert trigger.number == 7
        assert trigger.author == "alice"
        assert trigger.labels == frozenset({"cla/yes", "bug"})
        assert trigger.explicitly_triggered is False

    def test_synchronize_triggers_check(self):
        assert select_trigger(pr_event(action="synchronize")) is not None

    @pytest.mark.parametrize("action", ["closed", "edited", "labeled", "reopened"])
    def test_other_actions_ignored(self, action):
        assert select_trigger(pr_event(action=action)) is None

    def test_closed_pr_ignored(self):
        assert select_trigger(pr_event(state="closed")) is None


class TestCommentEvents:
    def test_check_cla_comment_triggers_explicit_check(self):
        trigger = select_trigger(comment_event())

        assert trigger is not None
        assert trigger.number == 9
        assert trigger.author == "bob"
        assert trigger.labels == frozenset({"cla/no"})
        assert trigger.explicitly_triggered is True

    def test_edited_comment_ignored(self):
        assert select_trigger(comment_event(action="edited")) is None

    def test_comment_on_closed_pr_ignored(self):
        assert select_trigger(comment_event(state="closed")) is None

    def test_comment_on_plain_issue_ignored(self):
        assert select_trigger(comment_event(is_pr=False)) is None

    def test_other_comment_ignored(self):
        assert select_trigger(comment_event(body="LGTM")) is None


def test_unparsed_event_ignored():
    assert select_trigger(None) is None
    assert select_trigger(parse_event("pull_request", {"action": "opened"})) is None
