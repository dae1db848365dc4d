"""
Tests for reconciliation planning.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from app.cla.reconciler import Mutation, MutationKind, reconcile, stale_sign_guides
from app.cla.templates import LEGACY_SIGN_GUIDE_TITLE, SIGN_GUIDE_TITLE, sign_guide
from app.models.cla_config import BotConfig
from app.models.commit import Commit, PRComment

YES = "cla/yes"
NO = "cla/no"


@pytest.fixture
def cfg():
    return BotConfig(
        repos=["my-org"],
        cla_label_yes=YES,
        cla_label_no=NO,
        check_url="https://cla.example.com/check",
        sign_url="https://cla.example.com/sign",
        faq_url="https://cla.example.com/faq",
    )


UNSIGNED = [
    Commit(sha="1111111111abcdef", message="fix"),
    Commit(sha="22222222", message="docs"),
]

COMMENTS = [
    PRComment(id=1, body="LGTM"),
    PRComment(id=2, body=f"{SIGN_GUIDE_TITLE}\n\n**deadbeef** | old"),
    PRComment(id=3, body=f"{LEGACY_SIGN_GUIDE_TITLE}\nsign here"),
    PRComment(id=4, body=f"quoting: {SIGN_GUIDE_TITLE}"),
]


def kinds(mutations):
    return [m.kind for m in mutations]


def test_stale_sign_guides_include_legacy_title():
    assert stale_sign_guides(COMMENTS) == [2, 3]


def test_guide_comments_deleted_first_even_when_signed(cfg):
    mutations = reconcile([], {YES}, False, cfg, "alice", COMMENTS)

    assert mutations == [Mutation.delete_comment(2), Mutation.delete_comment(3)]


def test_signed_replaces_unsigned_label(cfg):
    mutations = reconcile([], {NO}, False, cfg, "alice")

    assert mutations == [Mutation.remove_label(NO), Mutation.add_label(YES)]


def test_signed_with_explicit_trigger_congratulates(cfg):
    mutations = reconcile([], set(), True, cfg, "alice")

    assert kinds(mutations) == [MutationKind.ADD_LABEL, MutationKind.CREATE_COMMENT]
    assert mutations[1].body.startswith("***@alice***, thanks for your pull request.")


def test_signed_label_already_present_no_comment(cfg):
    assert reconcile([], {YES}, True, cfg, "alice") == []


def test_unsigned_replaces_signed_label_and_posts_guide(cfg):
    mutations = reconcile(UNSIGNED, {YES, "bug"}, False, cfg, "alice")

    assert kinds(mutations) == [
        MutationKind.REMOVE_LABEL,
        MutationKind.ADD_LABEL,
        MutationKind.CREATE_COMMENT,
    ]
    assert mutations[0].label == YES
    assert mutations[1].label == NO


def test_unsigned_always_posts_guide(cfg):
    mutations = reconcile(UNSIGNED, {NO}, False, cfg, "alice", COMMENTS)

    assert kinds(mutations) == [
        MutationKind.DELETE_COMMENT,
        MutationKind.DELETE_COMMENT,
        MutationKind.CREATE_COMMENT,
    ]


def test_guide_lists_unsigned_commits_in_order(cfg):
    mutations = reconcile(UNSIGNED, set(), False, cfg, "alice")
    body = mutations[-1].body

    assert body.startswith(SIGN_GUIDE_TITLE)
    assert "**11111111** | fix\n**22222222** | docs" in body
    assert "[**FAQs**](https://cla.example.com/faq)" in body
    assert "[**here**](https://cla.example.com/sign)" in body
    assert body == sign_guide(cfg.sign_url, UNSIGNED, cfg.faq_url)


def test_both_labels_present_resolves_to_one(cfg):
    assert reconcile([], {YES, NO}, False, cfg, "alice") == [Mutation.remove_label(NO)]
    assert kinds(reconcile(UNSIGNED, {YES, NO}, False, cfg, "alice")) == [
        MutationKind.REMOVE_LABEL,
        MutationKind.CREATE_COMMENT,
    ]
