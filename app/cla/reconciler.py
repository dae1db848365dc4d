"""
State Reconciler

Plans the label and comment changes that bring a pull request in line with
its CLA verdict. Planning is pure: it only reads the verdict, the current
labels and the existing comments, and returns the mutations to apply.

Order of the plan:
1. Delete every existing sign guide comment (always, whatever the verdict)
2. Remove the label of the opposite verdict, if present
3. Add the label of the current verdict, if absent
4. Post at most one comment
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, List, Optional, Sequence

from app.cla.templates import already_signed, is_sign_guide, sign_guide
from app.models.cla_config import BotConfig
from app.models.commit import Commit, PRComment


class MutationKind(str, Enum):
    """Kind of API call a mutation performs."""

    DELETE_COMMENT = "delete_comment"
    REMOVE_LABEL = "remove_label"
    ADD_LABEL = "add_label"
    CREATE_COMMENT = "create_comment"


@dataclass(frozen=True)
class Mutation:
    """A single planned change to the pull request."""

    kind: MutationKind
    label: Optional[str] = None
    comment_id: Optional[int] = None
    body: Optional[str] = None

    @classmethod
    def delete_comment(cls, comment_id: int) -> "Mutation":
        return cls(MutationKind.DELETE_COMMENT, comment_id=comment_id)

    @classmethod
    def remove_label(cls, label: str) -> "Mutation":
        return cls(MutationKind.REMOVE_LABEL, label=label)

    @classmethod
    def add_label(cls, label: str) -> "Mutation":
        return cls(MutationKind.ADD_LABEL, label=label)

    @classmethod
    def create_comment(cls, body: str) -> "Mutation":
        return cls(MutationKind.CREATE_COMMENT, body=body)

    def describe(self) -> str:
        if self.label is not None:
            return f"{self.kind.value} {self.label}"
        if self.comment_id is not None:
            return f"{self.kind.value} {self.comment_id}"
        return self.kind.value


def stale_sign_guides(comments: Sequence[PRComment]) -> List[int]:
    """IDs of sign guide comments left by previous passes."""
    return [c.id for c in comments if is_sign_guide(c.body)]


def reconcile(
    unsigned: Sequence[Commit],
    current_labels: AbstractSet[str],
    explicitly_triggered: bool,
    cfg: BotConfig,
    pr_author: str,
    existing_comments: Sequence[PRComment] = (),
) -> List[Mutation]:
    """
    Plan the mutations for one reconciliation pass.

    Args:
        unsigned: Unsigned commits in listing order (empty means signed)
        current_labels: Labels currently on the pull request
        explicitly_triggered: The pass was requested by a "/check-cla" comment
        cfg: Bot configuration (label names and links)
        pr_author: Login of the pull request author
        existing_comments: Comments currently on the pull request

    Returns:
        Mutations in the order they must be applied
    """
    mutations = [Mutation.delete_comment(i) for i in stale_sign_guides(existing_comments)]

    has_yes = cfg.cla_label_yes in current_labels
    has_no = cfg.cla_label_no in current_labels

    if not unsigned:
        if has_no:
            mutations.append(Mutation.remove_label(cfg.cla_label_no))

        if not has_yes:
            mutations.append(Mutation.add_label(cfg.cla_label_yes))
            if explicitly_triggered:
                mutations.append(Mutation.create_comment(already_signed(pr_author)))

        return mutations

    if has_yes:
        mutations.append(Mutation.remove_label(cfg.cla_label_yes))

    if not has_no:
        mutations.append(Mutation.add_label(cfg.cla_label_no))

    mutations.append(
        Mutation.create_comment(sign_guide(cfg.sign_url, list(unsigned), cfg.faq_url))
    )
    return mutations
