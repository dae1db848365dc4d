"""
API Response Models

Pydantic models for consistent API response structures.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum


class WebhookStatus(str, Enum):
    """What the bot did with a webhook delivery."""

    IGNORED = "ignored"
    PROCESSED = "processed"


class MutationSummary(BaseModel):
    """A label or comment change made (or attempted) on the pull request."""

    kind: str = Field(..., description="delete_comment, remove_label, add_label or create_comment")
    label: Optional[str] = Field(None, description="Label name for label mutations")
    comment_id: Optional[int] = Field(None, description="Comment ID for deletions")
    failed: bool = Field(False, description="True if the API call failed")


class WebhookResponse(BaseModel):
    """
    Response model for the webhook endpoint.
    Only the status and event fields are set for ignored deliveries.
    """

    status: WebhookStatus = Field(..., description="Status: ignored or processed")
    event: str = Field(..., description="GitHub event name from X-GitHub-Event")

    # Reconciliation outcome (processed deliveries only)
    pull_request: Optional[str] = Field(
        None, description="Pull request reference, e.g. org/repo#12"
    )
    signed: Optional[bool] = Field(
        None, description="True if all commit authors have signed the CLA"
    )
    unsigned_commits: List[str] = Field(
        default_factory=list, description="SHAs of commits without a signed CLA"
    )
    mutations: List[MutationSummary] = Field(default_factory=list)
