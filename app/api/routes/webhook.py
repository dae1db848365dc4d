"""
GitHub Webhook Route

Receives `pull_request` and `issue_comment` deliveries and runs the CLA
check for the ones that qualify.
"""

import asyncio
import json
import logging
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Request

from app.cla.errors import CLAError
from app.config import get_settings
from app.models.api_responses import MutationSummary, WebhookResponse, WebhookStatus
from app.models.events import parse_event
from app.services.cla_checker import CLAChecker
from app.utils.helpers import verify_webhook_signature

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy initialization to avoid import-time GitHub client setup
_cla_checker = None


def get_cla_checker() -> CLAChecker:
    """Get CLAChecker instance with lazy initialization."""
    global _cla_checker
    if _cla_checker is None:
        _cla_checker = CLAChecker()
    return _cla_checker


@router.post("/webhook", response_model=WebhookResponse)
async def handle_webhook(
    request: Request,
    x_github_event: str = Header(..., description="GitHub event name"),
    x_hub_signature_256: Optional[str] = Header(None, description="HMAC signature of the body"),
):
    """
    Handle a GitHub webhook delivery.

    Fatal check errors (bad configuration, no commits, signing service down)
    return 500 so the delivery can be redelivered.
    """
    body = await request.body()

    secret = get_settings().webhook_secret
    if secret and not verify_webhook_signature(secret, body, x_hub_signature_256):
        logger.warning(f"Rejected {x_github_event} delivery with bad signature")
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    try:
        payload = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON")

    event = parse_event(x_github_event, payload if isinstance(payload, dict) else {})

    try:
        result = await asyncio.to_thread(get_cla_checker().handle_event, event)
    except CLAError as e:
        logger.error(f"CLA check failed for {x_github_event} event: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if result is None:
        return WebhookResponse(status=WebhookStatus.IGNORED, event=x_github_event)

    return WebhookResponse(
        status=WebhookStatus.PROCESSED,
        event=x_github_event,
        pull_request=f"{result.org}/{result.repo}#{result.number}",
        signed=result.signed,
        unsigned_commits=result.unsigned_shas,
        mutations=[
            MutationSummary(
                kind=m.kind.value,
                label=m.label,
                comment_id=m.comment_id,
                failed=m in result.failed,
            )
            for m in result.mutations
        ],
    )
