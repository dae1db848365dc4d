"""
Shared Utility Functions

Common helper functions used across multiple modules.
"""

import hashlib
import hmac
import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

MAX_SHA_LENGTH = 8

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$"
)


def is_valid_email(email: Optional[str]) -> bool:
    """
    Syntactic email check.

    Examples:
        "dev@example.com" → True
        "12345+dev@users.noreply.github.com" → True
        "" → False
        "not-an-email" → False

    Args:
        email: Email address to check

    Returns:
        True if the string looks like an email address
    """
    if not email:
        return False
    return _EMAIL_RE.match(email) is not None


def short_sha(sha: str, length: int = MAX_SHA_LENGTH) -> str:
    """Truncate a commit SHA for display."""
    return sha[:length]


def verify_webhook_signature(
    secret: str, body: bytes, signature_header: Optional[str]
) -> bool:
    """
    Verify a GitHub webhook HMAC signature.

    GitHub sends `X-Hub-Signature-256: sha256=<hexdigest>` computed over the
    raw request body with the webhook secret.

    Args:
        secret: Webhook secret shared with GitHub
        body: Raw request body
        signature_header: Value of the X-Hub-Signature-256 header

    Returns:
        True if the signature matches
    """
    if not signature_header or not signature_header.startswith("sha256="):
        return False

    expected = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(f"sha256={expected}", signature_header)
