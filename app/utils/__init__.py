"""
Utility package exports
"""

from app.utils.helpers import is_valid_email, short_sha, verify_webhook_signature, MAX_SHA_LENGTH

__all__ = ["is_valid_email", "short_sha", "verify_webhook_signature", "MAX_SHA_LENGTH"]
