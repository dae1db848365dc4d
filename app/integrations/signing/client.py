"""
CLA Signing Service Client

Queries the signing service for whether an email has signed the CLA:

    GET <check_url>?email=<email>
    -> {"data": {"signed": true}}
"""

import logging
from typing import Optional

import requests
from pydantic import BaseModel, StrictBool, TypeAdapter, ValidationError

from app.cla.errors import SignatureQueryError
from app.config import get_settings

logger = logging.getLogger(__name__)


class _SigningInfo(BaseModel):
    signed: Optional[StrictBool] = False


class SigningStatusResponse(BaseModel):
    """Body returned by the signing-status endpoint."""

    data: Optional[_SigningInfo] = None

    @property
    def signed(self) -> bool:
        return self.data is not None and self.data.signed is True


# JSON nulls decode as "not signed"
_response_adapter = TypeAdapter(Optional[SigningStatusResponse])


class SigningServiceClient:
    """HTTP client for the CLA signing-status endpoint."""

    def __init__(self, timeout: float | None = None):
        if timeout is None:
            timeout = get_settings().signing_timeout
        self.timeout = timeout

    def is_signed(self, check_url: str, email: str) -> bool:
        """
        Ask the signing service whether an email has signed the CLA.

        Args:
            check_url: Signing-status endpoint for the repository
            email: Email to look up

        Returns:
            True if signed

        Raises:
            SignatureQueryError: On network errors, non-2xx status, or a body
                that is not the expected JSON
        """
        try:
            response = requests.get(
                check_url, params={"email": email}, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Signing service request failed for {email}: {e}")
            raise SignatureQueryError(email, str(e)) from e

        if not 200 <= response.status_code <= 299:
            raise SignatureQueryError(
                email,
                f"response has status {response.status_code} and body {response.text!r}",
            )

        try:
            status = _response_adapter.validate_json(response.content)
        except ValidationError as e:
            raise SignatureQueryError(email, f"unmarshal failed: {e}") from e

        signed = status is not None and status.signed
        logger.debug(f"CLA status for {email}: signed={signed}")
        return signed

    def query_for(self, check_url: str):
        """Bind the client to one repository's signing-status endpoint."""

        def query(email: str) -> bool:
            return self.is_signed(check_url, email)

        return query
