# CLA signing service integration
from app.integrations.signing.client import SigningServiceClient, SigningStatusResponse

__all__ = ["SigningServiceClient", "SigningStatusResponse"]
