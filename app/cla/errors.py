"""
CLA Check Errors

Fatal errors abort a reconciliation pass before any label or comment is
touched. MutationError is the only non-fatal one: the checker logs it and
moves on to the next mutation.
"""


class CLAError(Exception):
    """Base class for all CLA check failures."""


class ConfigurationError(CLAError):
    """Bot configuration is missing, invalid, or has no entry for the repo."""


class NoCommitsError(CLAError):
    """The pull request has no commits, so the CLA cannot be evaluated."""

    def __init__(self, message: str = "commits is empty, cla cannot be checked"):
        super().__init__(message)


class CommitListingError(CLAError):
    """Listing the pull request commits failed."""


class SignatureQueryError(CLAError):
    """The signing service could not be queried or returned a bad answer."""

    def __init__(self, email: str, reason: str):
        self.email = email
        self.reason = reason
        super().__init__(f"Failed to query CLA status for {email}: {reason}")


class MutationError(CLAError):
    """A label or comment mutation on the pull request failed."""
