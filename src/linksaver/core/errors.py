"""Error taxonomy shared by adapters and use cases."""

from typing import Optional


class LinkSaverError(Exception):
    """Base class for all domain errors."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LinkSaverError):
    """Input rejected before any network call, or by the server (400/422)."""


class CaptureInProgressError(ValidationError):
    """A capture is already submitting."""


class ReorderError(ValidationError):
    """Reorder request refers to positions or bookmarks that do not exist."""


class Unauthorized(LinkSaverError):
    """Credential is missing, expired or rejected."""


class TransportError(LinkSaverError):
    """Network-level failure (connection, DNS, timeout)."""


class ServerError(LinkSaverError):
    """Non-success response or malformed response body."""
    
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
