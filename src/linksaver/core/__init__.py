"""Core domain layer."""

from linksaver.core.entities import (
    NO_SUMMARY,
    Bookmark,
    CaptureResult,
    CaptureState,
    Credentials,
    ViewState,
)
from linksaver.core.errors import (
    CaptureInProgressError,
    LinkSaverError,
    ReorderError,
    ServerError,
    TransportError,
    Unauthorized,
    ValidationError,
)
from linksaver.core.interfaces import (
    AuthGateway,
    BookmarkRepository,
    ContentEnricher,
    CredentialStore,
)
from linksaver.core.ordering import OrderingReconciler
from linksaver.core.session import SessionContext
from linksaver.core.validators import normalize_url

__all__ = [
    "NO_SUMMARY",
    "Bookmark",
    "CaptureResult",
    "CaptureState",
    "Credentials",
    "ViewState",
    "LinkSaverError",
    "ValidationError",
    "CaptureInProgressError",
    "ReorderError",
    "Unauthorized",
    "TransportError",
    "ServerError",
    "AuthGateway",
    "BookmarkRepository",
    "ContentEnricher",
    "CredentialStore",
    "OrderingReconciler",
    "SessionContext",
    "normalize_url",
]
