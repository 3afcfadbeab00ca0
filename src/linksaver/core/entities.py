"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from linksaver.core.errors import ServerError

NO_SUMMARY = "No summary available"


class CaptureState(str, Enum):
    """State of the capture pipeline."""
    
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class ViewState(str, Enum):
    """State of the bookmark list view."""
    
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Bookmark:
    """Bookmark as stored by the remote service."""
    
    id: str
    url: str
    title: str
    summary: str = NO_SUMMARY
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    
    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Bookmark id cannot be empty")
        if not self.url:
            raise ValueError("URL cannot be empty")
        if not self.summary:
            object.__setattr__(self, "summary", NO_SUMMARY)
    
    @classmethod
    def from_api(cls, payload: Any) -> "Bookmark":
        """Build a bookmark from a service JSON object.
        
        Raises:
            ServerError: If the payload is not a usable bookmark object.
        """
        if not isinstance(payload, dict):
            raise ServerError(f"Malformed bookmark payload: {type(payload).__name__}")
        
        bookmark_id = payload.get("_id") or payload.get("id")
        url = payload.get("url")
        if not bookmark_id or not url:
            raise ServerError("Malformed bookmark payload: missing id or url")
        
        tags = payload.get("tags") or []
        if not isinstance(tags, list):
            tags = [tags]
        
        return cls(
            id=str(bookmark_id),
            url=str(url),
            title=str(payload.get("title") or url),
            summary=str(payload.get("summary") or NO_SUMMARY),
            tags=tuple(str(tag) for tag in tags),
            created_at=_parse_timestamp(payload.get("created_at")),
        )


@dataclass
class CaptureResult:
    """Outcome of one capture attempt."""
    
    state: CaptureState
    url: str
    bookmark: Optional[Bookmark] = None
    error: Optional[str] = None
    
    @property
    def succeeded(self) -> bool:
        return self.state == CaptureState.SUCCESS


@dataclass
class Credentials:
    """Email/password pair submitted to the auth endpoints."""
    
    email: str
    password: str = field(repr=False)
    
    def __post_init__(self) -> None:
        if not self.email:
            raise ValueError("Email cannot be empty")
        if not self.password:
            raise ValueError("Password cannot be empty")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
