"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from linksaver.core.entities import Bookmark, Credentials


class ContentEnricher(ABC):
    """Interface for fetching a text summary of a web page."""
    
    @abstractmethod
    async def enrich(self, url: str) -> str:
        """Return summary text for url, or the fallback sentinel on failure."""
        pass


class BookmarkRepository(ABC):
    """Interface for the authoritative bookmark store."""
    
    @abstractmethod
    async def list(self) -> list[Bookmark]:
        """Fetch all bookmarks of the authenticated user in server order."""
        pass
    
    @abstractmethod
    async def create(self, url: str, summary: str) -> Bookmark:
        """Persist a new bookmark and return it as stored."""
        pass


class AuthGateway(ABC):
    """Interface for the account endpoints."""
    
    @abstractmethod
    async def request_token(self, credentials: Credentials, failure_message: str = "Login failed") -> str:
        """Exchange credentials for a bearer token.
        
        failure_message is reported when the service gives no detail.
        """
        pass
    
    @abstractmethod
    async def register(self, credentials: Credentials) -> None:
        """Create a new account."""
        pass


class CredentialStore(ABC):
    """Interface for durable storage of the bearer token."""
    
    @abstractmethod
    def load(self) -> Optional[str]:
        """Return the stored token, if any."""
        pass
    
    @abstractmethod
    def save(self, token: str) -> None:
        """Store the token, replacing any previous one."""
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """Remove the stored token."""
        pass
