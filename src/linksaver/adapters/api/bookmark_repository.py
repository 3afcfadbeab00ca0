"""HTTP accessor for the remote bookmark store."""

import logging

import httpx

from linksaver.adapters.api.responses import check_response, json_body
from linksaver.config import Settings
from linksaver.core import Bookmark, BookmarkRepository, ServerError, SessionContext, TransportError

logger = logging.getLogger(__name__)


class HttpBookmarkRepository(BookmarkRepository):
    """Bookmark list/create over the service's REST API."""
    
    def __init__(self, session: SessionContext, base_url: str, timeout: float = 30.0) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
    
    @classmethod
    def from_settings(cls, session: SessionContext, settings: Settings) -> "HttpBookmarkRepository":
        return cls(session, settings.api_base_url, settings.api_timeout)
    
    async def list(self) -> list[Bookmark]:
        """Fetch all bookmarks of the current user, in server order."""
        headers = self.session.authorization_headers()
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}/bookmarks", headers=headers)
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach bookmark service: {e}") from e
        
        check_response(response, "Failed to fetch bookmarks")
        data = json_body(response)
        if not isinstance(data, list):
            raise ServerError("Malformed bookmark list from bookmark service", response.status_code)
        
        bookmarks = [Bookmark.from_api(entry) for entry in data]
        logger.debug("Fetched %d bookmarks", len(bookmarks))
        return bookmarks
    
    async def create(self, url: str, summary: str) -> Bookmark:
        """Persist a bookmark; the service assigns id, title, tags and timestamp."""
        headers = self.session.authorization_headers()
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/bookmarks",
                    headers=headers,
                    json={"url": url, "summary": summary},
                )
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach bookmark service: {e}") from e
        
        check_response(response, "Failed to add bookmark")
        bookmark = Bookmark.from_api(json_body(response))
        logger.info("Created bookmark %s for %s", bookmark.id, bookmark.url)
        return bookmark
