"""Jina Reader client for page summaries."""

import logging
from typing import Optional

import httpx

from linksaver.config import Settings
from linksaver.core import NO_SUMMARY, ContentEnricher

logger = logging.getLogger(__name__)


class JinaReaderClient(ContentEnricher):
    """Fetch a markdown rendition of a page through the Jina Reader.
    
    Enrichment is best effort: every failure is logged and turned into the
    fallback sentinel, so callers never see an exception from ``enrich``.
    """
    
    def __init__(
        self,
        base_url: str = "https://r.jina.ai",
        timeout: float = 15.0,
        accept: str = "text/markdown",
        api_key: Optional[str] = None,
        max_summary_chars: Optional[int] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.accept = accept
        self.api_key = api_key
        self.max_summary_chars = max_summary_chars
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "JinaReaderClient":
        return cls(
            base_url=settings.enrichment.reader_base_url,
            timeout=settings.enrichment.timeout,
            accept=settings.enrichment.accept,
            api_key=settings.jina_api_key,
            max_summary_chars=settings.enrichment.max_summary_chars,
        )
    
    async def enrich(self, url: str) -> str:
        """Return the page content as markdown, or the fallback sentinel."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(self._reader_url(url), headers=self._get_headers())
        except httpx.HTTPError as e:
            logger.warning("Enrichment request failed for %s: %s", url, e)
            return NO_SUMMARY
        
        if not 200 <= response.status_code < 300:
            logger.warning("Enrichment failed for %s: HTTP %s", url, response.status_code)
            return NO_SUMMARY
        
        summary = response.text.strip()
        if not summary:
            logger.warning("Enrichment returned empty content for %s", url)
            return NO_SUMMARY
        
        if self.max_summary_chars and len(summary) > self.max_summary_chars:
            summary = summary[:self.max_summary_chars].rstrip() + "\n\n[content truncated]"
        
        logger.debug("Enriched %s (%d chars)", url, len(summary))
        return summary
    
    def _reader_url(self, url: str) -> str:
        # The reader takes the target URL verbatim as its path
        return f"{self.base_url}/{url}"
    
    def _get_headers(self) -> dict[str, str]:
        """Get headers for reader requests."""
        headers = {"Accept": self.accept}
        
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        
        return headers
