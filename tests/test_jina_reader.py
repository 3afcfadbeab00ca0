"""Tests for the Jina Reader enrichment client."""

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from linksaver.adapters.enrichment import JinaReaderClient
from linksaver.config import Settings
from linksaver.core import NO_SUMMARY


@pytest.mark.asyncio
async def test_enrich_success(mock_http: AsyncMock, make_response: Callable[..., MagicMock]) -> None:
    """Test markdown is returned for a successful fetch."""
    mock_http.get.return_value = make_response(200, text="# Title\n\nBody text\n")
    client = JinaReaderClient()
    
    summary = await client.enrich("https://example.com/a")
    
    assert summary == "# Title\n\nBody text"
    call_args = mock_http.get.call_args
    assert call_args.args[0] == "https://r.jina.ai/https://example.com/a"
    assert call_args.kwargs["headers"] == {"Accept": "text/markdown"}


@pytest.mark.asyncio
async def test_enrich_sends_api_key(mock_http: AsyncMock, make_response: Callable[..., MagicMock]) -> None:
    """Test the optional API key is sent as a bearer token."""
    mock_http.get.return_value = make_response(200, text="content")
    client = JinaReaderClient(base_url="https://reader.local/", api_key="jina-key")
    
    await client.enrich("https://example.com")
    
    call_args = mock_http.get.call_args
    assert call_args.args[0] == "https://reader.local/https://example.com"
    assert call_args.kwargs["headers"]["Authorization"] == "Bearer jina-key"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [403, 404, 500, 503])
async def test_enrich_http_error_falls_back(
    mock_http: AsyncMock, make_response: Callable[..., MagicMock], status_code: int
) -> None:
    """Test non-success statuses produce the sentinel."""
    mock_http.get.return_value = make_response(status_code, text="error page")
    
    assert await JinaReaderClient().enrich("https://example.com") == NO_SUMMARY


@pytest.mark.asyncio
async def test_enrich_network_error_falls_back(mock_http: AsyncMock) -> None:
    """Test transport errors produce the sentinel instead of raising."""
    mock_http.get.side_effect = httpx.ConnectError("connection refused")
    
    assert await JinaReaderClient().enrich("https://example.com") == NO_SUMMARY


@pytest.mark.asyncio
async def test_enrich_timeout_falls_back(mock_http: AsyncMock) -> None:
    """Test timeouts produce the sentinel."""
    mock_http.get.side_effect = httpx.ReadTimeout("timed out")
    
    assert await JinaReaderClient(timeout=0.1).enrich("https://example.com") == NO_SUMMARY


@pytest.mark.asyncio
async def test_enrich_empty_body_falls_back(mock_http: AsyncMock, make_response: Callable[..., MagicMock]) -> None:
    """Test a blank page produces the sentinel."""
    mock_http.get.return_value = make_response(200, text="   \n")
    
    assert await JinaReaderClient().enrich("https://example.com") == NO_SUMMARY


@pytest.mark.asyncio
async def test_enrich_truncates_long_content(mock_http: AsyncMock, make_response: Callable[..., MagicMock]) -> None:
    """Test optional truncation of long pages."""
    mock_http.get.return_value = make_response(200, text="x" * 500)
    
    summary = await JinaReaderClient(max_summary_chars=100).enrich("https://example.com")
    
    assert summary.startswith("x" * 100)
    assert summary.endswith("[content truncated]")


def test_from_settings() -> None:
    """Test the client picks up enrichment settings."""
    settings = Settings(jina_api_key="k")
    settings.enrichment.timeout = 5.0
    
    client = JinaReaderClient.from_settings(settings)
    
    assert client.timeout == 5.0
    assert client.api_key == "k"
    assert client.base_url == "https://r.jina.ai"
