"""Shared fixtures."""

from datetime import datetime, timezone
from typing import Callable, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from linksaver.core import Bookmark, SessionContext


@pytest.fixture
def bookmarks() -> list[Bookmark]:
    """Three bookmarks in server order A, B, C."""
    created = datetime(2025, 1, 15, tzinfo=timezone.utc)
    return [
        Bookmark(id=name, url=f"https://example.com/{name.lower()}", title=f"Page {name}", created_at=created)
        for name in ("A", "B", "C")
    ]


@pytest.fixture
def session() -> SessionContext:
    """In-memory session holding a token."""
    session = SessionContext()
    session.set_credential("test-token")
    return session


@pytest.fixture
def mock_http() -> Iterator[AsyncMock]:
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = False
        mock_client_class.return_value = mock_client
        yield mock_client


def _make_response(status_code: int = 200, json_data: object = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON body")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for stand-ins of httpx.Response."""
    return _make_response
