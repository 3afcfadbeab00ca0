"""Tests for core entities."""

from datetime import datetime, timezone

import pytest

from linksaver.core import NO_SUMMARY, Bookmark, ServerError


def test_bookmark_creation() -> None:
    """Test creating a valid bookmark."""
    bookmark = Bookmark(
        id="65a1",
        url="https://example.com/a",
        title="Example",
        summary="# Example\n\nText",
        tags=("python", "web"),
    )
    
    assert bookmark.title == "Example"
    assert bookmark.tags == ("python", "web")
    assert bookmark.created_at is None


def test_bookmark_validation() -> None:
    """Test bookmark validation."""
    with pytest.raises(ValueError, match="id cannot be empty"):
        Bookmark(id="", url="https://example.com", title="x")
    
    with pytest.raises(ValueError, match="URL cannot be empty"):
        Bookmark(id="1", url="", title="x")


def test_bookmark_summary_never_empty() -> None:
    """An empty summary is replaced by the sentinel."""
    bookmark = Bookmark(id="1", url="https://example.com", title="x", summary="")
    assert bookmark.summary == NO_SUMMARY


def test_from_api_document_id() -> None:
    """Service payloads carry the id as ``_id``."""
    bookmark = Bookmark.from_api({
        "_id": "65a1f0",
        "url": "https://example.com/a",
        "title": "Example A",
        "summary": "Some text",
        "tags": ["news", "tech"],
        "created_at": "2025-01-15T10:30:00Z",
    })
    
    assert bookmark.id == "65a1f0"
    assert bookmark.tags == ("news", "tech")
    assert bookmark.created_at == datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_from_api_defaults() -> None:
    """Missing optional fields fall back to sensible values."""
    bookmark = Bookmark.from_api({"id": 7, "url": "https://example.com", "created_at": "yesterday"})
    
    assert bookmark.id == "7"
    assert bookmark.title == "https://example.com"
    assert bookmark.summary == NO_SUMMARY
    assert bookmark.tags == ()
    assert bookmark.created_at is None


def test_from_api_malformed() -> None:
    """Unusable payloads are reported as server errors."""
    with pytest.raises(ServerError):
        Bookmark.from_api({"title": "no id or url"})
    
    with pytest.raises(ServerError):
        Bookmark.from_api(["not", "an", "object"])
