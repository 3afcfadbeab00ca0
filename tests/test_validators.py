"""Tests for URL normalization."""

import pytest

from linksaver.core import ValidationError, normalize_url


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://example.com/a", "https://example.com/a"),
        ("example.com/a", "https://example.com/a"),
        ("  http://news.ycombinator.com/item?id=1  ", "http://news.ycombinator.com/item?id=1"),
        ("HTTPS://Example.com", "https://example.com/"),
        ("http://localhost:8000/docs", "http://localhost:8000/docs"),
        ("http://192.168.1.10/", "http://192.168.1.10/"),
        ("http://[::1]/page", "http://[::1]/page"),
        ("https://bücher.de/", "https://xn--bcher-kva.de/"),
        ("https://my_host.example.com/a", "https://my_host.example.com/a"),
        ("http://intranet/wiki", "http://intranet/wiki"),
    ],
)
def test_normalize_valid(raw: str, expected: str) -> None:
    """Valid input is returned as an absolute URL."""
    assert normalize_url(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "not a url",
        "ftp://example.com/file",
        "javascript:alert(1)",
        "https://",
        "http://999.1.1.1/",
    ],
)
def test_normalize_invalid(raw: str) -> None:
    """Malformed input is rejected."""
    with pytest.raises(ValidationError):
        normalize_url(raw)
