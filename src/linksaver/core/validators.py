"""URL validation for submitted bookmarks."""

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from linksaver.core.errors import ValidationError

_http_url = TypeAdapter(HttpUrl)


def normalize_url(raw: str) -> str:
    """Return an absolute http(s) URL for user input.
    
    Input without a scheme (``example.com/a``) is treated as https. The
    result is in pydantic's canonical form: lowercase scheme and host,
    punycode for international domains and ``/`` for an empty path.
    
    Raises:
        ValidationError: If the input cannot be a web address.
    """
    url = (raw or "").strip()
    if not url:
        raise ValidationError("URL cannot be empty")
    if any(char.isspace() for char in url):
        raise ValidationError(f"Invalid URL: {raw!r}")
    
    if "://" not in url:
        url = f"https://{url}"
    
    try:
        return str(_http_url.validate_python(url))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid URL: {raw!r}") from e
