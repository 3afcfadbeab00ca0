"""Shared handling of bookmark service responses."""

from typing import Any

import httpx

from linksaver.core import ServerError, Unauthorized, ValidationError


def error_detail(response: httpx.Response, default: str) -> str:
    """Extract the server's ``detail`` message from an error response.
    
    FastAPI validation errors arrive as a list of ``{loc, msg}`` objects;
    those are flattened into one line.
    """
    try:
        data = response.json()
    except ValueError:
        return default
    
    if not isinstance(data, dict):
        return default
    
    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, list):
        messages = [
            str(entry.get("msg")) if isinstance(entry, dict) and entry.get("msg") else str(entry)
            for entry in detail
        ]
        if messages:
            return "; ".join(messages)
    return default


def check_response(response: httpx.Response, default: str) -> None:
    """Raise the matching domain error for a non-success response."""
    status = response.status_code
    if 200 <= status < 300:
        return
    
    message = error_detail(response, default)
    if status == 401:
        raise Unauthorized(message)
    if status in (400, 422):
        raise ValidationError(message)
    raise ServerError(message, status_code=status)


def json_body(response: httpx.Response) -> Any:
    """Decode a success body, treating garbage as a server error."""
    try:
        return response.json()
    except ValueError as e:
        raise ServerError("Malformed response from bookmark service", response.status_code) from e
