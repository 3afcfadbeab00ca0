"""Remote bookmark service adapters."""

from linksaver.adapters.api.auth_gateway import HttpAuthGateway
from linksaver.adapters.api.bookmark_repository import HttpBookmarkRepository

__all__ = ["HttpAuthGateway", "HttpBookmarkRepository"]
