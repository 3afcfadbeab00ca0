"""HTTP client for the account endpoints."""

import logging

import httpx

from linksaver.adapters.api.responses import check_response, error_detail, json_body
from linksaver.config import Settings
from linksaver.core import AuthGateway, Credentials, ServerError, TransportError, Unauthorized

logger = logging.getLogger(__name__)


class HttpAuthGateway(AuthGateway):
    """Login and registration against the bookmark service."""
    
    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpAuthGateway":
        return cls(settings.api_base_url, settings.api_timeout)
    
    async def request_token(self, credentials: Credentials, failure_message: str = "Login failed") -> str:
        """Exchange email/password for a bearer token.
        
        The token endpoint follows the OAuth2 password flow, so the email is
        sent as the form field ``username``.
        
        Args:
            credentials: Account email and password
            failure_message: Reported when the service gives no detail
        
        Raises:
            Unauthorized: If the service rejects the credentials.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/token",
                    data={"username": credentials.email, "password": credentials.password},
                )
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach bookmark service: {e}") from e
        
        # Bad credentials come back as 400/401/422 depending on the backend
        if response.status_code in (400, 401, 422):
            raise Unauthorized(error_detail(response, failure_message))
        check_response(response, failure_message)
        
        data = json_body(response)
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise ServerError("Token response did not contain an access token", response.status_code)
        
        logger.debug("Obtained token for %s", credentials.email)
        return str(token)
    
    async def register(self, credentials: Credentials) -> None:
        """Create a new account."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/register",
                    json={"email": credentials.email, "password": credentials.password},
                )
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach bookmark service: {e}") from e
        
        check_response(response, "Registration failed")
        logger.info("Registered account %s", credentials.email)
