"""Session context holding the bearer credential."""

import logging
from typing import Optional

from linksaver.core.errors import Unauthorized
from linksaver.core.interfaces import CredentialStore

logger = logging.getLogger(__name__)


class SessionContext:
    """Current authentication state of one running client.
    
    Created by the top-level composition and passed to every component that
    issues authorized requests. When a credential store is attached, every
    change is written through so the session survives restarts.
    """
    
    def __init__(self, store: Optional[CredentialStore] = None) -> None:
        self.store = store
        self._token: Optional[str] = None
    
    @property
    def is_authenticated(self) -> bool:
        return self._token is not None
    
    def restore(self) -> bool:
        """Load the credential from the store.
        
        Returns:
            True if a credential was restored
        """
        if self.store is None:
            return False
        
        token = self.store.load()
        self._token = token or None
        if self._token:
            logger.debug("Session restored from credential store")
        return self.is_authenticated
    
    def get_credential(self) -> Optional[str]:
        return self._token
    
    def set_credential(self, token: str) -> None:
        """Replace the current credential."""
        if not token:
            raise ValueError("Token cannot be empty")
        
        self._token = token
        if self.store is not None:
            self.store.save(token)
        logger.info("Session started")
    
    def clear(self) -> None:
        """Forget the credential (logout or rejected token)."""
        self._token = None
        if self.store is not None:
            self.store.clear()
        logger.info("Session cleared")
    
    def authorization_headers(self) -> dict[str, str]:
        """Headers for an authorized request.
        
        Raises:
            Unauthorized: If no credential is held.
        """
        if not self._token:
            raise Unauthorized("Not logged in")
        return {"Authorization": f"Bearer {self._token}"}
