"""Bearer token persisted as a small YAML file."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from linksaver.core import CredentialStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class FileCredentialStore(CredentialStore):
    """Keep the session token under a fixed key in a YAML file."""
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def load(self) -> Optional[str]:
        """Return the stored token, or None if nothing usable is stored."""
        if not self.path.exists():
            return None
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read credentials from %s: %s", self.path, e)
            return None
        
        if not isinstance(data, dict):
            return None
        token = data.get(TOKEN_KEY)
        return str(token) if token else None
    
    def save(self, token: str) -> None:
        """Write the token, readable by the current user only."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump({TOKEN_KEY: token}, f, default_flow_style=False)
        
        try:
            os.chmod(self.path, 0o600)
        except OSError:
            # Not supported on every filesystem
            pass
    
    def clear(self) -> None:
        """Delete the credentials file."""
        self.path.unlink(missing_ok=True)
