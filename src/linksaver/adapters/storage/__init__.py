"""Durable storage adapters."""

from linksaver.adapters.storage.credential_file import FileCredentialStore

__all__ = ["FileCredentialStore"]
