"""Library exceptions."""

from typing import Optional


class RepublikError(Exception):
    """Base error for the Republik client."""


class RemoteQueryError(RepublikError):
    """A GraphQL query failed (transport, HTTP status, GraphQL errors, decoding)."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload


class RemoteAuthError(RemoteQueryError):
    """Session cookie rejected (401/403)."""


class QueryResourceError(RepublikError):
    """A packaged GraphQL query file is missing or unreadable."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
