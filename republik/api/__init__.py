"""GraphQL access to the Republik content API."""

from .client import FETCH_FAILED_HTML, RepublikClient
from .config import API_URL, ClientConfig
from .filters import DocumentFilter

__all__ = [
    "API_URL",
    "ClientConfig",
    "DocumentFilter",
    "FETCH_FAILED_HTML",
    "RepublikClient",
]
