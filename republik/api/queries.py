"""GraphQL query texts."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..exceptions import QueryResourceError
from .filters import DocumentFilter

LOGGER = logging.getLogger(__name__)

DOCUMENT_QUERY_PATH = os.path.join(
    os.path.dirname(__file__), "graphql", "get_document.gql"
)

_META_FIELDS = """
              id
              meta {
                title
                path
                image
                description
                publishDate
                template
                estimatedReadingMinutes
                estimatedConsumptionMinutes
                audioCoverCrop {
                  x
                  y
                  width
                  height
                }
                audioSource {
                  mp3
                  kind
                  durationMs
                }
                format {
                  meta {
                    path
                    title
                    kind
                  }
                }
              }"""

# Section, format and front pages are never listed.
_SEARCH_QUERY = """
    query ($limit: Int!) {
      documents: search(
        filters: [
          { key: "template", not: true, value: "section" }
          { key: "template", not: true, value: "format" }
          { key: "template", not: true, value: "front" }
        ]
        %(filter)s
        sort: { key: publishedAt, direction: DESC }
        first: $limit
      ) {
        nodes {
          entity {
            ... on Document {%(fields)s
            }
          }
        }
      }
    }"""


def search_query(filter: Optional[DocumentFilter] = None) -> str:
    return _SEARCH_QUERY % {
        "filter": str(filter or DocumentFilter()),
        "fields": _META_FIELDS,
    }


def load_document_query(path: str = DOCUMENT_QUERY_PATH) -> str:
    """Read the getDocument query shipped with the package.

    Raises QueryResourceError when the file is missing, unreadable or empty.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        LOGGER.error("Cannot read GraphQL query %s: %s", path, e)
        raise QueryResourceError(f"Cannot read GraphQL query {path}: {e}", path=path)
    if not text.strip():
        raise QueryResourceError(f"GraphQL query {path} is empty", path=path)
    LOGGER.debug("Loaded GraphQL query from %s (%d bytes)", path, len(text))
    return text
