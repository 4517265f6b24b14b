"""Models for the document search listing."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, List, Optional

from dateutil.parser import isoparse
from pydantic import BeforeValidator, Field

from ._base import RepublikModel

LOGGER = logging.getLogger(__name__)


class AudioCoverCrop(RepublikModel):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class AudioSource(RepublikModel):
    mp3: Optional[str] = None
    kind: Optional[str] = None
    duration_ms: Optional[int] = None


class FormatMeta(RepublikModel):
    path: Optional[str] = None
    title: Optional[str] = None
    kind: Optional[str] = None


class Format(RepublikModel):
    """Reference to the parent format (series/column) of a document."""

    meta: Optional[FormatMeta] = None


class DocumentMeta(RepublikModel):
    title: Optional[str] = None
    path: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    publish_date: Optional[str] = None
    template: Optional[str] = None
    estimated_reading_minutes: Optional[int] = None
    estimated_consumption_minutes: Optional[int] = None
    audio_cover_crop: Optional[AudioCoverCrop] = None
    audio_source: Optional[AudioSource] = None
    format: Optional[Format] = None


class Document(RepublikModel):
    id: str
    meta: DocumentMeta = Field(default_factory=DocumentMeta)

    @property
    def pub_date(self) -> Optional[datetime]:
        """Parsed ``publishDate``; None when missing or unparsable."""
        raw = self.meta.publish_date
        if not raw:
            return None
        try:
            return isoparse(raw)
        except ValueError:
            LOGGER.debug("Unparsable publishDate %r on document %s", raw, self.id)
            return None


def _empty_to_none(v):
    # non-Document entities come back as {} from the "... on Document" fragment
    return None if v == {} else v


class SearchNode(RepublikModel):
    entity: Annotated[Optional[Document], BeforeValidator(_empty_to_none)] = None


class SearchConnection(RepublikModel):
    nodes: List[SearchNode] = Field(default_factory=list)


class SearchResponse(RepublikModel):
    """Top-level ``data`` of the search query."""

    documents: SearchConnection = Field(default_factory=SearchConnection)

    def entities(self) -> List[Document]:
        return [n.entity for n in self.documents.nodes if n.entity is not None]
