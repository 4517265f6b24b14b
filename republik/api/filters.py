from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DocumentFilter:
    """Optional, independently combinable search filters."""

    feed: bool = False
    has_audio: bool = False
    audio_source_kind: Optional[str] = None
    format: Optional[str] = None

    def __str__(self) -> str:
        """Render as a GraphQL ``filter:`` argument, or "" when nothing is set."""
        parts: List[str] = []
        if self.feed:
            parts.append("feed: true")
        if self.has_audio:
            parts.append("hasAudio: true")
        if self.audio_source_kind:
            # enum value, unquoted
            parts.append(f"audioSourceKind: {self.audio_source_kind}")
        if self.format:
            parts.append(f'format: "{self.format}"')
        if not parts:
            return ""
        return "filter: {%s}" % ", ".join(parts)
