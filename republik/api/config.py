"""Client configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)

API_URL = "https://api.republik.ch/graphql"
DEFAULT_DEBUG_MAX_BYTES = 524288


def _debug_enabled() -> bool:
    return bool(os.getenv("REPUBLIK_DEBUG"))


def _debug_max_bytes() -> int:
    raw = os.getenv("REPUBLIK_DEBUG_MAX_BYTES")
    if not raw:
        return DEFAULT_DEBUG_MAX_BYTES
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning(
            "Ignoring REPUBLIK_DEBUG_MAX_BYTES=%r, using %d",
            raw,
            DEFAULT_DEBUG_MAX_BYTES,
        )
        return DEFAULT_DEBUG_MAX_BYTES


@dataclass(frozen=True)
class ClientConfig:
    api_url: str = API_URL

    # Dumps of failing request/response pairs; off unless REPUBLIK_DEBUG is set
    debug: bool = field(default_factory=_debug_enabled)
    debug_dir: str = os.path.join("workspace", "republik_debug")
    debug_max_bytes: int = field(default_factory=_debug_max_bytes)
