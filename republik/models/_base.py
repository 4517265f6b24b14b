from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from the environment.

    REPUBLIK_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("REPUBLIK_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class RepublikModel(BaseModel):
    """
    Project-wide base model for GraphQL payloads.

    Field names are snake_case in Python and camelCase on the wire. The API
    returns far more than we model, so unknown keys are ignored unless
    overridden before import:
      export REPUBLIK_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
    )


__all__ = ["RepublikModel", "_env_extra_mode"]
