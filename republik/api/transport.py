"""
Minimal GraphQL-over-HTTP transport.

  - JSON POST of ``{"query": ..., "variables": ...}``
  - static ``connect.sid`` session cookie
  - Bounded debug dumps of failing exchanges (REPUBLIK_DEBUG)
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any, Dict, Optional

import requests

from ..exceptions import RemoteAuthError, RemoteQueryError
from .config import ClientConfig

LOGGER = logging.getLogger(__name__)


class _GraphQLTransport:
    def __init__(
        self,
        sid: str,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ):
        self._config = config or ClientConfig()
        self._url = self._config.api_url
        self._session = session if session is not None else requests.Session()
        self._headers = {"Accept": "application/json"}
        self._dump_seq = 0
        if sid:
            self._headers["Cookie"] = f"connect.sid={sid}"
        LOGGER.debug("Initialized _GraphQLTransport with url: %s", self._url)

    def run(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict:
        """Execute ``query`` and return the ``data`` object of the response."""
        payload = {"query": query, "variables": variables or {}}
        LOGGER.info("POST to %s", self._url)
        try:
            resp = self._session.post(self._url, json=payload, headers=self._headers)
        except requests.RequestException as e:
            LOGGER.error("POST to %s failed: %s", self._url, e)
            raise RemoteQueryError(f"Request failed: {e}")

        code = getattr(resp, "status_code", 0)
        LOGGER.debug("POST to %s returned status %d", self._url, code)
        if code >= 400:
            self._dump_http_debug(payload, resp)
            if code in (401, 403):
                LOGGER.error("POST to %s failed with auth error: %d", self._url, code)
                raise RemoteAuthError(f"HTTP {code}: unauthorized")
            try:
                body = resp.json()
            except ValueError:
                body = getattr(resp, "text", None)
            LOGGER.error("POST to %s failed with code %d", self._url, code)
            raise RemoteQueryError(f"HTTP {code}", payload=body)

        try:
            body = resp.json()
        except ValueError:
            self._dump_http_debug(payload, resp)
            LOGGER.error("Failed to parse JSON response from %s", self._url)
            raise RemoteQueryError(
                "Invalid JSON response", payload=getattr(resp, "text", None)
            )

        if not isinstance(body, dict):
            raise RemoteQueryError("Unexpected response shape", payload=body)

        errors = body.get("errors")
        if errors:
            self._dump_http_debug(payload, resp)
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in errors
            )
            LOGGER.error("GraphQL errors from %s: %s", self._url, messages)
            raise RemoteQueryError(f"GraphQL error: {messages}", payload=errors)

        data = body.get("data")
        if data is None:
            raise RemoteQueryError("Response carries no data", payload=body)
        return data

    def _dump_http_debug(self, payload: Dict, resp) -> None:
        if not self._config.debug:
            return
        self._dump_seq += 1
        ts = time.strftime("%Y%m%d-%H%M%S")
        prefix = f"{ts}-{int(time.time() * 1000) % 1000:03d}-{self._dump_seq:04d}"
        out_dir = self._config.debug_dir
        try:
            os.makedirs(out_dir, exist_ok=True)
            with open(
                os.path.join(out_dir, f"{prefix}_graphql_request.json"),
                "w",
                encoding="utf-8",
            ) as f:
                json.dump(
                    {"url": self._url, "payload": payload},
                    f,
                    ensure_ascii=False,
                    indent=2,
                )
            status = getattr(resp, "status_code", None)
            headers = getattr(resp, "headers", {}) or {}
            body_text = getattr(resp, "text", None)
            with open(
                os.path.join(out_dir, f"{prefix}_graphql_response.txt"),
                "w",
                encoding="utf-8",
            ) as f:
                f.write(f"status={status}\nurl={self._url}\nheaders={dict(headers)}\n\n")
                if isinstance(body_text, str):
                    max_bytes = self._config.debug_max_bytes
                    if len(body_text) > max_bytes:
                        f.write(body_text[:max_bytes] + "\n[truncated]\n")
                    else:
                        f.write(body_text)
        except OSError as e:
            LOGGER.debug("Could not write debug dump to %s: %s", out_dir, e)
