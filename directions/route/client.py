# directions/route/client.py
# -*- coding: utf-8 -*-
"""
Concrete directions HTTP client:
- Centralizes HTTP (session, headers, optional retries)
- Enforces the service's success contract (status == "OK")
- Hands successful payloads to the aggregator
- Emits standardized, high-signal logs for observability

Notes
-----
• Keep infra knobs in DirectionsConfig (timeouts, retries, UA).
• One HTTP attempt per call unless DirectionsConfig.max_retries > 0.
• Error mapping:
    - requests exceptions / invalid JSON / non-dict body  → TransportError
    - status "ZERO_RESULTS" or empty route list            → NoRouteFound
    - any other status != "OK"                             → ServiceError
• fetch_route() is a coroutine; the blocking HTTP call runs in a worker
  thread so several controllers can wait on the network at once.
• Entry points should call init_logging() — this module only fetches the logger.
"""

from __future__ import annotations

import asyncio
import json as _json
import time as _time
from typing import Any as _Any, Dict as _Dict
from urllib.parse import urlsplit

import requests as _req
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from directions.core.models import RouteRequest, RouteResult
from directions.infra.logging import get_logger
from .aggregator import aggregate_route
from .common import (
      DirectionsConfig
    , NoRouteFound
    , ServiceError
    , TransportError
    , _extract_error_text
)
from .request import prepare_request

_log = get_logger(__name__)

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


def check_status(data: _Dict[str, _Any]) -> None:
    """
    Enforce the success contract of a decoded response body.

    Raises ServiceError / NoRouteFound; returns None when the body carries
    status "OK" and at least one route.
    """
    status = data.get("status")
    if status == STATUS_ZERO_RESULTS:
        raise NoRouteFound()
    if status != STATUS_OK:
        raise ServiceError(data.get("error_message") or "Unknown error", status=status)
    if not data.get("routes"):
        raise NoRouteFound()


class DirectionsClient:
    """
    Directions client.

      - Prefer: DirectionsClient(cfg=DirectionsConfig(...))
      - Tests may inject a `session` (anything with .send()).
    """

    def __init__(
        self,
        cfg: DirectionsConfig | None = None,
        *,
        session: _req.Session | None = None,
    ):
        self.cfg = cfg or DirectionsConfig()

        if session is None:
            session = _req.Session()
            # Status-based retries only; 0 keeps the single-attempt contract
            retries = Retry(
                  total=self.cfg.max_retries
                , connect=0
                , read=0
                , backoff_factor=self.cfg.backoff_s
                , status_forcelist=(429, 500, 502, 503, 504)
                , allowed_methods=frozenset(["GET"])
                , respect_retry_after_header=True
                , raise_on_status=False
            )
            adapter = HTTPAdapter(max_retries=retries)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            session.headers.update(
                {
                      "User-Agent": self.cfg.user_agent
                    , "Accept": "application/json"
                }
            )
        self._sess = session

        _log.debug(
            "DirectionsClient ready ct=%.1fs rt=%.1fs retries=%s",
              self.cfg.connect_timeout_s
            , self.cfg.read_timeout_s
            , self.cfg.max_retries
        )

    def close(self) -> None:
        """Explicitly close the underlying HTTP session."""
        self._sess.close()

    def __enter__(self) -> "DirectionsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ────────────────────────────────────────────────────────────────────────
    # Core HTTP layer
    # ────────────────────────────────────────────────────────────────────────
    def fetch_json(self, prepared: _req.PreparedRequest) -> _Dict[str, _Any]:
        """
        Send one prepared request and return the decoded JSON body.

        Raises TransportError on network failures and on bodies that are not
        a JSON object. Status validation is left to check_status().
        """
        # Path only: the query string carries the API key
        path = urlsplit(prepared.url or "").path or "/"
        method_u = (prepared.method or "GET").upper()

        t0 = _time.time()
        try:
            resp = self._sess.send(prepared, timeout=self.cfg.timeouts)
        except _req.RequestException as e:
            dt_ms = (_time.time() - t0) * 1000.0
            _log.warning(
                "HTTP %s %s — request exception %s after %.0f ms",
                  method_u
                , path
                , type(e).__name__
                , dt_ms
            )
            raise TransportError(f"Request to {path} failed: {e}", cause=e) from e

        dt_ms = (_time.time() - t0) * 1000.0

        try:
            data = resp.json()
        except ValueError as e:
            _log.warning(
                "HTTP %s %s — %s invalid JSON (%.0f ms): %s",
                  method_u
                , path
                , resp.status_code
                , dt_ms
                , _extract_error_text(resp)
            )
            raise TransportError(f"Invalid JSON from {path} (HTTP {resp.status_code})", cause=e) from e

        if not isinstance(data, dict):
            _log.warning("HTTP %s %s — unexpected body type %s", method_u, path, type(data).__name__)
            raise TransportError(f"Unexpected body from {path}: {type(data).__name__}")

        size_b = len(_json.dumps(data, ensure_ascii=False).encode("utf-8"))
        _log.info(
            "HTTP %s %s — %s status=%s (%.0f ms, %s B)",
              method_u
            , path
            , resp.status_code
            , data.get("status")
            , dt_ms
            , size_b
        )
        return data

    # ────────────────────────────────────────────────────────────────────────
    # Public API
    # ────────────────────────────────────────────────────────────────────────
    def prepare(self, request: RouteRequest) -> _req.PreparedRequest:
        """
        prepare_request() with its failures (bad URL, unusable custom
        request) mapped to TransportError.
        """
        try:
            return prepare_request(request)
        except (_req.RequestException, TypeError, ValueError) as e:
            _log.warning("PREPARE failed: %s: %s", type(e).__name__, e)
            raise TransportError(f"Cannot build request: {e}", cause=e) from e

    def get_route(self, request: RouteRequest) -> RouteResult:
        """Blocking variant of fetch_route()."""
        data = self.fetch_json(self.prepare(request))
        check_status(data)
        return aggregate_route(data)

    async def fetch_route(self, request: RouteRequest) -> RouteResult:
        """
        Fetch, validate and aggregate one route.

        Raises
        ------
        ServiceError, NoRouteFound, TransportError
        """
        prepared = self.prepare(request)
        data = await asyncio.to_thread(self.fetch_json, prepared)
        check_status(data)
        return aggregate_route(data)


__all__ = ["DirectionsClient", "DirectionsConfig", "check_status"]
