# directions/route/common.py
# -*- coding: utf-8 -*-
"""
Common pieces for the directions client stack:
- Error classes
- Standardized logging helpers
- DirectionsConfig (API key, timeouts, retries, user agent)

This module is "pure infra" — it does not perform HTTP calls; the HTTP logic
lives in directions/route/client.py. Keep this module side-effect free (no
init_logging here); the entry points should call init_logging().
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional, Tuple

from directions.infra.logging import get_logger

# ────────────────────────────────────────────────────────────────────────────────
# Errors
# ────────────────────────────────────────────────────────────────────────────────

class DirectionsError(Exception):
    """Base class for every failure of a resolution attempt."""

    kind = "DirectionsError"


class MissingInput(DirectionsError):
    """Origin or destination is absent; the attempt is skipped."""

    kind = "MissingInput"


class ServiceError(DirectionsError):
    """The service answered with a status other than "OK"."""

    kind = "ServiceError"

    def __init__(self, message: Optional[str] = None, status: Optional[str] = None) -> None:
        self.message = message or "Unknown error"
        self.status = status
        super().__init__(self.message)


class NoRouteFound(DirectionsError):
    """The service found no route between the given points."""

    kind = "NoRouteFound"


class TransportError(DirectionsError):
    """Network failure, or a body that is not a usable directions response."""

    kind = "TransportError"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


# ────────────────────────────────────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────────────────────────────────────

_log = get_logger(__name__)

def _short(v: Any, maxlen: int = 420) -> str:
    """
    Safe, concise preview of a Python object. Useful in logs.
    """
    try:
        s = json.dumps(v, ensure_ascii=False, sort_keys=True, default=str)
    except (TypeError, ValueError):
        s = str(v)
    return s if len(s) <= maxlen else (s[:maxlen] + " …")


def _extract_error_text(resp) -> str:
    """
    Best-effort extraction of a human-friendly error from a HTTP response.
    """
    try:
        j = resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:500]
    return _short(j) if isinstance(j, dict) else str(j)


# ────────────────────────────────────────────────────────────────────────────────
# Config
# ────────────────────────────────────────────────────────────────────────────────

class DirectionsConfig:
    """
    Configuration bundle for the directions HTTP client.

    Parameters
    ----------
    api_key : str | None
        If None, reads env DIRECTIONS_API_KEY, then GOOGLE_MAPS_API_KEY.
        May stay empty: callers that supply their own request (custom
        base_url) carry the credential themselves.
    connect_timeout_s : float
        TCP connect timeout (seconds).
    read_timeout_s : float
        Response/read timeout (seconds).
    max_retries : int
        HTTP retries for transient statuses. 0 means one attempt per call.
    backoff_s : float
        Base backoff (seconds) between retries.
    user_agent : str
        Sent as User-Agent.
    """
    def __init__(
        self,
        api_key: str | None = None,
        connect_timeout_s: float = 8.0,
        read_timeout_s: float = 30.0,
        max_retries: int = 0,
        backoff_s: float = 0.0,
        user_agent: str = "map-directions/0.1",
    ) -> None:
        self.api_key = (
            api_key
            or os.getenv("DIRECTIONS_API_KEY")
            or os.getenv("GOOGLE_MAPS_API_KEY")
            or ""
        ).strip()
        self.connect_timeout_s = float(connect_timeout_s)
        self.read_timeout_s = float(read_timeout_s)
        self.max_retries = int(max_retries)
        self.backoff_s = float(backoff_s)
        self.user_agent = str(user_agent)

        if not self.api_key:
            _log.warning("DirectionsConfig init: no API key (DIRECTIONS_API_KEY unset)")

        # Never log the key itself
        _log.debug(
            "DirectionsConfig init: timeouts=(%.1f,%.1f)s retries=%s backoff=%.2fs ua=%s",
            self.connect_timeout_s,
            self.read_timeout_s,
            self.max_retries,
            self.backoff_s,
            self.user_agent,
        )

    @property
    def timeouts(self) -> Tuple[float, float]:
        """Return (connect_timeout_s, read_timeout_s) for requests."""
        return (self.connect_timeout_s, self.read_timeout_s)
