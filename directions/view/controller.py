# directions/view/controller.py
# -*- coding: utf-8 -*-
"""
Lifecycle controller for a directions overlay.

The controller owns the observable state of one overlay (current route or
nothing), decides when new inputs warrant a new resolution, and reports
progress through the on_start / on_ready / on_error callbacks.

Typical host usage
------------------
    ctrl = DirectionsController(on_ready=show_eta)
    await ctrl.mount(props)          # first resolution
    await ctrl.update(new_props)     # re-resolves only if the route inputs changed
    overlay = ctrl.render()          # None while idle
    ctrl.unmount()                   # late results are ignored from here on

Concurrency notes
-----------------
• Overlapping attempts are neither de-duplicated nor cancelled. Whichever
  completes last defines the state.
• unmount() does not abort the HTTP call; it invalidates the token the
  attempt captured, so the result is dropped on arrival.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from directions.core.config import get_directions_defaults
from directions.core.models import (
      LatLng
    , PolylineOverlay
    , RouteResult
    , StartEvent
    , TravelMode
)
from directions.core.types import LocationSpec
from directions.infra.logging import get_logger
from directions.route.client import DirectionsClient
from directions.route.common import DirectionsError, MissingInput
from directions.route.request import build_request, start_event

_log = get_logger(__name__)

_DEFAULTS = get_directions_defaults()


class ResolutionState(str, Enum):
    IDLE = "IDLE"
    HAS_ROUTE = "HAS_ROUTE"


class CancellationToken:
    """Shared flag captured by every attempt started while it is valid."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass(frozen=True)
class DirectionsProps:
    """
    Inputs of one overlay.

    Only origin, destination, waypoints and mode decide whether a change
    triggers a new resolution (see `route_key`). `polyline_options` is
    handed untouched to the display layer.
    """

    origin: Optional[LocationSpec]
    destination: Optional[LocationSpec]
    api_key: str = ""
    waypoints: Optional[Sequence[LocationSpec]] = None
    mode: Union[TravelMode, str] = _DEFAULTS.mode
    language: str = _DEFAULTS.language
    region: Optional[str] = None
    reset_on_change: bool = _DEFAULTS.reset_on_change
    optimize_waypoints: bool = _DEFAULTS.optimize_waypoints
    base_url: Any = None
    polyline_options: Mapping[str, Any] = field(default_factory=dict)

    def route_key(self) -> Tuple[Any, Any, Any, Any]:
        """Values compared by deep equality between two sets of props."""
        waypoints = list(self.waypoints) if self.waypoints is not None else None
        return (self.origin, self.destination, waypoints, self.mode)


class DirectionsController:
    """
    Parameters
    ----------
    client : DirectionsClient | None
        HTTP client; a default one is created lazily.
    on_start : callable(StartEvent) | None
        Fired right before each network call. Never fired for skipped
        attempts (missing origin/destination).
    on_ready : callable(RouteResult) | None
    on_error : callable(DirectionsError) | None
    logger : logging.Logger | None
        Where warnings and progress go; defaults to this module's logger.
    """

    def __init__(
        self,
        client: DirectionsClient | None = None,
        *,
        on_start: Optional[Callable[[StartEvent], Any]] = None,
        on_ready: Optional[Callable[[RouteResult], Any]] = None,
        on_error: Optional[Callable[[DirectionsError], Any]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._client = client
        self._on_start = on_start
        self._on_ready = on_ready
        self._on_error = on_error
        self._log = logger or _log

        self._token = CancellationToken()
        self._props: Optional[DirectionsProps] = None
        self._prev_key: Optional[Tuple[Any, Any, Any, Any]] = None
        self._result: Optional[RouteResult] = None

    # ────────────────────────────────────────────────────────────────────────
    # Read-only snapshot
    # ────────────────────────────────────────────────────────────────────────
    @property
    def state(self) -> ResolutionState:
        return ResolutionState.HAS_ROUTE if self._result is not None else ResolutionState.IDLE

    @property
    def result(self) -> Optional[RouteResult]:
        return self._result

    @property
    def coordinates(self) -> Optional[Tuple[LatLng, ...]]:
        return self._result.coordinates if self._result is not None else None

    @property
    def distance_km(self) -> Optional[float]:
        return self._result.distance_km if self._result is not None else None

    @property
    def duration_min(self) -> Optional[float]:
        return self._result.duration_min if self._result is not None else None

    @property
    def mounted(self) -> bool:
        return not self._token.cancelled

    def render(self) -> Optional[PolylineOverlay]:
        """Drawable path for the display layer, or None while idle."""
        if self._result is None:
            return None
        options = dict(self._props.polyline_options) if self._props is not None else {}
        return PolylineOverlay(coordinates=self._result.coordinates, options=options)

    # ────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ────────────────────────────────────────────────────────────────────────
    async def mount(self, props: DirectionsProps) -> Optional[RouteResult]:
        """Start a fresh lifecycle and resolve the initial props."""
        self._token.cancel()
        self._token = CancellationToken()
        return await self.resolve(props)

    async def update(self, props: DirectionsProps) -> Optional[RouteResult]:
        """
        Re-resolve if origin, destination, waypoints or mode changed.

        Returns None without doing anything when they did not. Unless
        `props.reset_on_change` is False the current route is cleared before
        the new attempt starts.
        """
        if self._token.cancelled:
            self._log.debug("UPDATE ignored: unmounted")
            return None

        prev_key = self._prev_key
        self._accept(props)
        if prev_key is not None and prev_key == self._prev_key:
            return None

        if props.reset_on_change is not False:
            self._reset(self._token)
        return await self.resolve(props)

    def unmount(self) -> None:
        """
        Stop applying results; in-flight attempts are dropped on arrival and
        update()/resolve() do nothing until the next mount().
        """
        self._token.cancel()
        self._log.debug("UNMOUNT: further results will be discarded")

    # ────────────────────────────────────────────────────────────────────────
    # Resolution
    # ────────────────────────────────────────────────────────────────────────
    def _get_client(self) -> DirectionsClient:
        if self._client is None:
            self._client = DirectionsClient()
        return self._client

    def _accept(self, props: DirectionsProps) -> None:
        # Snapshot: hosts may mutate their lists/dicts in place between calls
        self._props = props
        self._prev_key = copy.deepcopy(props.route_key())

    def _reset(self, token: CancellationToken) -> None:
        if not token.cancelled:
            self._result = None

    async def resolve(self, props: DirectionsProps) -> Optional[RouteResult]:
        """
        Run one resolution attempt for `props`.

        Returns the RouteResult that was applied, or None when the attempt
        was skipped, failed, or finished after unmount().
        """
        token = self._token
        if token.cancelled:
            self._log.debug("RESOLVE ignored: unmounted")
            return None
        self._accept(props)
        client = self._get_client()

        try:
            request = build_request(
                  props.origin
                , props.destination
                , props.waypoints
                , api_key=(props.api_key or client.cfg.api_key)
                , mode=props.mode
                , language=props.language
                , region=props.region
                , optimize_waypoints=props.optimize_waypoints
                , base_url=props.base_url
            )
        except MissingInput:
            self._log.debug("RESOLVE skipped: origin or destination missing")
            return None

        if self._on_start is not None:
            self._on_start(start_event(request))

        try:
            result = await client.fetch_route(request)
        except DirectionsError as e:
            if token.cancelled:
                self._log.debug("RESOLVE %s after unmount discarded", e.kind)
                return None
            self._reset(token)
            self._log.warning("Directions error: %s: %s", e.kind, e)
            if self._on_error is not None:
                self._on_error(e)
            return None

        if token.cancelled:
            self._log.debug("RESOLVE result after unmount discarded")
            return None

        self._result = result
        self._log.info(
            "RESOLVE ok mode=%s points=%s dist=%.3fkm dur=%.2fmin",
            request.mode.value, len(result.coordinates), result.distance_km, result.duration_min
        )
        if self._on_ready is not None:
            self._on_ready(result)
        return result
