from __future__ import annotations

# ── models ──────────────────────────────────────────────────────────────────────
from .core.models import (
      LatLng
    , TravelMode
    , RouteRequest
    , RouteResult
    , StepWaypoint
    , StartEvent
    , PolylineOverlay
)

# ── errors / config ─────────────────────────────────────────────────────────────
from .route.common import (
      DirectionsConfig
    , DirectionsError
    , MissingInput
    , ServiceError
    , NoRouteFound
    , TransportError
)

# ── pipeline ────────────────────────────────────────────────────────────────────
from .addressing.coords import to_location_token
from .route.polyline import decode_polyline
from .route.aggregator import aggregate_route
from .route.request import build_request, build_waypoints_param, prepare_request
from .route.client import DirectionsClient
from .view.controller import (
      CancellationToken
    , DirectionsController
    , DirectionsProps
    , ResolutionState
)

__all__ = [
    # models
      "LatLng", "TravelMode", "RouteRequest", "RouteResult", "StepWaypoint",
      "StartEvent", "PolylineOverlay",
    # errors / config
      "DirectionsConfig", "DirectionsError", "MissingInput", "ServiceError",
      "NoRouteFound", "TransportError",
    # pipeline
      "to_location_token", "decode_polyline", "aggregate_route",
      "build_request", "build_waypoints_param", "prepare_request",
      "DirectionsClient",
      "CancellationToken", "DirectionsController", "DirectionsProps", "ResolutionState",
]
