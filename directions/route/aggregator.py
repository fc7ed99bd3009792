# directions/route/aggregator.py
# -*- coding: utf-8 -*-
"""
Turn a successful directions response into a RouteResult.

Only the first route is used. The service may return alternates, but this
project draws a single path; callers that need alternates must ask for them
some other way.
"""

from __future__ import annotations

from typing import Any, List

from directions.core.models import LatLng, RouteResult, StepWaypoint
from directions.core.types import AnyMapping
from directions.infra.logging import get_logger
from .common import NoRouteFound, TransportError
from .polyline import decode_polyline

_log = get_logger(__name__)


def aggregate_route(payload: AnyMapping) -> RouteResult:
    """
    Flatten legs → steps of `routes[0]` into a single path plus totals.

    - coordinates: every decoded point of every step, in order (points
      repeated at step boundaries are kept)
    - waypoints: one {distance, end_location} record per step
    - distance_km / duration_min: summed over *legs*
    - fare: copied through (None when absent)

    Raises
    ------
    NoRouteFound
        If the route list is empty.
    TransportError
        If the route tree lacks the expected keys.
    """
    routes = payload.get("routes") or []
    if not routes:
        raise NoRouteFound()

    route = routes[0]
    try:
        legs = route["legs"]
        coords: List[LatLng] = []
        waypoints: List[StepWaypoint] = []
        for leg in legs:
            for step in leg["steps"]:
                coords.extend(decode_polyline(step["polyline"]["points"]))
                waypoints.append(
                    StepWaypoint(distance=step.get("distance"), end_location=step.get("end_location"))
                )

        distance_m = sum(leg["distance"]["value"] for leg in legs)
        duration_s = sum(leg["duration"]["value"] for leg in legs)
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"Malformed directions route: {type(e).__name__}: {e}", cause=e) from e

    fare: Any = route.get("fare")
    result = RouteResult(
          coordinates=tuple(coords)
        , distance_km=distance_m / 1000
        , duration_min=duration_s / 60
        , waypoints=tuple(waypoints)
        , fare=fare
    )
    _log.debug(
        "AGGREGATE legs=%s steps=%s points=%s dist=%.3fkm dur=%.2fmin",
        len(legs), len(waypoints), len(coords), result.distance_km, result.duration_min
    )
    return result
