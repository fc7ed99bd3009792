# directions/route/request.py
# -*- coding: utf-8 -*-
"""
Build directions requests from caller inputs.

Flow
----
    build_request(origin, destination, waypoints, ...)  -> RouteRequest
    start_event(request)                                -> StartEvent (for on_start)
    prepare_request(request)                            -> requests.PreparedRequest

`base_url` is normally the endpoint URL, in which case the default query
string is assembled. Callers may instead pass a `requests.Request`, a
`requests.PreparedRequest`, or a callable taking the RouteRequest; these are
used as-is and the default query assembly is skipped.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import requests

from directions.addressing.coords import to_location_token
from directions.core.config import get_directions_defaults
from directions.core.models import RouteRequest, StartEvent, TravelMode
from directions.core.types import LocationSpec
from directions.infra.logging import get_logger
from .common import MissingInput, _short

_log = get_logger(__name__)

OPTIMIZE_PREFIX = "optimize:true|"


def build_waypoints_param(
    waypoints: Optional[Sequence[LocationSpec]],
    optimize: bool = False,
) -> str:
    """
    Join normalized waypoints with '|'.

    With `optimize=True` the literal 'optimize:true|' is prepended even when
    there are no waypoints.
    """
    if not waypoints:
        joined = ""
    else:
        joined = "|".join(str(to_location_token(w)) for w in waypoints)
    if optimize:
        joined = f"{OPTIMIZE_PREFIX}{joined}"
    return joined


def build_request(
    origin: Optional[LocationSpec],
    destination: Optional[LocationSpec],
    waypoints: Optional[Sequence[LocationSpec]] = None,
    *,
    api_key: str = "",
    mode: Union[TravelMode, str, None] = None,
    language: Optional[str] = None,
    region: Optional[str] = None,
    optimize_waypoints: Optional[bool] = None,
    base_url: Any = None,
) -> RouteRequest:
    """
    Assemble a RouteRequest; unset inputs take `DirectionsDefaults`.

    Raises
    ------
    MissingInput
        If origin or destination is absent.
    """
    if not origin or not destination:
        raise MissingInput("origin and destination are required")

    defaults = get_directions_defaults()
    optimize = defaults.optimize_waypoints if optimize_waypoints is None else bool(optimize_waypoints)

    req = RouteRequest(
          origin=str(to_location_token(origin))
        , destination=str(to_location_token(destination))
        , waypoints=build_waypoints_param(waypoints, optimize)
        , mode=TravelMode.coerce(mode or defaults.mode)
        , language=language or defaults.language
        , region=region
        , optimize_waypoints=optimize
        , api_key=api_key
        , base_url=defaults.base_url if base_url is None else base_url
    )
    _log.debug(
        "BUILD origin=%s destination=%s waypoints=%s mode=%s",
        _short(req.origin), _short(req.destination), _short(req.waypoints), req.mode.value
    )
    return req


def start_event(request: RouteRequest) -> StartEvent:
    return StartEvent(
          origin=request.origin
        , destination=request.destination
        , waypoints=request.waypoint_list()
    )


def _as_prepared(value: Any) -> requests.PreparedRequest:
    if isinstance(value, requests.PreparedRequest):
        return value
    if isinstance(value, requests.Request):
        return value.prepare()
    if isinstance(value, str):
        return requests.Request("GET", value).prepare()
    raise TypeError(
        f"Custom request must be a URL, requests.Request or PreparedRequest; got {type(value).__name__}"
    )


def prepare_request(request: RouteRequest) -> requests.PreparedRequest:
    """
    Turn a RouteRequest into something the HTTP session can send.

    Only a plain string base_url gets the default query parameters.
    """
    base = request.base_url
    if isinstance(base, str):
        return requests.Request("GET", base, params=request.to_params()).prepare()
    if callable(base):
        return _as_prepared(base(request))
    return _as_prepared(base)
