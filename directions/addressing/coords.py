# directions/addressing/coords.py
# -*- coding: utf-8 -*-

"""
Coordinate helpers for building directions requests.

A location reaches the request builder either as a coordinate pair (a
`LatLng`, any object with `latitude`/`longitude`, or a mapping with those
keys) or as an opaque place string. Coordinate pairs become "lat,lng"
tokens; everything else is passed through untouched, so a bad place name
only shows up as a service error downstream.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Tuple


def _latlng_of(location: Any) -> Tuple[Optional[Any], Optional[Any]]:
    """Read (latitude, longitude) from a mapping or an attribute holder."""
    if isinstance(location, Mapping):
        return location.get("latitude"), location.get("longitude")
    return getattr(location, "latitude", None), getattr(location, "longitude", None)


def _fmt_number(value: Any) -> str:
    # 1.0 -> "1", 52.5219 -> "52.5219", 5e-05 -> "0.00005" (never rounded)
    if not isinstance(value, float):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def has_latlng(location: Any) -> bool:
    """
    True when both coordinates are present *and truthy*.

    A coordinate of exactly 0 therefore does not count as a pair; such a
    location falls through to the pass-through branch of
    `to_location_token`.
    """
    if isinstance(location, str):
        return False
    lat, lng = _latlng_of(location)
    return bool(lat) and bool(lng)


def to_location_token(location: Any) -> Any:
    """
    Normalize a location to the token the directions service expects.

    >>> to_location_token({"latitude": 37.7749, "longitude": -122.4194})
    '37.7749,-122.4194'
    >>> to_location_token("Golden Gate Bridge")
    'Golden Gate Bridge'
    """
    if has_latlng(location):
        lat, lng = _latlng_of(location)
        return f"{_fmt_number(lat)},{_fmt_number(lng)}"
    return location
