# directions/core/config.py
# -*- coding: utf-8 -*-

"""
Core configuration models and globals.

This module centralizes *pure* configuration structures that are
independent of any specific infrastructure (HTTP client, logging, etc.).

It is meant to be safe to import from anywhere.

Current contents
----------------
- DirectionsDefaults: defaults applied to every directions request
"""

from __future__ import annotations

from dataclasses import dataclass

from directions.core.models import TravelMode


GOOGLE_DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"


@dataclass(frozen=True)
class DirectionsDefaults:
    """
    Defaults used when the caller leaves an input unset.

    Attributes
    ----------
    mode : TravelMode
        Travel mode (DRIVING).
    language : str
        Language of textual fields in the response ("en").
    base_url : str
        Directions endpoint.
    reset_on_change : bool
        Whether the controller clears the current route while a new one is
        being fetched.
    optimize_waypoints : bool
        Whether the service may reorder intermediate waypoints.
    """

    mode: TravelMode = TravelMode.DRIVING
    language: str = "en"
    base_url: str = GOOGLE_DIRECTIONS_URL
    reset_on_change: bool = True
    optimize_waypoints: bool = False


# Global, immutable configuration object used as defaults.
DIRECTIONS_DEFAULTS = DirectionsDefaults()


def get_directions_defaults() -> DirectionsDefaults:
    """
    Return the global directions defaults.

    Provided as a function in case this ever needs to become dynamic
    (e.g. loaded from a file or environment variables) without changing
    call sites.
    """
    return DIRECTIONS_DEFAULTS
