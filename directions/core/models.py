# directions/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses).

These are small, shared structures used across the project:
    - LatLng: a geographic coordinate in decimal degrees
    - TravelMode: the travel modes the directions service understands
    - RouteRequest: one fully-built request descriptor
    - StepWaypoint: per-step metadata copied from the response
    - RouteResult: the aggregated outcome of one resolution attempt
    - StartEvent: payload of the `on_start` callback
    - PolylineOverlay: what the display layer receives to draw the path

This module deliberately has:
    - no HTTP imports
    - no logging side effects

It is safe to import from anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


# ────────────────────────────────────────────────────────────────────────────────
# Basic geographic point
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LatLng:
    """
    A geographic coordinate.

    Attributes
    ----------
    latitude : float
        Latitude in decimal degrees.
    longitude : float
        Longitude in decimal degrees.
    """

    latitude: float
    longitude: float

    def as_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


# ────────────────────────────────────────────────────────────────────────────────
# Travel mode
# ────────────────────────────────────────────────────────────────────────────────

class TravelMode(str, Enum):
    DRIVING = "DRIVING"
    BICYCLING = "BICYCLING"
    TRANSIT = "TRANSIT"
    WALKING = "WALKING"

    @classmethod
    def coerce(cls, value: Union["TravelMode", str]) -> "TravelMode":
        """Accept an enum member or any-case string ('walking', 'WALKING')."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unsupported travel mode {value!r}; expected one of "
                f"{', '.join(m.value for m in cls)}"
            ) from None

    @property
    def wire(self) -> str:
        """Lower-case token sent to the directions service."""
        return self.value.lower()


# ────────────────────────────────────────────────────────────────────────────────
# Request descriptor
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RouteRequest:
    """
    A single, ready-to-dispatch directions request.

    `origin`, `destination` and `waypoints` are already normalized string
    tokens; `waypoints` is the `|`-joined value (possibly empty, possibly
    carrying the `optimize:true|` prefix).

    `base_url` is either the endpoint URL or a caller-supplied request
    (see `directions.route.request.prepare_request`).
    """

    origin: str
    destination: str
    waypoints: str
    mode: TravelMode
    language: str
    region: Optional[str]
    optimize_waypoints: bool
    api_key: str
    base_url: Any

    def waypoint_list(self) -> List[str]:
        return self.waypoints.split("|") if self.waypoints else []

    def to_params(self) -> Dict[str, Optional[str]]:
        """
        Query parameters in wire order. `region` stays None when unset and
        is then dropped by requests when the URL is encoded.
        """
        return {
              "origin": self.origin
            , "waypoints": self.waypoints
            , "destination": self.destination
            , "key": self.api_key
            , "mode": self.mode.wire
            , "language": self.language
            , "region": self.region
        }


@dataclass(frozen=True)
class StartEvent:
    """Payload handed to `on_start` right before the network call."""

    origin: str
    destination: str
    waypoints: List[str] = field(default_factory=list)


# ────────────────────────────────────────────────────────────────────────────────
# Results
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StepWaypoint:
    """
    Metadata of one route step, copied verbatim from the response.

    Attributes
    ----------
    distance : Any
        The step's `distance` object (typically {"text": ..., "value": meters}).
    end_location : Any
        The step's `end_location` object (typically {"lat": ..., "lng": ...}).
    """

    distance: Any
    end_location: Any


@dataclass(frozen=True)
class RouteResult:
    """
    Aggregated route for one resolution attempt.

    Built in one go by the aggregator: either every field is populated from
    the same response, or no RouteResult exists at all.

    Attributes
    ----------
    coordinates : tuple[LatLng, ...]
        Flat path over all steps of all legs, in order. Points shared by
        adjacent steps appear twice.
    distance_km : float
        Sum of leg distances, in kilometers.
    duration_min : float
        Sum of leg durations, in minutes.
    waypoints : tuple[StepWaypoint, ...]
        One record per step.
    fare : Any | None
        The route's `fare` object when the service provides one (transit).
    """

    coordinates: Tuple[LatLng, ...]
    distance_km: float
    duration_min: float
    waypoints: Tuple[StepWaypoint, ...] = ()
    fare: Optional[Any] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
              "distance_km": self.distance_km
            , "duration_min": self.duration_min
            , "coordinates": [c.as_dict() for c in self.coordinates]
            , "waypoints": [
                {"distance": w.distance, "end_location": w.end_location}
                for w in self.waypoints
            ]
            , "fare": self.fare
        }


@dataclass(frozen=True)
class PolylineOverlay:
    """
    Drawable path for the map display.

    `options` are pass-through styling props (stroke width, colour, ...);
    this project never interprets them.
    """

    coordinates: Tuple[LatLng, ...]
    options: Dict[str, Any] = field(default_factory=dict)
