# directions/core/types.py
# -*- coding: utf-8 -*-

"""
Shared type aliases and lightweight protocols.

Contents
--------
- AnyMapping: read-only view of a decoded response (routes, legs, steps)
- HasLatLng: Protocol for objects exposing `latitude` / `longitude`
- LocationSpec: what callers may pass as origin, destination or waypoint
"""

from __future__ import annotations

from typing import (
      Any
    , Mapping
    , Protocol
    , Union
    , runtime_checkable
)


# Directions responses, step metadata, etc.
AnyMapping = Mapping[str, Any]


# ────────────────────────────────────────────────────────────────────────────────
# Locations
# ────────────────────────────────────────────────────────────────────────────────

@runtime_checkable
class HasLatLng(Protocol):
    """
    Protocol for objects that expose `latitude` and `longitude` attributes.

    `LatLng` satisfies it, but so does any caller-owned structure with the
    same attribute names.
    """

    latitude: float
    longitude: float


LocationSpec = Union[str, HasLatLng, Mapping[str, Any]]
"""Coordinate pair (object or mapping) or an opaque place string."""
