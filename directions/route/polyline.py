# directions/route/polyline.py
# -*- coding: utf-8 -*-
"""
Decoder for the encoded polyline format used by the directions service.

Each coordinate is stored as the signed delta from the previous one,
multiplied by 10**precision, zig-zag encoded and written as 5-bit chunks
offset by 63 (continuation bit 0x20).
"""

from __future__ import annotations

from typing import List, Tuple

from directions.core.models import LatLng


def _read_value(encoded: str, index: int) -> Tuple[int, int]:
    """Read one zig-zag varint starting at `index`; return (value, next_index)."""
    result, shift = 0, 0
    while True:
        if index >= len(encoded):
            raise ValueError(f"Truncated polyline at position {index}")
        b = ord(encoded[index]) - 63
        index += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if b < 0x20:
            break
    value = ~(result >> 1) if (result & 1) else (result >> 1)
    return value, index


def decode_polyline(encoded: str, precision: int = 5) -> List[LatLng]:
    """
    Decode an encoded polyline into coordinates.

    >>> decode_polyline("_p~iF~ps|U_ulLnnqC_mqNvxq`@")
    [LatLng(latitude=38.5, longitude=-120.2), LatLng(latitude=40.7, longitude=-120.95), LatLng(latitude=43.252, longitude=-126.453)]
    """
    factor = 10 ** precision
    points: List[LatLng] = []
    index = lat = lng = 0
    while index < len(encoded):
        dlat, index = _read_value(encoded, index)
        dlng, index = _read_value(encoded, index)
        lat += dlat
        lng += dlng
        points.append(LatLng(latitude=lat / factor, longitude=lng / factor))
    return points
