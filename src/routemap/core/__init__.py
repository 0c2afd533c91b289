"""Core runtime aggregator (source of truth).

Purpose: expose the runtime building blocks from a single module. No extra
logic beyond imports/exports.

- ``segments`` → ``match_pattern``, ``NO_MATCH``
- ``errors`` → ``RouteMapError``, ``InvalidSegment``, ``InvalidHandler``
- ``route_map`` → ``RouteMap``
"""

from .errors import InvalidHandler, InvalidSegment, RouteMapError
from .route_map import RouteMap
from .segments import NO_MATCH, match_pattern

__all__ = [
    "InvalidHandler",
    "InvalidSegment",
    "NO_MATCH",
    "RouteMap",
    "RouteMapError",
    "match_pattern",
]
