"""routemap public API surface (source of truth).

- Public exports: ``RouteMap``, ``match_pattern``, ``NO_MATCH`` and the
  exceptions ``RouteMapError``, ``InvalidSegment``, ``InvalidHandler``.
- Import must stay lightweight: no map instantiation.
- Version string lives here as ``__version__`` for packaging tools.
"""

__version__ = "1.0.0b1"

from .core import (
    NO_MATCH,
    InvalidHandler,
    InvalidSegment,
    RouteMap,
    RouteMapError,
    match_pattern,
)

__all__ = [
    "InvalidHandler",
    "InvalidSegment",
    "NO_MATCH",
    "RouteMap",
    "RouteMapError",
    "match_pattern",
]
