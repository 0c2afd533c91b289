"""Exceptions raised by the route map (source of truth).

Two precondition failures exist, both raised synchronously to the direct
caller and never caught internally:

- ``InvalidSegment``: empty literal, literal containing ``/``, dynamic regex
  containing ``/``, or a path whose joined pattern fails to compile at bind.
- ``InvalidHandler``: ``bind`` received something that is not callable.

Both derive from ``RouteMapError`` and from the builtin exception a plain
``except ValueError`` / ``except TypeError`` would expect.
"""

from __future__ import annotations

__all__ = ["RouteMapError", "InvalidSegment", "InvalidHandler"]


class RouteMapError(Exception):
    """Base class for route map errors."""


class InvalidSegment(RouteMapError, ValueError):
    """A path segment cannot be used to build a route pattern."""


class InvalidHandler(RouteMapError, TypeError):
    """The value given to ``bind`` is not callable."""
