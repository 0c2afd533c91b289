"""Route map runtime (source of truth).

If this file vanished, rebuild it from this description. The module exposes a
single class, :class:`RouteMap`, which accumulates path segments, binds
handlers to the compiled whole-path pattern and dispatches request paths to
the first matching route.

State and slots
---------------
- ``_path``: list of compiled segment fragments, in order.
- ``_routes``: pattern string → handler, insertion ordered.
- ``_compiled``: pattern string → compiled ``re.Pattern``, filled at bind.

Path building
-------------
``append(pattern)`` splits on ``/`` and skips empty tokens. ``<name>`` and
``<name:regex>`` delegate to ``append_dynamic``; other tokens to
``append_literal``. Both compile one segment via ``routemap.core.segments``
and raise ``InvalidSegment`` on a bad value. ``back(count=1)`` pops at most
``count`` segments and never fails; ``flush()`` empties the path. Every
builder method returns ``self``.

Binding
-------
``bind(handler)`` raises ``InvalidHandler`` for non-callables, joins the
current path as ``^/<joined>$`` and compiles it. ``re.error`` surfaces as
``InvalidSegment`` (a bad group name from ``<1abc>`` is only caught here).
The path is left untouched so prefixes can be shared between binds.
Re-binding a pattern replaces its handler in place; dispatch order is kept.

Matching and dispatch
---------------------
- ``match(path, pattern)`` is the pure helper ``match_pattern``: named
  captures only, or ``NO_MATCH``.
- ``route(path)`` calls the handler of the first route (insertion order)
  whose pattern matches, passing the parameter mapping as its only argument,
  and returns the result unchanged. ``NO_MATCH`` when nothing matches.

Invariants
----------
- Dispatch order equals first-bind order of each pattern.
- Matching never mutates state; only builder methods and ``bind`` do.
- Instances are not safe for concurrent mutation.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from routemap.core.errors import InvalidHandler, InvalidSegment
from routemap.core.segments import (
    NO_MATCH,
    compile_path,
    dynamic_segment,
    literal_segment,
    match_pattern,
    split_pattern,
)

__all__ = ["RouteMap"]

logger = logging.getLogger("routemap")

Handler = Callable[[Dict[str, str]], Any]


class RouteMap:
    """Route builder and first-match dispatcher."""

    __slots__ = ("_path", "_routes", "_compiled")

    def __init__(self) -> None:
        self._path: List[str] = []
        self._routes: Dict[str, Handler] = {}
        self._compiled: Dict[str, "re.Pattern[str]"] = {}

    # ------------------------------------------------------------------
    # Path building
    # ------------------------------------------------------------------
    def append(self, pattern: str) -> "RouteMap":
        """Append one or more ``/``-separated segments to the path.

        ``foo`` is a literal segment, ``<name>`` a dynamic one matching up to
        the next slash, ``<name:regex>`` a dynamic one constrained by
        ``regex``. Empty segments are skipped.
        """
        for kind, args in split_pattern(pattern):
            if kind == "dynamic":
                self.append_dynamic(*args)
            else:
                self.append_literal(*args)
        return self

    def append_literal(self, value: str) -> "RouteMap":
        """Append a literal segment; every character but ``/`` is allowed.

        Raises:
            InvalidSegment: when ``value`` is empty or contains ``/``.
        """
        self._path.append(literal_segment(value))
        return self

    def append_dynamic(self, name: str, regex: Optional[str] = None) -> "RouteMap":
        """Append a named capture segment.

        Raises:
            InvalidSegment: when ``regex`` contains ``/``.
        """
        self._path.append(dynamic_segment(name, regex))
        return self

    def back(self, count: int = 1) -> "RouteMap":
        """Remove up to ``count`` trailing segments."""
        if count > 0:
            del self._path[-count:]
        return self

    def flush(self) -> "RouteMap":
        self._path.clear()
        return self

    # ------------------------------------------------------------------
    # Binding and dispatch
    # ------------------------------------------------------------------
    def bind(self, handler: Handler) -> "RouteMap":
        """Bind ``handler`` to the pattern compiled from the current path.

        Raises:
            InvalidHandler: when ``handler`` is not callable.
            InvalidSegment: when the joined pattern does not compile.
        """
        if not callable(handler):
            raise InvalidHandler(f"Invalid handler: {handler!r}")

        pattern = self.pattern
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise InvalidSegment(f"Cannot compile {pattern!r}: {exc}") from exc

        if pattern in self._routes:
            logger.debug(f"rebinding {pattern}")
        self._compiled[pattern] = compiled
        self._routes[pattern] = handler
        return self

    @staticmethod
    def match(path: str, pattern: Union[str, "re.Pattern[str]"]) -> Any:
        """Return the named captures of ``pattern`` in ``path``, or ``NO_MATCH``."""
        return match_pattern(path, pattern)

    def route(self, path: str) -> Any:
        """Call the handler of the first route matching ``path``.

        The handler receives the parameter mapping as its only argument and
        its result is returned unchanged. Returns ``NO_MATCH`` otherwise.
        """
        for pattern, handler in self._routes.items():
            params = match_pattern(path, self._compiled[pattern])
            if params is not NO_MATCH:
                logger.debug(f"{path!r} matched {pattern}")
                return handler(params)
        logger.debug(f"{path!r} matched no route")
        return NO_MATCH

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def path(self) -> Tuple[str, ...]:
        return tuple(self._path)

    @property
    def pattern(self) -> str:
        """Pattern that ``bind`` would compile from the current path."""
        return compile_path(self._path)

    @property
    def routes(self) -> Dict[str, Handler]:
        return dict(self._routes)
