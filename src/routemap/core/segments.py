"""Segment compilation helpers (source of truth).

Pure functions shared by the map runtime; nothing here holds state.

- ``literal_segment(value)`` escapes every regex metacharacter with
  ``re.escape``. Python patterns carry no delimiter, so the escaped text stays
  literal wherever it is embedded.
- ``dynamic_segment(name, regex=None)`` returns ``(?P<name>regex)``; a falsy
  ``regex`` becomes ``DEFAULT_REGEX`` (one or more non-slash characters).
- ``split_pattern(pattern)`` yields ``(kind, args)`` tuples for each non-empty
  ``/``-separated token: ``("dynamic", (name, regex))`` for ``<name>`` and
  ``<name:regex>`` (split on the first colon), ``("literal", (token,))``
  otherwise.
- ``compile_path(segments)`` joins fragments with ``/`` and anchors the result
  as ``^/<joined>$``.
- ``match_pattern(path, pattern)`` searches ``path`` with ``pattern`` (string
  or compiled) and returns only named captures, or ``NO_MATCH``.

``NO_MATCH`` is a falsy singleton distinct from ``{}`` and ``None`` so that
"matched with no parameters" and "handler returned None" stay distinguishable
from "nothing matched".
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from .errors import InvalidSegment

__all__ = [
    "DEFAULT_REGEX",
    "NO_MATCH",
    "SEPARATOR",
    "compile_path",
    "dynamic_segment",
    "literal_segment",
    "match_pattern",
    "split_pattern",
]

SEPARATOR = "/"
DEFAULT_REGEX = "[^/]+"


class _NoMatch:
    __slots__ = ()
    _instance = None

    def __new__(cls) -> "_NoMatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __reduce__(self) -> str:
        return "NO_MATCH"


NO_MATCH = _NoMatch()


def literal_segment(value: str) -> str:
    """Return ``value`` escaped for literal matching."""
    if not value:
        raise InvalidSegment("Value is empty")
    if SEPARATOR in value:
        raise InvalidSegment(f"Value contains a forward slash: {value!r}")
    return re.escape(value)


def dynamic_segment(name: str, regex: Optional[str] = None) -> str:
    """Return a named capture fragment for ``name``.

    The name is not checked; a bad group name fails when the whole path is
    compiled.
    """
    if regex and SEPARATOR in regex:
        raise InvalidSegment(f"Regex contains a forward slash: {regex!r}")
    return f"(?P<{name}>{regex or DEFAULT_REGEX})"


def split_pattern(pattern: str) -> Iterator[Tuple[str, Tuple[str, ...]]]:
    for token in pattern.split(SEPARATOR):
        if not token:
            continue
        if token.startswith("<") and token.endswith(">"):
            name, _, regex = token[1:-1].partition(":")
            yield "dynamic", (name, regex)
            continue
        yield "literal", (token,)


def compile_path(segments: Sequence[str]) -> str:
    # `$` also matches before a single trailing newline, so "/foo\n" hits "^/foo$"
    return f"^{SEPARATOR}{SEPARATOR.join(segments)}$"


def match_pattern(
    path: str, pattern: Union[str, "re.Pattern[str]"]
) -> Union[Dict[str, str], _NoMatch]:
    """Match ``path`` against ``pattern`` keeping named captures only.

    Named groups that took no part in the match map to ``""`` rather than
    being left out.
    """
    found = re.search(pattern, path)
    if found is None:
        return NO_MATCH
    return found.groupdict("")
