"""
Category markers.

A marker decides, at write time, whether a container value written under a
key becomes a nested category or stays a plain field. Two kinds exist:

- PrefixMarker: keys starting with a prefix are categories. The empty prefix
  makes every container-valued key a category.
- PredicateMarker: a callable ``predicate(table, key) -> bool`` decides.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .interface import TableInterface


@dataclass(frozen=True)
class PrefixMarker:
    """Marks keys that start with ``prefix`` as categories."""

    prefix: str

    def matches(self, table: Any, key: Any) -> bool:
        if self.prefix == "":
            return True
        return isinstance(key, str) and key.startswith(self.prefix)


@dataclass(frozen=True)
class PredicateMarker:
    """Delegates the category decision to ``predicate(table, key)``."""

    predicate: Callable[[Any, Any], Any]

    def matches(self, table: Any, key: Any) -> bool:
        return bool(self.predicate(table, key))


Marker = PrefixMarker | PredicateMarker


def resolve_marker(marker: Any, default: str) -> Marker:
    """
    Turn a user-supplied marker into a Marker.

    Strings and callables are wrapped; Marker instances pass through. Anything
    else falls back to the default prefix rather than raising.

    Args:
        marker: Prefix string, predicate, Marker instance or None
        default: Prefix used when marker is unusable

    Returns:
        Marker: Resolved marker
    """
    if isinstance(marker, (PrefixMarker, PredicateMarker)):
        return marker
    if isinstance(marker, str):
        return PrefixMarker(marker)
    if callable(marker):
        return PredicateMarker(marker)
    return PrefixMarker(default)


def is_container(value: Any) -> bool:
    """Check whether a value can become a category (a mapping or a table)."""
    return isinstance(value, (Mapping, TableInterface))


def is_category(table: Any, key: Any, value: Any, marker: Marker) -> bool:
    """
    Decide whether writing ``value`` under ``key`` creates a category.

    Args:
        table: Table receiving the write (passed to predicates)
        key: Key being written
        value: Value being written
        marker: Marker of the receiving table

    Returns:
        bool: True if the value should be stored as a category
    """
    if not is_container(value):
        return False
    if isinstance(marker, (PrefixMarker, PredicateMarker)):
        return marker.matches(table, key)
    return False
