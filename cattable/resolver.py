"""
Field resolution across nested categories.

When a table does not hold a field itself, the Resolver searches its
categories: first for a category named like the field, then through the
cache hint, then through the fields of each direct child, and finally
recursively through grandchildren. The first match wins.

The cache maps a field to the immediate child category that last resolved
it. It is only a hint: a hit is verified by reading that child's own fields once
and a failed check evicts the entry and falls through to the full search.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .table import CatTable


class _Missing:
    """Sentinel for absent values (distinct from a stored None)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class Resolution:
    """
    Result of a lookup.

    Attributes:
        value: Resolved value, or MISSING
        path: Category names walked from the searching table; path[0] is the
            immediate child the search went through (empty when the value was
            a category of the searching table itself)
    """

    value: Any = MISSING
    path: list[Any] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.value is not MISSING


class LookupCache:
    """
    Per-table cache of the immediate child category each field resolved in.

    Entries hold both the category name and the category itself so an entry
    whose category was replaced under the same name is recognised as stale.
    """

    def __init__(self) -> None:
        self._entries: dict[Any, tuple[Any, CatTable]] = {}

    def record(self, key: Any, name: Any, category: CatTable) -> None:
        self._entries[key] = (name, category)

    def entry(self, key: Any) -> tuple[Any, CatTable] | None:
        return self._entries.get(key)

    def evict(self, key: Any) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = {key: name for key, (name, _) in self._entries.items()}
        return f"LookupCache({names!r})"


class Resolver:
    """
    Searches a categories mapping for a field.

    Stateless apart from the optional logger; one instance can serve every
    table created by a factory.
    """

    def __init__(self, lg: Any | None = None) -> None:
        """
        Initialize the resolver.

        Args:
            lg: Logger instance for trace output (optional)
        """
        self._lg = lg

    def _trace(self, msg: str, **fields: Any) -> None:
        if self._lg:
            self._lg.trace(msg, extra=fields)

    def lookup(
        self,
        categories: Mapping[Any, CatTable],
        key: Any,
        cache: LookupCache | None = None,
        path: list[Any] | None = None,
        depth: int = 0,
    ) -> Resolution:
        """
        Resolve a field through a categories mapping.

        Never raises for a missing field. The only side effect is evicting a
        stale cache entry; recording new entries is left to the caller.

        Args:
            categories: Category name -> table mapping to search
            key: Field to look up
            cache: Cache of the table owning ``categories`` (optional)
            path: Path collected so far (used by the recursion)
            depth: Recursion depth (0 for the searching table)

        Returns:
            Resolution: The value (or MISSING) and the path taken
        """
        return self._lookup(categories, key, cache, path or [], depth, set())

    def _lookup(
        self,
        categories: Mapping[Any, CatTable],
        key: Any,
        cache: LookupCache | None,
        path: list[Any],
        depth: int,
        expanded: set[int],
    ) -> Resolution:
        self._trace("looking up field", field=key, depth=depth)

        # Category named like the field
        if key in categories:
            return Resolution(categories[key], path[:depth])

        if depth == 0 and cache is not None:
            hit = self._check_cache(categories, key, cache)
            if hit.found:
                return hit

        # Fields of direct children
        for name, category in categories.items():
            value = category.fields.get(key, MISSING)
            if value is not MISSING:
                del path[depth:]
                path.append(name)
                return Resolution(value, list(path))

        # Children's categories, each table expanded at most once per lookup
        for name, category in categories.items():
            nested = category.categories
            if not nested or id(category) in expanded:
                continue
            expanded.add(id(category))
            del path[depth:]
            path.append(name)
            if self._lg:
                self._trace("searching branch", field=key, path=list(path))
            result = self._lookup(nested, key, cache, path, depth + 1, expanded)
            if result.found:
                return result

        self._trace("lookup failed", field=key, depth=depth)
        return Resolution(MISSING, [])

    def _check_cache(
        self, categories: Mapping[Any, CatTable], key: Any, cache: LookupCache
    ) -> Resolution:
        """Check the cached child's own fields; evict the entry on a miss."""
        entry = cache.entry(key)
        if entry is None:
            return Resolution()

        name, category = entry
        if categories.get(name) is category:
            value = category.fields.get(key, MISSING)
            if value is not MISSING:
                self._trace("cache hit", field=key, category=name)
                return Resolution(value, [name])

        self._trace("cache miss", field=key, category=name)
        cache.evict(key)
        return Resolution()
