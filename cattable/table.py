"""
Hierarchical attribute table implementation.

This module provides CatTable, a key-value container that composes itself
out of nested tables ("categories"). Writing a mapping under a key the
table's marker accepts creates a category; reading a key the table does not
hold itself searches its categories and caches where the key was found.

Example:
    >>> table = CatTable({"a": 1, "_b": {"c": 2}})
    >>> table["a"]
    1
    >>> table["c"]
    2
    >>> "c" in table
    False
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, Mapping, ValuesView
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .exceptions import CategoryCycleError, FieldNotFoundError
from .interface import TableInterface
from .marker import Marker, is_category, resolve_marker
from .resolver import MISSING, LookupCache, Resolver

if TYPE_CHECKING:
    from .factory import TableFactory

_EMPTY: Mapping[Any, Any] = MappingProxyType({})


class CatTable(TableInterface):
    """
    Key-value table that inherits the fields of its nested categories.

    Own fields always shadow categorized resolution. A key is held either as
    a field or as a category, never both. Marker and cache policy are fixed
    at construction.
    """

    def __init__(
        self,
        seed: Any = None,
        marker: Any = None,
        should_cache: Any = None,
        factory: TableFactory | None = None,
    ) -> None:
        """
        Initialize the table and write each seed entry through the write path.

        Args:
            seed: Mapping or table to copy entries from (shallow; nested
                mappings are categorized like any other write)
            marker: Category prefix, predicate(table, key) or Marker; falls
                back to the factory's default marker when unusable
            should_cache: Whether to cache resolved fields; falls back to the
                factory's default when not a bool
            factory: Factory supplying defaults, logger and resolver (the
                module default factory when omitted)
        """
        if factory is None:
            from .factory import default_factory

            factory = default_factory

        config = factory.config
        if not isinstance(should_cache, bool):
            should_cache = config.should_cache

        self._factory = factory
        self._lg = factory.lg
        self._resolver: Resolver = factory.resolver
        self._marker: Marker = resolve_marker(marker, config.default_marker)
        self._cache: LookupCache | None = LookupCache() if should_cache else None
        self._fields: dict[Any, Any] = {}
        # Allocated on the first category write
        self._categories: dict[Any, CatTable] | None = None

        if isinstance(seed, (Mapping, TableInterface)):
            for key, val in seed.items():
                self[key] = val
        elif seed is not None and self._lg:
            self._lg.trace("ignoring non-mapping seed", extra={"type": type(seed)})

        if self._lg:
            self._lg.trace(
                "created table",
                extra={"marker": self._marker, "cache": should_cache},
            )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def marker(self) -> Marker:
        """Marker deciding which writes become categories."""
        return self._marker

    @property
    def should_cache(self) -> bool:
        return self._cache is not None

    @property
    def cache(self) -> LookupCache | None:
        """Lookup cache, or None when caching is disabled."""
        return self._cache

    @property
    def fields(self) -> Mapping[Any, Any]:
        """Read-only view of the table's own plain fields."""
        return MappingProxyType(self._fields)

    @property
    def categories(self) -> Mapping[Any, CatTable]:
        """Read-only view of the table's own categories."""
        if self._categories is None:
            return _EMPTY
        return MappingProxyType(self._categories)

    # -------------------------------------------------------------------------
    # Write path
    # -------------------------------------------------------------------------

    def __setitem__(self, key: Any, val: Any) -> None:
        """
        Store a value as a plain field or as a category.

        Container values under keys accepted by the marker become categories:
        tables are stored by reference (shared with any other owner), other
        mappings are promoted to a new table with this table's marker and
        cache policy. Everything else is stored as a field. Existing entries
        are overwritten silently.

        Args:
            key: Key to set
            val: Value to set
        """
        if is_category(self, key, val, self._marker):
            if self._categories is None:
                self._categories = {}
            if isinstance(val, CatTable):
                category = val
            else:
                category = self._factory.create(val, self._marker, self.should_cache)
            self._fields.pop(key, None)
            self._categories[key] = category
            if self._lg:
                self._lg.trace("stored category", extra={"key": key})
        else:
            if self._categories is not None:
                self._categories.pop(key, None)
            self._fields[key] = val
            if self._lg:
                self._lg.trace("stored field", extra={"key": key})

    # -------------------------------------------------------------------------
    # Read path
    # -------------------------------------------------------------------------

    def _resolve(self, key: Any) -> Any:
        """Resolve a key, returning MISSING when it is found nowhere."""
        if key in self._fields:
            return self._fields[key]
        if not self._categories:
            return MISSING

        result = self._resolver.lookup(self._categories, key, self._cache)
        if not result.found:
            return MISSING

        if self._cache is not None and result.path:
            name = result.path[0]
            self._cache.record(key, name, self._categories[name])
            if self._lg:
                self._lg.trace("cached result", extra={"key": key, "category": name})
        return result.value

    def __getitem__(self, key: Any) -> Any:
        """
        Get value by key, searching categories when it is not a field.

        Args:
            key: Key to get

        Returns:
            Value or None: Resolved value or None if key resolves nowhere
        """
        value = self._resolve(key)
        return None if value is MISSING else value

    def get(self, key: Any, default: Any = None) -> Any:
        value = self._resolve(key)
        return default if value is MISSING else value

    def has(self, key: Any) -> bool:
        return self._resolve(key) is not MISSING

    def require(self, key: Any) -> Any:
        """
        Get value by key, raising if it resolves nowhere.

        Args:
            key: Key to get

        Returns:
            Resolved value

        Raises:
            FieldNotFoundError: If the key resolves nowhere
        """
        value = self._resolve(key)
        if value is MISSING:
            raise FieldNotFoundError(key)
        return value

    # -------------------------------------------------------------------------
    # Own entries
    # -------------------------------------------------------------------------

    def _entries(self) -> dict[Any, Any]:
        if not self._categories:
            return dict(self._fields)
        return {**self._fields, **self._categories}

    def keys(self) -> KeysView[Any]:
        return self._entries().keys()

    def values(self) -> ValuesView[Any]:
        return self._entries().values()

    def items(self) -> ItemsView[Any, Any]:
        return self._entries().items()

    def __contains__(self, key: Any) -> bool:
        return key in self._fields or (
            self._categories is not None and key in self._categories
        )

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries())

    def __len__(self) -> int:
        return len(self._fields) + len(self._categories or ())

    def to_dict(self) -> dict[Any, Any]:
        """
        Recursively convert the table and its categories to plain dicts.

        Returns:
            dict: Own fields plus one nested dict per category

        Raises:
            CategoryCycleError: If a category contains one of its ancestors
        """
        return self._to_dict(set())

    def _to_dict(self, ancestors: set[int]) -> dict[Any, Any]:
        if id(self) in ancestors:
            raise CategoryCycleError("table contains itself")
        ancestors.add(id(self))
        result = dict(self._fields)
        for name, category in (self._categories or {}).items():
            result[name] = category._to_dict(ancestors)
        ancestors.discard(id(self))
        return result

    def __repr__(self) -> str:
        categories = list(self._categories or ())
        return f"CatTable(fields={self._fields!r}, categories={categories!r})"

    def __str__(self) -> str:
        return str(self._entries())
