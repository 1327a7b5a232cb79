"""
Build tables from YAML documents.

The loader extends yaml.SafeLoader to convert date and numeric mapping keys
to strings, so prefix markers apply to every key of the document. Files are
never opened here: pass a string or an already-open stream.

Example:
    >>> table = load('''
    ... name: web
    ... _defaults:
    ...   port: 8080
    ... ''')
    >>> table["port"]
    8080
"""

import datetime
from collections.abc import Hashable
from typing import Any

import yaml  # type: ignore[import-untyped]

from .factory import TableFactory, default_factory
from .table import CatTable


class Loader(yaml.SafeLoader):
    """Safe YAML loader with automatic key type conversion."""

    def _convert_key_to_string(self, key: Any) -> Any:
        """
        Convert date and numeric keys to strings.

        Args:
            key: Key to convert

        Returns:
            Converted key (string if date/numeric, otherwise unchanged)
        """
        if isinstance(key, datetime.date):
            return str(key)
        elif not isinstance(key, bool) and isinstance(key, (int, float)):
            return str(key)
        return key

    def construct_mapping(self, node: Any, deep: bool = False) -> dict[Hashable, Any]:
        mapping = super().construct_mapping(node, deep=deep)
        # Rebuild in document order so the last of two colliding keys wins
        return {
            self._convert_key_to_string(key): value for key, value in mapping.items()
        }


def load(
    stream: Any,
    factory: TableFactory | None = None,
    marker: Any = None,
    should_cache: Any = None,
) -> CatTable:
    """
    Parse a YAML document and build a table from it.

    Args:
        stream: YAML text or an open text stream
        factory: Factory creating the table (default factory when omitted)
        marker: Category marker for the root table
        should_cache: Cache policy for the root table

    Returns:
        CatTable: Table seeded from the document (empty when the document is
        not a mapping)

    Raises:
        yaml.YAMLError: If the document is not valid YAML
    """
    data = yaml.load(stream, Loader=Loader)
    factory = factory if factory is not None else default_factory
    return factory.create(data if isinstance(data, dict) else None, marker, should_cache)
