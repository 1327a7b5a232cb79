"""
Table factory.

A TableFactory binds a TableConfig, an optional trace logger and a shared
Resolver, and creates tables with them. Calling a factory is the same as
calling its create() method. The module-level create() uses default_factory.
"""

from typing import Any

from .config import TableConfig
from .log import create_trace_logger
from .resolver import Resolver
from .table import CatTable


class TableFactory:
    """
    Creates CatTable instances sharing one configuration and logger.

    Example:
        >>> factory = TableFactory(TableConfig.from_params(default_marker="@"))
        >>> table = factory({"@net": {"port": 80}})
        >>> table["port"]
        80
    """

    def __init__(self, config: TableConfig | None = None, lg: Any | None = None):
        """
        Initialize the factory.

        Args:
            config: Defaults for created tables (TableConfig() when omitted)
            lg: Logger receiving trace output (optional). When omitted and
                config.log is set, a stderr trace logger is created.
        """
        self.config = config if config is not None else TableConfig()
        if lg is None and self.config.log:
            lg = create_trace_logger(level=self.config.log_level)
        self.lg = lg
        self.resolver = Resolver(lg)

    def create(
        self, seed: Any = None, marker: Any = None, should_cache: Any = None
    ) -> CatTable:
        """
        Create a new table.

        Args:
            seed: Mapping or table whose entries are written into the new table
            marker: Category prefix, predicate(table, key) or Marker
            should_cache: Whether the table caches resolved fields

        Returns:
            CatTable: New table
        """
        return CatTable(seed, marker, should_cache, factory=self)

    __call__ = create


default_factory = TableFactory()


def create(seed: Any = None, marker: Any = None, should_cache: Any = None) -> CatTable:
    """Create a table with the default factory."""
    return default_factory.create(seed, marker, should_cache)
