"""
Constants and default values for hierarchical tables.

This module contains the package-wide defaults used when a table or factory
is created without explicit configuration.
"""


class TableConstants:
    """Constants for the table system."""

    NAME: str = "cattable"

    # Prefix that marks a mapping-valued key as a category
    DEFAULT_CAT_MARKER: str = "_"

    # Whether tables cache the category a field was resolved from
    DEFAULT_SHOULD_CACHE: bool = True

    # Trace output is off unless requested
    DEFAULT_LOG: bool = False

    # Logger name used for trace output
    LOGGER_NAME: str = "cattable"

    # Configuration section read by TableConfig.from_config()
    CONFIG_SECTION: str = "cattable"


DEFAULT_CAT_MARKER = TableConstants.DEFAULT_CAT_MARKER
DEFAULT_SHOULD_CACHE = TableConstants.DEFAULT_SHOULD_CACHE
