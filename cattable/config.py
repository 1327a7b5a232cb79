"""
Configuration for table factories.

This module provides an immutable configuration class carrying the defaults
a TableFactory hands to every table it creates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import TableConstants
from .log import TRACE, resolve_level


@dataclass(frozen=True)
class TableConfig:
    """
    Immutable configuration for a table factory.

    Malformed values never fail: from_params() and from_config() replace a
    non-string marker or a non-bool cache flag with the package defaults.
    """

    default_marker: str = TableConstants.DEFAULT_CAT_MARKER
    should_cache: bool = TableConstants.DEFAULT_SHOULD_CACHE
    log: bool = TableConstants.DEFAULT_LOG
    log_level: int = TRACE

    @classmethod
    def from_params(
        cls,
        default_marker: Any = TableConstants.DEFAULT_CAT_MARKER,
        should_cache: Any = TableConstants.DEFAULT_SHOULD_CACHE,
        log: Any = TableConstants.DEFAULT_LOG,
        log_level: str | int = TRACE,
    ) -> TableConfig:
        """
        Create TableConfig from individual parameters.

        Non-string markers and non-bool cache or log flags fall back to the
        package defaults.

        Args:
            default_marker: Category prefix used when a table gets no marker
            should_cache: Default cache policy for new tables
            log: Whether to mirror trace output to stderr
            log_level: Level for trace output (name or number)

        Returns:
            TableConfig instance

        Raises:
            InvalidLogLevelError: If log_level is an unknown level name
        """
        if not isinstance(default_marker, str):
            default_marker = TableConstants.DEFAULT_CAT_MARKER
        if not isinstance(should_cache, bool):
            should_cache = TableConstants.DEFAULT_SHOULD_CACHE
        if not isinstance(log, bool):
            log = TableConstants.DEFAULT_LOG
        return cls(
            default_marker=default_marker,
            should_cache=should_cache,
            log=log,
            log_level=resolve_level(log_level),
        )

    @staticmethod
    def _navigate_to_section(config_dict: dict, section: str) -> dict:
        """Navigate to specified section in config dict."""
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                # Fall back to empty dict if section not found
                return {}
        return current if isinstance(current, dict) else {}

    @classmethod
    def from_config(
        cls, config_dict: dict, section: str = TableConstants.CONFIG_SECTION
    ) -> TableConfig:
        """
        Create TableConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g. parsed from YAML)
            section: Dotted path of the section to read (default: "cattable")

        Returns:
            TableConfig instance

        Example:
            config = {"app": {"cattable": {"marker": "@", "cache": False}}}
            table_config = TableConfig.from_config(config, "app.cattable")
        """
        current = cls._navigate_to_section(config_dict, section)
        return cls.from_params(
            default_marker=current.get("marker", TableConstants.DEFAULT_CAT_MARKER),
            should_cache=current.get("cache", TableConstants.DEFAULT_SHOULD_CACHE),
            log=current.get("log", TableConstants.DEFAULT_LOG),
            log_level=current.get("log_level", TRACE),
        )
