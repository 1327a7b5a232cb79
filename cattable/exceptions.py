"""
Exception hierarchy for hierarchical tables.

Reads, writes and construction never raise for missing keys or malformed
configuration. These exceptions are used only by the strict accessors
(require(), to_dict()) so callers can catch them with a single except clause.
"""

from typing import Any


class TableError(Exception):
    """
    Base exception for all table errors.

    Example:
        try:
            port = table.require("port")
        except TableError as e:
            lg.error(f"table error: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class FieldNotFoundError(TableError):
    """
    Raised by CatTable.require() when a field resolves nowhere in the tree.

    Attributes:
        key: The field that was not found
    """

    def __init__(self, key: Any) -> None:
        super().__init__("field not found", key=repr(key))
        self.key = key


class CategoryCycleError(TableError):
    """
    Raised when a table that contains itself (directly or indirectly) is
    converted to a plain dictionary.
    """

    pass
