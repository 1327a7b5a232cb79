"""
Table interface definition.

Anything implementing TableInterface counts as a container when deciding
whether a written value becomes a category, and can seed a new table.
"""

from abc import ABC, abstractmethod
from collections.abc import ItemsView
from typing import Any


class TableInterface(ABC):
    """
    Abstract base class for hierarchical tables.

    Seeding copies ``items()``; reads go through ``__getitem__``, ``get()``
    and ``has()``, which resolve keys through nested categories.
    """

    @abstractmethod
    def items(self) -> ItemsView[Any, Any]:
        """Own key-value pairs, copied when the table seeds another one."""

    @abstractmethod
    def __getitem__(self, key: Any) -> Any:
        """Resolved value, or None if the key resolves nowhere."""

    @abstractmethod
    def get(self, key: Any, default: Any = None) -> Any:
        """Resolved value, or ``default`` if the key resolves nowhere."""

    @abstractmethod
    def has(self, key: Any) -> bool:
        """Whether the key resolves anywhere in the table tree."""
