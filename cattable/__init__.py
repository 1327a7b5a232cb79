from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

# Lazy import for the yaml helper - PyYAML is only loaded when accessed
if TYPE_CHECKING:
    from . import yaml

from .config import TableConfig
from .constants import DEFAULT_CAT_MARKER, DEFAULT_SHOULD_CACHE, TableConstants
from .exceptions import CategoryCycleError, FieldNotFoundError, TableError
from .factory import TableFactory, create, default_factory
from .interface import TableInterface
from .log import TRACE, InvalidLogLevelError, Logger, create_trace_logger
from .marker import (
    Marker,
    PredicateMarker,
    PrefixMarker,
    is_category,
    is_container,
    resolve_marker,
)
from .resolver import MISSING, LookupCache, Resolution, Resolver
from .table import CatTable

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("cattable")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.9.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Modules
    "yaml",
    # Core classes
    "CatTable",
    "TableInterface",
    "TableFactory",
    "TableConfig",
    "TableConstants",
    # Factory
    "create",
    "default_factory",
    "DEFAULT_CAT_MARKER",
    "DEFAULT_SHOULD_CACHE",
    # Markers
    "Marker",
    "PrefixMarker",
    "PredicateMarker",
    "resolve_marker",
    "is_container",
    "is_category",
    # Resolution
    "Resolver",
    "Resolution",
    "LookupCache",
    "MISSING",
    # Logging
    "TRACE",
    "Logger",
    "create_trace_logger",
    "InvalidLogLevelError",
    # Exceptions
    "TableError",
    "FieldNotFoundError",
    "CategoryCycleError",
]


def __getattr__(name: str) -> object:
    """Lazy import for the yaml module so PyYAML loads only when used."""
    import importlib

    if name == "yaml":
        module = importlib.import_module(f".{name}", __name__)
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
