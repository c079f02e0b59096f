# typeinject/__init__.py
"""
typeinject
──────────────────────────────────────────────────────────────
A small type-keyed value registry and reflective invoker.
Provides:
    - Type-keyed and name-keyed stores with parent fallback
    - invoke() / invoke_named(): call functions with resolved arguments
    - Numeric / string / bytes coercion for named values
    - Settings via INJECT_* environment variables
    - Optional FastAPI integration (typeinject.web)
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from typeinject.core.protocols import Injector, Invoker, Mapper, NamedInvoker, NamedMapper
from typeinject.core.registry import Registry
from typeinject.core.values import Slot, StoredValue
from typeinject.errors import InjectError, MissingDependencyError, UnsupportedConversionError, UsageError


def create_registry(parent: Registry | None = None) -> Registry:
    """Create a registry, optionally delegating misses to `parent`."""
    return Registry(parent)


__all__ = [
    "Registry",
    "create_registry",
    "Slot",
    "StoredValue",
    "Injector",
    "Mapper",
    "NamedMapper",
    "Invoker",
    "NamedInvoker",
    "InjectError",
    "UsageError",
    "MissingDependencyError",
    "UnsupportedConversionError",
]
