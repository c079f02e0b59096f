# typeinject/core/protocols.py
"""
Structural contracts of the registry
──────────────────────────────────────────────
Mapper        → type-keyed store
NamedMapper   → name-keyed store
Invoker       → invoke by parameter types
NamedInvoker  → invoke with per-parameter names
Injector      → all of the above (what Registry implements)

They are Protocols, so they are also valid map_to() targets:

    registry.map_to(registry, Injector)
──────────────────────────────────────────────
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Protocol

from typeinject.core.values import Slot, StoredValue


class Mapper(Protocol):
    def get(self, slot: Slot) -> Slot: ...
    def get_value(self, typ: Any) -> Optional[StoredValue]: ...
    def map(self, value: Any) -> None: ...
    def map_to(self, value: Any, iface: Any) -> None: ...
    def set_value(self, typ: Any, value: Any) -> None: ...


class NamedMapper(Protocol):
    def get_named(self, slot: Slot, name: str) -> Slot: ...
    def get_named_value(self, name: str) -> Optional[StoredValue]: ...
    def map_named(self, value: Any, name: str) -> None: ...
    def set_named_value(self, name: str, value: Any) -> None: ...


class Invoker(Protocol):
    def invoke(self, fn: Callable[..., Any]) -> list[Any]: ...


class NamedInvoker(Protocol):
    def invoke_named(self, fn: Callable[..., Any], *names: Optional[str]) -> list[Any]: ...


class Injector(Mapper, NamedMapper, Invoker, NamedInvoker, Protocol):
    pass
