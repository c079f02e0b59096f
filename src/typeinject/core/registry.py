from __future__ import annotations
import abc
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional

from typeinject.config.base_settings import InjectSettings, get_settings
from typeinject.core import invoke as _invoke
from typeinject.core.values import Slot, StoredValue
from typeinject.errors import UsageError, type_name

"""
──────────────────────────────────────────────────────────────────────────────
Type / Name Keyed Registry
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Hold one value per type (and one value per name), fall back to a parent
    registry on a local miss, and call functions with arguments resolved
    from those stores.

APIs:
    - map(value) / map_to(value, iface) / set_value(type, stored)
    - get(slot) / get_value(type) → StoredValue | None
    - map_named(value, name) / set_named_value(name, stored)
    - get_named(slot, name) / get_named_value(name) → StoredValue | None
    - invoke(fn) / invoke_named(fn, *names) → list of results
    - call(fn) / call_named(fn, *names) → raw return value

Usage:
    root = Registry()
    root.map(Config(port=8080))

    child = Registry(root)

    def port(c: Config) -> int:
        return c.port
    child.invoke(port)                    # [8080]
"""

logger = logging.getLogger(__name__)


def is_abstract_type(iface: Any) -> bool:
    """
    Interfaces are Protocol classes, ABCs with abstract members, and marker
    ABCs: an ABCMeta class whose only ABC base (if any) is abc.ABC itself.
    A concrete subclass of an ABC is not an interface.
    """
    if not isinstance(iface, type):
        return False
    if getattr(iface, "_is_protocol", False):
        return True
    if inspect.isabstract(iface):
        return True
    if not isinstance(iface, abc.ABCMeta):
        return False
    return not any(isinstance(b, abc.ABCMeta) for b in iface.__bases__ if b is not abc.ABC)


class Registry:
    """
    Type-keyed and name-keyed value store with parent delegation.

    The parent is only ever read: lookups that miss locally are forwarded to
    it, live, so later writes to the parent are visible from every child that
    has not overridden the same key. Not thread-safe for concurrent writes.
    """

    def __init__(self, parent: Optional["Registry"] = None, *, settings: Optional[InjectSettings] = None):
        self._parent = parent
        self._values: Dict[Any, StoredValue] = {}
        self._named_values: Dict[str, StoredValue] = {}
        if settings is None:
            settings = parent.settings if parent is not None else get_settings()
        self.settings = settings

    @property
    def parent(self) -> Optional["Registry"]:
        return self._parent

    def __repr__(self) -> str:
        return (
            f"<Registry values={len(self._values)} named={len(self._named_values)} "
            f"parent={'yes' if self._parent is not None else 'no'}>"
        )

    def __contains__(self, typ: Any) -> bool:
        return self.get_value(typ) is not None

    # ──────────────────────────────────────────────
    # Type-keyed store
    # ──────────────────────────────────────────────
    def get(self, slot: Slot) -> Slot:
        """Fill `slot.value` from the entry for `slot.type`; untouched on a miss."""
        stored = self.get_value(slot.type)
        if stored is not None:
            slot.value = stored.value
        return slot

    def get_value(self, typ: Any) -> Optional[StoredValue]:
        try:
            stored = self._values.get(typ)
        except TypeError as e:
            raise UsageError(f"inject: unhashable type key {typ!r}") from e
        if stored is None and self._parent is not None:
            stored = self._parent.get_value(typ)
        return stored

    def map(self, value: Any) -> None:
        """Store `value` under its own concrete type (last write wins)."""
        self.set_value(type(value), StoredValue.of(value))

    def map_to(self, value: Any, iface: Any) -> None:
        """Store `value` under an interface type so callers can ask for the interface."""
        if not is_abstract_type(iface):
            got = f"concrete class {type_name(iface)}" if isinstance(iface, type) else type(iface).__name__
            raise UsageError(f"inject: map_to expecting an abstract type, got {got}")
        self.set_value(iface, StoredValue(type=iface, value=value))

    def set_value(self, typ: Any, value: Any) -> None:
        if not isinstance(value, StoredValue):
            value = StoredValue(type=typ, value=value)
        try:
            self._values[typ] = value
        except TypeError as e:
            raise UsageError(f"inject: unhashable type key {typ!r}") from e
        logger.debug("[inject] mapped %s", type_name(typ))

    # ──────────────────────────────────────────────
    # Name-keyed store
    # ──────────────────────────────────────────────
    def get_named(self, slot: Slot, name: str) -> Slot:
        stored = self.get_named_value(name)
        if stored is not None:
            slot.value = stored.value
        return slot

    def get_named_value(self, name: str) -> Optional[StoredValue]:
        stored = self._named_values.get(name)
        if stored is None and self._parent is not None:
            stored = self._parent.get_named_value(name)
        return stored

    def map_named(self, value: Any, name: str) -> None:
        self.set_named_value(name, StoredValue.of(value))

    def set_named_value(self, name: str, value: Any) -> None:
        if not isinstance(name, str) or not name:
            raise UsageError(f"inject: names must be non-empty strings, got {name!r}")
        if not isinstance(value, StoredValue):
            value = StoredValue.of(value)
        self._named_values[name] = value
        logger.debug("[inject] mapped name %r (%s)", name, type_name(value.type))

    # ──────────────────────────────────────────────
    # Invocation
    # ──────────────────────────────────────────────
    def invoke(self, fn: Callable[..., Any]) -> List[Any]:
        """Call `fn` with every parameter resolved by its declared type."""
        return _invoke.invoke(self, fn)

    def invoke_named(self, fn: Callable[..., Any], *names: Optional[str]) -> List[Any]:
        """
        Call `fn` with one name per parameter; an empty name resolves by type.

            registry.invoke_named(connect, "db_host", "")
        """
        return _invoke.invoke(self, fn, names)

    def call(self, fn: Callable[..., Any]) -> Any:
        return _invoke.call(self, fn)[0]

    def call_named(self, fn: Callable[..., Any], *names: Optional[str]) -> Any:
        return _invoke.call(self, fn, names)[0]
