from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StoredValue:
    """
    A value held by the registry together with its type key.

    Attributes
    ----------
    type : Any
        Type identity the value answers to. For map() this is the concrete
        runtime type; for map_to() / set_value() it is whatever key the
        caller supplied.
    value : Any
        The underlying object (may itself be None).
    """

    type: Any
    value: Any

    @classmethod
    def of(cls, value: Any) -> "StoredValue":
        """Tag a value with its own concrete type."""
        return cls(type=type(value), value=value)


class Slot(Generic[T]):
    """
    Mutable destination for get() / get_named().

    The declared ``type`` decides the lookup key; ``value`` is only
    overwritten when a lookup hits.

        port = Slot(int, default=80)
        registry.get(port)
        port.value
    """

    __slots__ = ("type", "value")

    def __init__(self, type_: Any, default: Optional[T] = None):
        self.type = type_
        self.value = default

    def __repr__(self) -> str:
        return f"Slot({self.type!r}, value={self.value!r})"
