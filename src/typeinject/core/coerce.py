# typeinject/core/coerce.py
"""
Named-value coercion
──────────────────────────────────────────────
Only used by invoke_named(): a value stored under a name may have been
registered with a different (but compatible) type than the parameter asks
for, e.g. a plain int for a parameter declared as ``Port(int)``.

The set of conversions is closed:

    source kind → target kind    conversion
    integer     → integer        target(int(value))
    float       → float          target(float(value))
    string      → string         target(value)
    bytes       → bytes          target(value)

Everything else is an UnsupportedConversionError. bool is its own kind: a
named True / False is never passed to or converted into an integer parameter.

Before any conversion, satisfies() lets through values that already fit:
subscripted generics are checked against their origin (list[str] → list),
Callable[...] against callable(), and Protocols that are not
runtime_checkable are passed as-is.
──────────────────────────────────────────────
"""
from __future__ import annotations
import collections.abc
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, get_origin

from typeinject.core.signature import EMPTY
from typeinject.core.values import StoredValue
from typeinject.errors import UnsupportedConversionError

STRING = "string"
BYTES = "bytes"
BOOL = "bool"
INTEGER = "integer"
FLOAT = "float"
OTHER = "other"


def kind_of(typ: Any) -> str:
    if not isinstance(typ, type) or get_origin(typ) is not None:
        return OTHER
    if issubclass(typ, str):
        return STRING
    if issubclass(typ, (bytes, bytearray)):
        return BYTES
    if issubclass(typ, bool):
        return BOOL
    if issubclass(typ, numbers.Integral):
        return INTEGER
    if issubclass(typ, numbers.Real):
        return FLOAT
    return OTHER


_CONVERTERS: Dict[Tuple[str, str], Callable[[Any, type], Any]] = {
    (INTEGER, INTEGER): lambda v, t: t(int(v)),
    (FLOAT, FLOAT): lambda v, t: t(float(v)),
    (STRING, STRING): lambda v, t: t(v),
    (BYTES, BYTES): lambda v, t: t(v),
}


@dataclass(frozen=True)
class Conversion:
    """Outcome of convert(): either a value or the error explaining why not."""

    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def unsupported(self) -> bool:
        return isinstance(self.error, UnsupportedConversionError)


def satisfies(stored: StoredValue, target: Any) -> bool:
    """True when the stored value can be passed for `target` without conversion."""
    if target is EMPTY or target is Any:
        return True
    if stored.type == target:
        return True
    origin = get_origin(target)
    if origin is not None:
        if origin is collections.abc.Callable:
            return callable(stored.value)
        return isinstance(origin, type) and isinstance(stored.value, origin)
    if isinstance(target, type):
        if getattr(target, "_is_protocol", False) and not getattr(target, "_is_runtime_protocol", False):
            return True
        if isinstance(stored.value, bool) and kind_of(target) == INTEGER:
            return False
        return isinstance(stored.value, target)
    return False


def convert(value: Any, source: Any, target: Any, *, enabled: bool = True) -> Conversion:
    converter = _CONVERTERS.get((kind_of(source), kind_of(target))) if enabled else None
    if converter is None:
        return Conversion(error=UnsupportedConversionError(source, target))
    try:
        return Conversion(value=converter(value, target))
    except (TypeError, ValueError, OverflowError) as e:
        return Conversion(error=e)
