# typeinject/errors.py
"""
Error taxonomy
──────────────────────────────────────────────
• UsageError                  → caller misused the API (fatal to the call)
• MissingDependencyError      → a required value is absent from the whole chain
• UnsupportedConversionError  → named value cannot be coerced to the declared type

None of these are retried; they signal programming or configuration errors.
──────────────────────────────────────────────
"""
from __future__ import annotations
from typing import Any


def type_name(typ: Any) -> str:
    """Readable name for a type key (classes get module.qualname)."""
    if isinstance(typ, type):
        if typ.__module__ == "builtins":
            return typ.__qualname__
        return f"{typ.__module__}.{typ.__qualname__}"
    return repr(typ)


class InjectError(Exception):
    """Base class for all registry errors."""


class UsageError(InjectError, TypeError):
    """Non-callable passed to invoke, bad name count, non-abstract map_to target, ..."""


class MissingDependencyError(InjectError, LookupError):
    """A required parameter has no value anywhere in the parent chain."""

    def __init__(self, key: Any, parameter: str | None = None):
        self.key = key
        self.parameter = parameter
        what = f"name {key!r}" if isinstance(key, str) else type_name(key)
        if parameter:
            msg = f"inject: missing {what} for parameter '{parameter}'"
        else:
            msg = f"inject: missing {what}"
        super().__init__(msg)


class UnsupportedConversionError(InjectError, TypeError):
    """Stored value type and declared type are outside the coercion table."""

    def __init__(self, source: Any, target: Any):
        self.source = source
        self.target = target
        super().__init__(
            f"inject: unsupported conversion from {type_name(source)} to {type_name(target)}"
        )
