# typeinject/web/context.py
"""
ContextVar-based request Registry binding
──────────────────────────────────────────────
• Each request binds one child Registry via RegistryMiddleware
• get_registry() retrieves it; raises if none bound
• reset_registry(token) restores the previous binding after the request
• set_registry() also allows manual binding for CLI/tests
• clear_registry() drops the binding outright
"""
from contextvars import ContextVar, Token
from typing import Optional

from typeinject.core.registry import Registry

_registry_cv: ContextVar[Optional[Registry]] = ContextVar("_inject_registry", default=None)


def set_registry(registry: Registry) -> Token:
    """Bind a Registry to the current coroutine context."""
    return _registry_cv.set(registry)


def get_registry() -> Registry:
    """Return the current Registry or raise if none bound."""
    registry = _registry_cv.get()
    if registry is None:
        raise RuntimeError(
            "No active Registry found. "
            "Did you install RegistryMiddleware or call set_registry()?"
        )
    return registry


def reset_registry(token: Token) -> None:
    _registry_cv.reset(token)


def clear_registry() -> None:
    """Clear ContextVar binding."""
    _registry_cv.set(None)
