# typeinject/web/deps.py
from __future__ import annotations
from typing import Any

from fastapi import Depends, Request

from typeinject.core.registry import Registry
from typeinject.config.base_settings import get_settings
from typeinject.errors import MissingDependencyError


def request_registry(request: Request) -> Registry:
    """
    Registry for the current request: the middleware's child registry, or
    the root stored on app.state when the middleware is not installed.
    """
    root: Registry | None = getattr(request.app.state, "registry", None)
    settings = root.settings if root is not None else get_settings()
    registry = getattr(request.state, settings.request_registry_attr, None) or root
    if registry is None:
        raise RuntimeError("No Registry on request or app state. Did you call install_registry()?")
    return registry


def Inject(typ: Any):
    """
    FastAPI dependency resolving a value by type.

    Usage:
        @router.get("/port")
        def port(cfg: Config = Inject(Config)):
            return cfg.port
    """

    def _resolve(registry: Registry = Depends(request_registry)):
        stored = registry.get_value(typ)
        if stored is None:
            raise MissingDependencyError(typ)
        return stored.value

    return Depends(_resolve)


def InjectNamed(name: str):
    """FastAPI dependency resolving a value by name."""

    def _resolve(registry: Registry = Depends(request_registry)):
        stored = registry.get_named_value(name)
        if stored is None:
            raise MissingDependencyError(name)
        return stored.value

    return Depends(_resolve)
