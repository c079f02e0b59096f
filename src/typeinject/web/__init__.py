"""
FastAPI integration.
──────────────────────────────────────────────────────────────
 - install_registry(app, root) / create_app(...)
 - Inject(T) / InjectNamed(name) dependencies
 - get_registry() for code running inside a request
──────────────────────────────────────────────────────────────
"""
from .api import create_app, install_registry
from .context import get_registry
from .deps import Inject, InjectNamed

__all__ = ["create_app", "install_registry", "get_registry", "Inject", "InjectNamed"]
