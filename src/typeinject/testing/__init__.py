"""
Testing utilities for typeinject users.
──────────────────────────────────────────────────────────────
Provides pytest fixtures for root / child registries and settings.
──────────────────────────────────────────────────────────────
"""
from .fixtures import child_registry, inject_settings, registry

__all__ = ["registry", "child_registry", "inject_settings"]
