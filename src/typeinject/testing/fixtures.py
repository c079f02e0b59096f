"""
──────────────────────────────────────────────────────────────────────────────
typeinject.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Provide reusable pytest fixtures for registry-based code.

Exports:
    - inject_settings  → fresh InjectSettings built from a clean environment
    - registry         → empty root Registry per test
    - child_registry   → Registry whose parent is `registry`

Usage in your test:
    from typeinject.testing.fixtures import registry, child_registry

    def test_fallback(registry, child_registry):
        registry.map(Config(port=8080))
        assert child_registry.get_value(Config).value.port == 8080
──────────────────────────────────────────────────────────────────────────────
"""

import os

import pytest

from typeinject.config.base_settings import InjectSettings, get_settings
from typeinject.core.registry import Registry


@pytest.fixture()
def inject_settings(monkeypatch):
    """
    Settings with every INJECT_* variable removed from the environment.
    Tests may monkeypatch.setenv() and call get_settings() again.
    """
    for key in list(os.environ):
        if key.startswith("INJECT_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield InjectSettings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture()
def registry(inject_settings):
    return Registry(settings=inject_settings)


@pytest.fixture()
def child_registry(registry):
    return Registry(registry)
