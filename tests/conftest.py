from typeinject.testing.fixtures import child_registry, inject_settings, registry  # noqa: F401
