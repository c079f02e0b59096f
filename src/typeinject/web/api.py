# src/typeinject/web/api.py
from __future__ import annotations
import logging
from typing import Iterable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from typeinject.core.registry import Registry
from typeinject.web.errors import add_error_handlers
from typeinject.web.middleware import RegistryMiddleware

"""
──────────────────────────────────────────────────────────────
typeinject.web.api
──────────────────────────────────────────────────────────────
Purpose:
    Wire a root Registry into a FastAPI application.

Responsibilities:
    • Keep the root registry on app.state.registry
    • Give every request its own child registry (RegistryMiddleware)
    • Render registry errors as JSON envelopes
──────────────────────────────────────────────────────────────
"""

logger = logging.getLogger(__name__)


def install_registry(app: FastAPI, root: Registry) -> FastAPI:
    app.state.registry = root
    app.add_middleware(RegistryMiddleware, root=root)
    add_error_handlers(app)
    logger.info("[inject] registry middleware installed")
    return app


def create_app(
    *,
    title: str = "App",
    registry: Optional[Registry] = None,
    cors_allow_origins: Iterable[str] = ("*",),
) -> FastAPI:
    """FastAPI factory with CORS and a (new, unless given) root registry installed."""
    app = FastAPI(title=title)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_registry(app, registry if registry is not None else Registry())
    return app
