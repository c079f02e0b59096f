# typeinject/web/middleware.py
from __future__ import annotations
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from typeinject.core.registry import Registry
from typeinject.core.values import StoredValue
from typeinject.web.context import reset_registry, set_registry

logger = logging.getLogger(__name__)


class RegistryMiddleware(BaseHTTPMiddleware):
    """
    Per-request child Registry.

    Every request gets Registry(parent=root) with the Request mapped into it,
    so handlers can register request-local values without touching the root.
    """

    def __init__(self, app, *, root: Registry):
        super().__init__(app)
        self.root = root
        self.state_attr = root.settings.request_registry_attr

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        registry = Registry(self.root)
        registry.set_value(Request, StoredValue(type=Request, value=request))
        setattr(request.state, self.state_attr, registry)
        token = set_registry(registry)
        try:
            return await call_next(request)
        finally:
            reset_registry(token)
