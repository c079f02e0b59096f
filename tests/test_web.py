from dataclasses import dataclass

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from typeinject import Registry
from typeinject.web import Inject, InjectNamed, create_app, get_registry, install_registry
from typeinject.web.context import clear_registry, reset_registry, set_registry
from typeinject.web.errors import error_envelope


@dataclass
class Config:
    port: int


class Audit:
    def __init__(self):
        self.events = []


@pytest.fixture()
def app(registry):
    registry.map(Config(8080))
    registry.map_named("prod", "env")
    app = create_app(title="test", registry=registry)

    @app.get("/port")
    def port(cfg: Config = Inject(Config)):
        return {"port": cfg.port}

    @app.get("/env")
    def env(name: str = InjectNamed("env")):
        return {"env": name}

    @app.get("/missing")
    def missing(audit: Audit = Inject(Audit)):
        return {"ok": True}

    @app.get("/invoke")
    async def invoke_handler():
        def handler(cfg: Config, request: Request) -> str:
            return f"{request.url.path}:{cfg.port}"

        return {"result": get_registry().invoke(handler)}

    @app.get("/local")
    def local(request: Request):
        request.state.registry.map(Audit())
        return {"local": Audit in request.state.registry}

    return app


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def test_inject_by_type(client):
    assert client.get("/port").json() == {"port": 8080}


def test_inject_by_name(client):
    assert client.get("/env").json() == {"env": "prod"}


def test_missing_dependency_envelope(client):
    response = client.get("/missing")
    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "MISSING_DEPENDENCY"
    assert "Audit" in body["error"]["message"]


def test_request_registry_sees_request_and_root(client):
    assert client.get("/invoke").json() == {"result": ["/invoke:8080"]}


def test_request_writes_stay_local(client, registry):
    assert client.get("/local").json() == {"local": True}
    assert Audit not in registry


def test_root_on_app_state(app, registry):
    assert app.state.registry is registry


def test_install_without_middleware_falls_back_to_app_state(registry):
    registry.map(Config(1))
    app = FastAPI()
    app.state.registry = registry

    @app.get("/port")
    def port(cfg: Config = Inject(Config)):
        return {"port": cfg.port}

    with TestClient(app) as c:
        assert c.get("/port").json() == {"port": 1}


def test_install_registry_returns_app(registry):
    app = FastAPI()
    assert install_registry(app, registry) is app


def test_get_registry_outside_request():
    with pytest.raises(RuntimeError, match="No active Registry"):
        get_registry()


def test_manual_binding(registry):
    token = set_registry(registry)
    try:
        assert get_registry() is registry
    finally:
        reset_registry(token)


def test_error_envelope():
    assert error_envelope("X", "msg") == {"error": {"code": "X", "message": "msg", "details": {}}}


def test_clear_registry(registry):
    token = set_registry(registry)
    try:
        clear_registry()
        with pytest.raises(RuntimeError, match="No active Registry"):
            get_registry()
    finally:
        reset_registry(token)
