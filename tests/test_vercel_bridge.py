"""Tests for the Vercel handler bridge and the api/ entry points."""

import importlib
import threading
from http.server import HTTPServer

import pytest
import requests

from status_server.config import StatusConfig
from status_server.server import create_app
from status_server.vercel import make_handler

from conftest import SECRET


@pytest.fixture
def serve():
    """Serve a handler class on an ephemeral port, yield its base URL."""
    servers = []

    def _serve(handler_class):
        server = HTTPServer(("127.0.0.1", 0), handler_class)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield _serve

    for server in servers:
        server.shutdown()
        server.server_close()


def test_bridge_serves_get(serve):
    base_url = serve(make_handler(create_app(StatusConfig(has_key=True))))

    response = requests.get(f"{base_url}/api/diagnostics", timeout=5)

    assert response.status_code == 200
    assert response.headers["Content-Type"].startswith("application/json")
    assert response.json()["keyStatus"] == "configured"


def test_bridge_rejects_post(serve):
    base_url = serve(make_handler(create_app(StatusConfig())))

    response = requests.post(f"{base_url}/api/health", json={"hello": "world"}, timeout=5)

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_bridge_turns_app_crash_into_500(serve):
    def broken_app(environ, start_response):
        raise RuntimeError("boom")

    base_url = serve(make_handler(broken_app))

    response = requests.get(f"{base_url}/api/health", timeout=5)

    assert response.status_code == 500
    assert response.json() == {"error": "RuntimeError", "message": "boom"}


@pytest.mark.parametrize("method", ["PUT", "DELETE", "TRACE", "PROPFIND"])
def test_bridge_forwards_any_method_to_app(serve, method):
    base_url = serve(make_handler(create_app(StatusConfig())))

    response = requests.request(method, f"{base_url}/api/health", timeout=5)

    assert response.status_code == 405
    assert response.headers["Content-Type"].startswith("application/json")
    assert response.json() == {"error": "Method not allowed"}


def test_bridge_head_has_no_body(serve):
    base_url = serve(make_handler(create_app(StatusConfig())))

    response = requests.head(f"{base_url}/api/health", timeout=5)

    assert response.status_code == 405
    assert response.content == b""


def test_bridge_passes_preflight_and_query(serve):
    seen = {}

    def echo_app(environ, start_response):
        seen.update(
            method=environ["REQUEST_METHOD"],
            path=environ["PATH_INFO"],
            query=environ["QUERY_STRING"],
            origin=environ.get("HTTP_ORIGIN"),
        )
        start_response("204 No Content", [("Access-Control-Allow-Origin", "https://uxaudit.app")])
        return [b""]

    base_url = serve(make_handler(echo_app))

    response = requests.options(
        f"{base_url}/api/diagnostics?verbose=1", headers={"Origin": "https://uxaudit.app"}, timeout=5
    )

    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "https://uxaudit.app"
    assert seen == {"method": "OPTIONS", "path": "/api/diagnostics", "query": "verbose=1", "origin": "https://uxaudit.app"}


def test_bridge_closes_app_iterable(serve):
    closed = []

    class Body:
        def __iter__(self):
            yield b'{"status":'
            yield b'"healthy"}'

        def close(self):
            closed.append(True)

    def streaming_app(environ, start_response):
        start_response("200 OK", [("Content-Type", "application/json")])
        return Body()

    base_url = serve(make_handler(streaming_app))

    response = requests.get(f"{base_url}/api/health", timeout=5)

    assert response.json() == {"status": "healthy"}
    assert closed == [True]


@pytest.mark.parametrize("module_name,route", [("api.health", "/api/health"), ("api.diagnostics", "/api/diagnostics")])
def test_entry_points(serve, monkeypatch, module_name, route):
    monkeypatch.setenv("OPENROUTER_API_KEY", SECRET)
    module = importlib.reload(importlib.import_module(module_name))

    base_url = serve(module.handler)
    response = requests.get(f"{base_url}{route}", timeout=5)

    assert response.status_code == 200
    assert SECRET not in response.text
