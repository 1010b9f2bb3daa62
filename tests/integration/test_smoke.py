"""Smoke tests for unauthenticated endpoints and cross-cutting HTTP behaviour."""

from __future__ import annotations

from tokenauth import create_app
from tokenauth.core.config import TestingConfig
from tokenauth.core.security_headers import SECURITY_HEADERS

from tests.helpers.assertions import assert_problem
from tests.helpers.http import API, login, register


def test_hello(client) -> None:
    resp = client.get(f"{API}/hello")

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Hello, world!"}


def test_health_reports_user_count(client, user) -> None:
    resp = client.get(f"{API}/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["users"] == 1
    assert isinstance(body["version"], str)


def test_security_headers_on_every_response(client) -> None:
    for resp in (client.get(f"{API}/hello"), client.get(f"{API}/missing")):
        for name, value in SECURITY_HEADERS.items():
            assert resp.headers[name] == value


def test_request_id_is_echoed_or_generated(client) -> None:
    echoed = client.get(f"{API}/hello", headers={"X-Request-ID": "req-123"})
    generated = client.get(f"{API}/hello")

    assert echoed.headers["X-Request-ID"] == "req-123"
    assert generated.headers["X-Request-ID"]


def test_cors_allows_configured_origin(client) -> None:
    resp = client.get(f"{API}/hello", headers={"Origin": "http://localhost:3000"})

    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "Access-Control-Allow-Credentials" not in resp.headers


def test_cors_echoes_listed_origin() -> None:
    class ListedOriginsConfig(TestingConfig):
        CORS_ORIGINS = "http://localhost:3000, https://app.example.com"

    client = create_app(ListedOriginsConfig).test_client()

    allowed = client.get(f"{API}/hello", headers={"Origin": "https://app.example.com"})
    foreign = client.get(f"{API}/hello", headers={"Origin": "https://evil.example.com"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "https://app.example.com"
    assert "Access-Control-Allow-Origin" not in foreign.headers


def test_unknown_route_is_problem_json(client) -> None:
    body = assert_problem(client.get(f"{API}/missing"), 404, "not_found")

    assert body["detail"] == "Route '/api/v1/missing' not found"


def test_wrong_method_is_problem_json(client) -> None:
    assert_problem(client.get(f"{API}/auth/login"), 405, "method_not_allowed")


def test_unhandled_error_keeps_store_usable() -> None:
    app = create_app(TestingConfig)

    def boom():
        raise RuntimeError("kaboom")

    app.add_url_rule("/boom", "boom", boom)
    client = app.test_client()

    body = assert_problem(client.get("/boom"), 500, "internal_server_error")
    assert "kaboom" not in body["detail"]

    alice = {"username": "alice", "email": "a@x.com", "password": "secret1"}
    assert register(client, alice).status_code == 201
    assert login(client, "alice", "secret1").status_code == 200


def test_apps_do_not_share_users() -> None:
    first, second = create_app(TestingConfig), create_app(TestingConfig)
    register(first.test_client(), {"username": "alice", "email": "a@x.com", "password": "secret1"})

    assert login(second.test_client(), "alice", "secret1").status_code == 401


def test_login_is_rate_limited() -> None:
    class RateLimitedConfig(TestingConfig):
        RATELIMIT_ENABLED = True
        AUTH_LOGIN_RATE_LIMIT = "2 per minute"

    client = create_app(RateLimitedConfig).test_client()

    statuses = [login(client, "nobody", "secret123").status_code for _ in range(3)]

    assert statuses == [401, 401, 429]
    assert_problem(login(client, "nobody", "secret123"), 429, "too_many_requests")
