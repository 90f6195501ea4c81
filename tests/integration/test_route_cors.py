"""Integration tests for per-route CORS policies (corsgate/api/cors.py)."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from corsgate.api.cors import RouteCors
from corsgate.models.cors import CorsOptions

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def http_client():
    """App with one open router and one router guarded by an explicit policy."""
    app = FastAPI()

    open_cors = RouteCors()
    open_router = open_cors.router()

    auth_cors = RouteCors(
        CorsOptions(
            origins=["https://cerebrus.dev", "auth.cerebrus.dev"],
            methods=["POST"],
            allowed_headers=["X-TOKEN"],
            exposed_headers=["X-Session"],
        )
    )
    auth_router = auth_cors.router()

    @open_router.get("/public")
    async def public():
        return {"status": "ok"}

    @open_router.get("/raw")
    async def raw():
        return JSONResponse({"a": 1})

    @auth_router.post("/auth")
    async def auth():
        return JSONResponse({"success": True}, headers={"Vary": "Cookie"})

    @auth_router.get("/auth")
    async def auth_status():
        return {"status": "unreachable"}

    auth_router.add_api_route("/auth", auth_cors.preflight, methods=["OPTIONS"])

    app.include_router(open_router)
    app.include_router(auth_router)

    @app.get("/unguarded")
    async def unguarded():
        return {"status": "ok"}

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://auth.cerebrus.dev"
    ) as client:
        yield client


@pytest.mark.asyncio
async def test_open_route_gets_wildcard_headers(http_client):
    response = await http_client.get("/public")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert "access-control-allow-methods" not in response.headers


@pytest.mark.asyncio
async def test_route_returning_response_object_keeps_cors_headers(http_client):
    """Headers are attached even when the endpoint builds its own Response."""
    response = await http_client.get("/raw")

    assert response.status_code == 200
    assert response.json() == {"a": 1}
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-max-age"] == "5"


@pytest.mark.asyncio
async def test_routes_outside_router_untouched(http_client):
    response = await http_client.get("/unguarded")

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_route_preflight_accepted(http_client):
    response = await http_client.options(
        "/auth",
        headers={
            "Origin": "https://cerebrus.dev",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "x-token",
        },
    )

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "https://cerebrus.dev"
    assert response.headers["access-control-allow-headers"] == "X-TOKEN,Content-Type"
    assert response.headers["access-control-allow-methods"] == "POST"
    assert response.headers["access-control-expose-headers"] == "X-Session"
    assert response.headers["vary"] == "Accept-Encoding, Origin"


@pytest.mark.asyncio
async def test_route_preflight_wrong_origin(http_client):
    response = await http_client.options("/auth", headers={"Origin": "https://other.dev"})

    assert response.status_code == 400
    assert response.content == b""
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_route_preflight_wrong_headers(http_client):
    response = await http_client.options(
        "/auth",
        headers={
            "Origin": "https://cerebrus.dev",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization",
        },
    )

    assert response.status_code == 406


@pytest.mark.asyncio
async def test_route_actual_request_accepted(http_client):
    """Host matches a configured entry, so the route runs and headers are attached."""
    response = await http_client.post("/auth")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert response.headers["access-control-allow-origin"] == "auth.cerebrus.dev"
    assert response.headers["access-control-expose-headers"] == "X-Session"
    assert response.headers["vary"] == "Cookie, Accept-Encoding, Origin"


@pytest.mark.asyncio
async def test_route_actual_method_rejected(http_client):
    """The policy ends the request before the handler runs."""
    response = await http_client.get("/auth")

    assert response.status_code == 405
    assert response.content == b""


@pytest.mark.asyncio
async def test_route_actual_host_rejected():
    app = FastAPI()
    guarded = RouteCors(CorsOptions(origins=["api.example.com"]))
    router = guarded.router()

    @router.get("/data")
    async def data():
        return {"data": []}

    app.include_router(router)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/data")

    assert response.status_code == 400
    assert response.content == b""


def test_route_class_is_api_route():
    from fastapi.routing import APIRoute

    route_class = RouteCors().route_class()

    assert issubclass(route_class, APIRoute)
    assert RouteCors().router().route_class is not APIRoute


@pytest.mark.asyncio
async def test_route_rejection_logged_once(http_client):
    """Route-level rejections and preflights are logged only by the engine."""
    with patch("corsgate.services.cors.logger") as mock_logger:
        await http_client.get("/auth")
        await http_client.options(
            "/auth",
            headers={"Origin": "https://cerebrus.dev", "Access-Control-Request-Method": "POST"},
        )

    assert mock_logger.info.call_count == 1
    assert mock_logger.info.call_args.args[0] == "cors_request_rejected"
    assert mock_logger.warning.call_count == 0
