"""CORS Policy - only the configured frontend origin is served.

Tests cover:
    - foreign Origin -> 403 {"error": "Error de CORS"}, router never reached
    - configured Origin -> normal response with access-control-allow-origin
    - preflight from the configured origin succeeds, from a foreign one is rejected
    - no Origin header -> request passes untouched, or 403 when CORS_ALLOW_MISSING_ORIGIN is off
"""

from httpx import ASGITransport, AsyncClient

from product_api.api.dependencies import get_product_repository
from product_api.main import create_app

PRODUCTS_URL = "/api/products"
ALLOWED = "http://localhost:5173"
FOREIGN = "http://evil.example.com"


async def test_foreign_origin_is_rejected(gateway_client, fake_repo):
    res = await gateway_client.get(PRODUCTS_URL, headers={"Origin": FOREIGN})

    assert res.status_code == 403
    assert res.json() == {"error": "Error de CORS"}
    assert "access-control-allow-origin" not in res.headers
    assert fake_repo.calls == []


async def test_configured_origin_gets_cors_headers(gateway_client):
    res = await gateway_client.get(PRODUCTS_URL, headers={"Origin": ALLOWED})

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


async def test_preflight_from_configured_origin(gateway_client):
    res = await gateway_client.options(
        PRODUCTS_URL,
        headers={
            "Origin": ALLOWED,
            "Access-Control-Request-Method": "POST",
        },
    )

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


async def test_preflight_from_foreign_origin_is_rejected(gateway_client):
    res = await gateway_client.options(
        PRODUCTS_URL,
        headers={
            "Origin": FOREIGN,
            "Access-Control-Request-Method": "DELETE",
        },
    )

    assert res.status_code == 403
    assert res.json() == {"error": "Error de CORS"}


async def test_request_without_origin_passes(gateway_client):
    res = await gateway_client.get(PRODUCTS_URL)

    assert res.status_code == 200
    assert res.json() == {"data": []}


async def test_request_without_origin_rejected_when_origin_required(settings, fake_repo):
    strict = create_app(settings.model_copy(update={"cors_allow_missing_origin": False}))
    strict.dependency_overrides[get_product_repository] = lambda: fake_repo

    async with AsyncClient(
        transport=ASGITransport(app=strict), base_url="http://test",
    ) as c:
        missing = await c.get(PRODUCTS_URL)
        allowed = await c.get(PRODUCTS_URL, headers={"Origin": ALLOWED})

    assert missing.status_code == 403
    assert missing.json() == {"error": "Error de CORS"}
    assert allowed.status_code == 200
    assert fake_repo.calls == [("find_all", ("created_at", "updated_at"))]
