"""Docs, Health and Access Log - the non-data surface of the app.

Tests cover:
    - /docs serves Swagger UI with the configured site title
    - /openapi.json documents every products route, the integer id and request bodies
    - /health/ is always 200; /health/ready reflects database reachability
    - every request produces one access-log record
"""

import logging

import pytest

from product_api.infrastructure.database import DatabaseSessionManager


# ─── Docs ────────────────────────────────────────────────────────

async def test_docs_page_served(gateway_client):
    res = await gateway_client.get("/docs")

    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "Products REST API Docs" in res.text


async def test_openapi_documents_products_routes(gateway_client):
    spec = (await gateway_client.get("/openapi.json")).json()

    assert spec["info"]["title"] == "Products REST API"
    assert {"get", "post"} <= set(spec["paths"]["/api/products"])
    assert {"get", "put", "patch", "delete"} <= set(spec["paths"]["/api/products/{id}"])
    assert "Products" in {t["name"] for t in spec["tags"]}


async def test_openapi_documents_integer_id_and_bodies(gateway_client):
    spec = (await gateway_client.get("/openapi.json")).json()
    by_id = spec["paths"]["/api/products/{id}"]

    for method in ("get", "put", "patch", "delete"):
        params = by_id[method]["parameters"]
        assert params[0]["name"] == "id"
        assert params[0]["schema"] == {"type": "integer"}
        assert {"400", "404"} <= set(by_id[method]["responses"])

    create_body = spec["paths"]["/api/products"]["post"]["requestBody"]
    create_props = create_body["content"]["application/json"]["schema"]["properties"]
    assert set(create_props) == {"name", "price"}

    update_body = by_id["put"]["requestBody"]
    update_props = update_body["content"]["application/json"]["schema"]["properties"]
    assert set(update_props) == {"name", "price", "availability"}
    assert "requestBody" not in by_id["patch"]


# ─── Health ──────────────────────────────────────────────────────

async def test_liveness_probe(gateway_client):
    res = await gateway_client.get("/health/")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["version"] == "1.0.0"


async def test_readiness_without_database_is_503(gateway_client):
    res = await gateway_client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_database_is_200(app, gateway_client):
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    app.state.db_manager = manager
    try:
        res = await gateway_client.get("/health/ready")
    finally:
        await manager.dispose()

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


# ─── Access log ──────────────────────────────────────────────────

async def test_each_request_is_logged(gateway_client, caplog):
    caplog.set_level(logging.INFO, logger="product_api.access")

    await gateway_client.get("/api/products/abc")

    records = [r for r in caplog.records if r.name == "product_api.access"]
    assert len(records) == 1
    assert records[0].method == "GET"
    assert records[0].path == "/api/products/abc"
    assert records[0].status_code == 400


@pytest.mark.parametrize("path", ["/api/products", "/health/"])
async def test_access_log_records_duration(gateway_client, caplog, path):
    caplog.set_level(logging.INFO, logger="product_api.access")

    await gateway_client.get(path)

    record = next(r for r in caplog.records if r.name == "product_api.access")
    assert record.duration_ms >= 0
