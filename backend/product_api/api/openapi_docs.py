"""OpenAPI Documentation - route metadata helpers and the Swagger UI page.

Invariants:
    - The integer `id` path parameter and JSON request bodies are documented even
      though routes read them through RequestRules instead of typed parameters
    - Swagger UI page title comes from settings; the OpenAPI JSON stays at
      app.openapi_url
"""

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from product_api.schemas.product import ErrorResponse, ValidationErrorResponse

PRODUCTS_TAG = "Products"

OPENAPI_TAGS = [
    {
        "name": PRODUCTS_TAG,
        "description": "API operations related to products",
    },
    {
        "name": "health",
        "description": "Liveness and readiness probes",
    },
]


def id_parameter(description: str) -> dict:
    return {
        "in": "path",
        "name": "id",
        "description": description,
        "required": True,
        "schema": {"type": "integer"},
    }


def json_body(model: type[BaseModel]) -> dict:
    return {
        "required": True,
        "content": {
            "application/json": {"schema": model.model_json_schema()},
        },
    }


def route_extra(
    id_description: str | None = None, body: type[BaseModel] | None = None,
) -> dict:
    """openapi_extra for a products route."""
    extra: dict = {}
    if id_description:
        extra["parameters"] = [id_parameter(id_description)]
    if body is not None:
        extra["requestBody"] = json_body(body)
    return extra


def bad_request(description: str) -> dict:
    return {400: {"model": ValidationErrorResponse, "description": description}}


NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product Not Found"}}


def mount_docs(app: FastAPI, docs_url: str, site_title: str) -> None:
    """Serve Swagger UI for the app's OpenAPI document at `docs_url`."""

    @app.get(docs_url, include_in_schema=False)
    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(
            openapi_url=app.openapi_url, title=site_title,
        )
