"""CORS Policy - one allowed browser origin, everything else rejected before routing.

Invariants:
    - A request whose Origin header equals the configured origin gets the standard
      CORS response headers (CORSMiddleware)
    - A request whose Origin header differs is answered 403 {"error": "Error de CORS"}
      and never reaches the router, preflights included
    - Requests without an Origin header (same-origin, curl, probes) pass through while
      allow_missing_origin is on (CORS_ALLOW_MISSING_ORIGIN); with it off they are
      rejected like a foreign origin
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_api.core.errors import CorsOriginError

logger = logging.getLogger(__name__)


def origin_guard(allowed_origin: str, allow_missing_origin: bool = True):
    """Build an HTTP middleware that rejects foreign origins."""
    allowed = allowed_origin.rstrip("/")

    async def reject_foreign_origin(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is None and allow_missing_origin:
            return await call_next(request)
        if origin is None or origin.rstrip("/") != allowed:
            exc = CorsOriginError(origin or "")
            logger.warning(
                f"CORS rejected: {origin}",
                extra={"origin": origin, "error_code": exc.code},
            )
            return JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
        return await call_next(request)

    return reject_foreign_origin


def configure_cors(
    app: FastAPI, allowed_origin: str, allow_missing_origin: bool = True,
) -> None:
    """Install CORS headers and the origin guard (guard runs first)."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[allowed_origin.rstrip("/")],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(origin_guard(allowed_origin, allow_missing_origin))
