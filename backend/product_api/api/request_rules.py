"""Request Rules Dependency - runs a route's rule table before its handler.

Invariants:
    - Rules see the raw path params (strings) and the raw JSON body (or {} when the
      body is missing, not JSON, or not an object)
    - Any failing rule raises RequestRulesError with EVERY failure; the handler and
      the repository dependency are never reached
    - Only after all rules pass is the id converted to int and the body bound to its
      typed shape

Design Decisions:
    - Implemented as a callable dependency instance per route, so the rule table is
      visible at the route declaration (validate -> handle reads top to bottom)
"""

import json
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from product_api.core.domain_types import ProductId
from product_api.core.errors import FieldError, RequestRulesError
from product_api.core.validation import Location, Rule, evaluate_rules

logger = logging.getLogger(__name__)

BodyT = TypeVar("BodyT", bound=BaseModel)


@dataclass(frozen=True)
class ValidatedRequest(Generic[BodyT]):
    """What a handler receives once its rules have passed."""
    product_id: ProductId | None = None
    body: BodyT | None = None


async def read_json_body(request: Request) -> dict:
    """Decode a JSON object body; anything else reads as an empty object."""
    if "json" not in request.headers.get("content-type", ""):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        decoded = json.loads(raw)
    except ValueError:
        logger.warning(f"Unparseable JSON body on {request.url.path}")
        return {}
    return decoded if isinstance(decoded, dict) else {}


def bind_body(model: type[BodyT], body: dict) -> BodyT:
    """Give the accepted body its typed shape."""
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise RequestRulesError([
            FieldError(
                field=".".join(str(loc) for loc in e["loc"]) or "body",
                message=e["msg"],
            )
            for e in exc.errors()
        ])


class RequestRules:
    """FastAPI dependency: evaluate `rules`, then bind the id and the body."""

    def __init__(
        self, rules: list[Rule], body_model: type[BaseModel] | None = None,
    ):
        self.rules = list(rules)
        self.body_model = body_model
        self._reads_body = body_model is not None or any(
            r.location is Location.BODY for r in self.rules
        )

    async def __call__(self, request: Request) -> ValidatedRequest:
        path_params = dict(request.path_params)
        body = await read_json_body(request) if self._reads_body else {}

        errors = evaluate_rules(self.rules, path_params, body)
        if errors:
            raise RequestRulesError(errors)

        product_id = (
            ProductId(int(path_params["id"])) if "id" in path_params else None
        )
        payload = (
            bind_body(self.body_model, body) if self.body_model else None
        )
        return ValidatedRequest(product_id=product_id, body=payload)
