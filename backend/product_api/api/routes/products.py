"""Products Routes - verb + path bound to a rule table and a handler.

Invariants:
    - Every route resolves its RequestRules dependency BEFORE the repository
      dependency, so a rejected request never opens a database session
    - Routes only wrap handler results in their {"data": ...} envelope
    - Paths are relative; the /api/products prefix is applied in main.create_app
"""

import logging

from fastapi import APIRouter, Depends, status

from product_api.api.dependencies import get_product_repository
from product_api.api.openapi_docs import (
    NOT_FOUND, PRODUCTS_TAG, bad_request, route_extra,
)
from product_api.api.request_rules import RequestRules, ValidatedRequest
from product_api.core.product_rules import (
    CREATE_PRODUCT_RULES, DELETE_PRODUCT_RULES, GET_PRODUCT_RULES,
    TOGGLE_AVAILABILITY_RULES, UPDATE_PRODUCT_RULES,
)
from product_api.core.repository_protocols import ProductRepository
from product_api.schemas.product import (
    MessageEnvelope, ProductCreate, ProductEnvelope, ProductListEnvelope,
    ProductUpdate,
)
from product_api.services import product_handlers

logger = logging.getLogger(__name__)
router = APIRouter(tags=[PRODUCTS_TAG])


@router.get(
    "",
    response_model=ProductListEnvelope,
    summary="Get a list of products",
    description="Return a list of products",
)
async def list_products(
    repo: ProductRepository = Depends(get_product_repository),
):
    return {"data": await product_handlers.list_products(repo)}


@router.get(
    "/{id}",
    response_model=ProductEnvelope,
    summary="Get a product by ID",
    description="Return a product based on its unique ID",
    responses={**bad_request("Bad Request - Invalid ID"), **NOT_FOUND},
    openapi_extra=route_extra("The ID of the product to retrieve"),
)
async def get_product(
    req: ValidatedRequest = Depends(RequestRules(GET_PRODUCT_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    return {"data": await product_handlers.get_product(repo, req.product_id)}


@router.post(
    "",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new Product",
    description="Returns a new record in the database",
    responses=bad_request("Bad Request - invalid input data"),
    openapi_extra=route_extra(body=ProductCreate),
)
async def create_product(
    req: ValidatedRequest[ProductCreate] = Depends(
        RequestRules(CREATE_PRODUCT_RULES, ProductCreate),
    ),
    repo: ProductRepository = Depends(get_product_repository),
):
    return {"data": await product_handlers.create_product(repo, req.body)}


@router.put(
    "/{id}",
    response_model=ProductEnvelope,
    summary="Updates a product with user input",
    description="Returns the updated product",
    responses={
        **bad_request("Bad Request - Invalid ID or Invalid input data"),
        **NOT_FOUND,
    },
    openapi_extra=route_extra(
        "The ID of the product to update", body=ProductUpdate,
    ),
)
async def update_product(
    req: ValidatedRequest[ProductUpdate] = Depends(
        RequestRules(UPDATE_PRODUCT_RULES, ProductUpdate),
    ),
    repo: ProductRepository = Depends(get_product_repository),
):
    return {
        "data": await product_handlers.update_product(
            repo, req.product_id, req.body,
        ),
    }


@router.patch(
    "/{id}",
    response_model=ProductEnvelope,
    summary="Update Product availability",
    description="Returns the updated availability",
    responses={**bad_request("Bad Request - Invalid ID"), **NOT_FOUND},
    openapi_extra=route_extra("The ID of the product to toggle"),
)
async def toggle_availability(
    req: ValidatedRequest = Depends(RequestRules(TOGGLE_AVAILABILITY_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    return {
        "data": await product_handlers.toggle_availability(repo, req.product_id),
    }


@router.delete(
    "/{id}",
    response_model=MessageEnvelope,
    summary="Delete a Product by ID",
    description="Returns a confirmation message",
    responses={**bad_request("Bad Request - Invalid ID"), **NOT_FOUND},
    openapi_extra=route_extra("The ID of the product to delete"),
)
async def delete_product(
    req: ValidatedRequest = Depends(RequestRules(DELETE_PRODUCT_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    return {"data": await product_handlers.delete_product(repo, req.product_id)}
