"""Product Schemas - typed request shapes and JSON envelopes for the products routes.

Invariants:
    - ProductCreate carries name and price only; availability is always True on insert
    - ProductUpdate is a full replacement: name, price and availability all required
    - The toggle route has no body shape at all
    - Single-product responses expose createdAt/updatedAt; list items never do
    - Every success body is {"data": ...}

Design Decisions:
    - Request shapes coerce loosely (numeric strings, "true"/"1" booleans): the request
      rules have already decided what is acceptable, these models only give it types
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ─── Request shapes ─────────────────────────────────────────────

class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1, examples=["Monitor Curvo de 49 Pulgadas"])
    price: float = Field(gt=0, examples=[800])


class ProductUpdate(BaseModel):
    """Body of PUT /api/products/{id}."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1, examples=["Monitor Curvo de 49 Pulgadas"])
    price: float = Field(gt=0, examples=[800])
    availability: bool = Field(examples=[True])


# ─── Response shapes ────────────────────────────────────────────

class ProductSummary(BaseModel):
    """Product as listed: no timestamps."""
    model_config = ConfigDict(from_attributes=True, title="Product")

    id: int = Field(description="The Product ID", examples=[1])
    name: str = Field(description="The Product Name", examples=["Monitor Curvo de 49 pulgadas"])
    price: float = Field(description="The Product Price", examples=[800])
    availability: bool = Field(description="The Product Availability", examples=[True])


class ProductResponse(ProductSummary):
    """Single product, including persistence timestamps."""
    model_config = ConfigDict(from_attributes=True, title="ProductDetail")

    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(None, serialization_alias="updatedAt")


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductSummary]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["Producto eliminado correctamente"])


# ─── Error shapes ───────────────────────────────────────────────

class ErrorResponse(BaseModel):
    error: str = Field(examples=["Producto no encontrado"])


class FieldErrorOut(BaseModel):
    field: str = Field(examples=["id"])
    message: str = Field(examples=["ID no Válido"])


class ValidationErrorResponse(BaseModel):
    errors: list[FieldErrorOut]
