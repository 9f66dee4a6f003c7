"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId is the integer primary key assigned by the database
    - A ProductId outside PRODUCT_ID_RANGE (the 32-bit INTEGER column) names no row
    - TIMESTAMP_FIELDS are the columns list responses leave out
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)

PRODUCT_ID_RANGE = range(-(2**31), 2**31)


# ─── Column Groups ───────────────────────────────────────────────

TIMESTAMP_FIELDS: tuple[str, ...] = ("created_at", "updated_at")


PRODUCT_DELETED_MESSAGE = "Producto eliminado correctamente"
