"""Error Hierarchy - typed, categorized exceptions for every Products API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are rendered as-is; infrastructure errors (500-level)
      never expose driver or SQL details
    - to_response() produces the JSON body the client sees

Design Decisions:
    - Single hierarchy with ProductApiError base: one global handler renders all of them
    - Response bodies keep the public contract of the API: {"error": "..."} for
      single-message failures, {"errors": [{field, message}, ...]} for rule failures
"""

from dataclasses import dataclass
from enum import Enum


PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado"
CORS_REJECTED_MESSAGE = "Error de CORS"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN_ORIGIN = "forbidden_origin"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One failed rule: which field, and the message declared for it."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ProductApiError(Exception):
    """Base exception for all Products API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class RequestRulesError(ProductApiError):
    """One or more declared request rules failed."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            f"{len(errors)} request rule(s) failed",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": [e.to_dict() for e in self.errors]}


class ProductNotFoundError(ProductApiError):
    """No product row exists for the requested id."""
    def __init__(self, product_id: int):
        super().__init__(
            PRODUCT_NOT_FOUND_MESSAGE,
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.product_id = product_id


class CorsOriginError(ProductApiError):
    """Request Origin does not match the configured frontend origin."""
    def __init__(self, origin: str):
        super().__init__(
            CORS_REJECTED_MESSAGE,
            "CORS_ORIGIN_REJECTED", ErrorCategory.FORBIDDEN_ORIGIN,
            ErrorSeverity.WARNING, 403,
        )
        self.origin = origin


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation

    def to_response(self) -> dict:
        # Driver-level detail stays in the logs
        return {"error": INTERNAL_ERROR_MESSAGE}
