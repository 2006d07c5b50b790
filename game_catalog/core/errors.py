"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - ForbiddenError never names the resource it refused (no existence leaks)

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Specific subclasses (SelfParentError, ItemNotFoundError, ...) keep the generic
      category but carry their own code, so clients can branch on code alone
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        field: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.field = field

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.field is not None:
            body["field"] = self.field
        if self.context.resource_type is not None:
            body["context"] = {
                "resource_type": self.context.resource_type,
                "resource_id": self.context.resource_id,
            }
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CatalogError):
    """Malformed or missing input."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, field,
        )


class SelfParentError(ValidationError):
    """A category was asked to become its own parent."""
    def __init__(self, category_id: int, context: ErrorContext | None = None):
        super().__init__(
            "Category cannot be its own parent", "parent_id", context,
        )
        self.code = "CATEGORY_SELF_PARENT"
        self.category_id = category_id


class CategoryCycleError(ValidationError):
    """Re-parenting would place a category beneath one of its descendants."""
    def __init__(
        self, category_id: int, parent_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Category {category_id} cannot be moved under its descendant {parent_id}",
            "parent_id", context,
        )
        self.code = "CATEGORY_CYCLE"
        self.category_id = category_id
        self.parent_id = parent_id


class AuthenticationError(CatalogError):
    """Missing, invalid, or expired credentials."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(CatalogError):
    """Actor may not operate on the requested resource."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "You do not have permission to perform this action",
            "FORBIDDEN", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"].pop("context", None)
        return response


class ResourceNotFoundError(CatalogError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} with ID {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class ItemNotFoundError(ResourceNotFoundError):
    """Catalog item does not exist."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        super().__init__("Item", item_id, context)
        self.code = "ITEM_NOT_FOUND"
        self.item_id = item_id


class InventoryEntryNotFoundError(ResourceNotFoundError):
    """User holds no entry for the item."""
    def __init__(self, user_id: int, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__("Inventory entry", f"{user_id}:{item_id}", ctx)
        self.message = f"Item with ID {item_id} not found in user's inventory"
        self.args = (self.message,)
        self.code = "INVENTORY_ENTRY_NOT_FOUND"
        self.user_id = user_id
        self.item_id = item_id


class ConflictError(CatalogError):
    """Uniqueness constraint violated."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409, field,
        )


class DuplicateNameError(ConflictError):
    """A category with this name already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(f"Category name '{name}' already exists", "name", context)
        self.code = "DUPLICATE_NAME"
        self.name = name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
