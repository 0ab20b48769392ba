"""Error Hierarchy - typed, categorized exceptions for all order failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised at the point of violation and propagate unchanged;
      only the API layer translates them into responses
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with OrdersError base: FastAPI global handler catches all
    - OrderCanceledError subclasses InvalidArgumentError: callers that only know
      the two failure kinds (not found / invalid argument) still distinguish it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_id: int | None = None
    debug_info: dict[str, Any] | None = None


class OrdersError(Exception):
    """Base exception for all order errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"order_id": self.context.order_id},
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class OrderNotFoundError(OrdersError):
    """Referenced order id does not exist."""
    def __init__(self, order_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            f"No order found with id {order_id}",
            "ORDER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.order_id = order_id


class InvalidArgumentError(OrdersError):
    """Required argument missing or out of bounds."""
    def __init__(
        self,
        message: str,
        argument: str,
        context: ErrorContext | None = None,
        code: str = "INVALID_ARGUMENT",
        category: ErrorCategory = ErrorCategory.VALIDATION,
        http_status: int = 400,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.WARNING, context, http_status,
        )
        self.argument = argument


class OrderCanceledError(InvalidArgumentError):
    """Mutation attempted on an order that is already canceled."""
    def __init__(self, order_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            f"Order {order_id} is canceled and can no longer be modified",
            "order_id", ctx,
            code="ORDER_CANCELED",
            category=ErrorCategory.BUSINESS_RULE,
            http_status=409,
        )
        self.order_id = order_id
