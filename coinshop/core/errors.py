"""Error Hierarchy - typed, classified exceptions for all Coin Shop failure modes.

Invariants:
    - Every error has a code (str), kind (ErrorKind), severity (ErrorSeverity)
    - Subclassing encodes the classification: InsufficientFundsError is an
      InvalidRequestError, ReceiverNotFoundError is an AccountNotFoundError
    - INTERNAL errors never expose their message to clients (to_response)
    - http_status defaults from kind; routes may override NOT_FOUND -> 400

Design Decisions:
    - Single hierarchy with CoinShopError base: one FastAPI handler catches all
    - ErrorKind is the stable classifier for boundary code (no message matching)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Top-level error classification used by the HTTP boundary."""
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error."


@dataclass
class ErrorContext:
    """Observability context attached to an error (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None
    debug_info: dict[str, Any] | None = None


class CoinShopError(Exception):
    """Base exception for all Coin Shop errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = (
            http_status if http_status is not None
            else HTTP_STATUS_BY_KIND[kind]
        )

    @property
    def public_message(self) -> str:
        """Message safe to show to clients."""
        if self.kind is ErrorKind.INTERNAL:
            return INTERNAL_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"errors": self.public_message, "code": self.code}


# ─── Invalid Request (400) ──────────────────────────────────────

class InvalidRequestError(CoinShopError):
    """Malformed or rule-violating input."""
    def __init__(
        self, message: str = "Invalid request.",
        code: str = "INVALID_REQUEST", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorKind.INVALID_REQUEST,
            ErrorSeverity.WARNING, context,
        )


class InvalidAmountError(InvalidRequestError):
    """Transfer amount is not a positive integer."""
    def __init__(self, amount: object = None, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request: transfer amount must be positive.",
            "INVALID_AMOUNT", context,
        )
        self.amount = amount


class SelfTransferError(InvalidRequestError):
    """Sender and receiver are the same account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request: cannot send coins to yourself.",
            "SELF_TRANSFER", context,
        )


class InsufficientFundsError(InvalidRequestError):
    """Sender balance is lower than the transfer amount."""
    def __init__(
        self, balance: int, amount: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request: not enough coins for the transfer.",
            "INSUFFICIENT_FUNDS", context,
        )
        self.balance = balance
        self.amount = amount


class ItemRequiredError(InvalidRequestError):
    """Purchase attempted without an item name."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request: item name is required.",
            "ITEM_REQUIRED", context,
        )


class InsufficientCoinsError(InvalidRequestError):
    """Account balance is lower than the item price."""
    def __init__(
        self, balance: int, price: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request: not enough coins to buy the item.",
            "INSUFFICIENT_COINS", context,
        )
        self.balance = balance
        self.price = price


# ─── Not Found (404 by default, 400 on business routes) ─────────

class NotFoundError(CoinShopError):
    """Requested resource does not exist."""
    def __init__(
        self, message: str = "Not found.", code: str = "NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorKind.NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )


class AccountNotFoundError(NotFoundError):
    """Account lookup by username failed."""
    def __init__(
        self, username: str, message: str = "Not found: user does not exist.",
        code: str = "ACCOUNT_NOT_FOUND", context: ErrorContext | None = None,
    ):
        super().__init__(message, code, context)
        self.username = username


class SenderNotFoundError(AccountNotFoundError):
    """Transfer sender does not exist."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            username, "Not found: sender does not exist.",
            "SENDER_NOT_FOUND", context,
        )


class ReceiverNotFoundError(AccountNotFoundError):
    """Transfer receiver does not exist."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            username, "Not found: receiver does not exist.",
            "RECEIVER_NOT_FOUND", context,
        )


class ItemNotFoundError(NotFoundError):
    """Item is not in the catalog."""
    def __init__(self, item_name: str, context: ErrorContext | None = None):
        super().__init__(
            "Not found: item does not exist.", "ITEM_NOT_FOUND", context,
        )
        self.item_name = item_name


# ─── Unauthorized (401) ─────────────────────────────────────────

class UnauthorizedError(CoinShopError):
    """Credentials or token rejected."""
    def __init__(
        self, message: str = "Unauthorized.", code: str = "UNAUTHORIZED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorKind.UNAUTHORIZED,
            ErrorSeverity.WARNING, context,
        )


class InvalidPasswordError(UnauthorizedError):
    """Password does not match the stored hash."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized: invalid password.", "INVALID_PASSWORD", context,
        )


class MissingTokenError(UnauthorizedError):
    """Protected route called without a bearer token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized: missing token.", "MISSING_TOKEN", context,
        )


class InvalidTokenError(UnauthorizedError):
    """Bearer token failed signature, expiry or claim checks."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unauthorized: {reason}", "INVALID_TOKEN", context,
        )


# ─── Internal (500) ─────────────────────────────────────────────

class InternalError(CoinShopError):
    """Unexpected server-side failure."""
    def __init__(
        self, message: str, code: str = "INTERNAL_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorKind.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed: {message}", "DATABASE_ERROR", context,
        )
        self.operation = operation
