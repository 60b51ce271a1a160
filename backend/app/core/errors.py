"""Error Hierarchy — typed, categorized exceptions for all craft failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors are 400-level; infrastructure errors are 500-level
    - to_response() always carries a top-level "message" for the game client
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CraftError base: FastAPI global handler catches all (ADR: uniform error shape)
    - GenerationAPIError never reaches the client: the retry loop absorbs it and
      the combination falls back to a static element
"""

from dataclasses import dataclass, field
from enum import Enum
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
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """The words of the request that failed, for the error log line."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    word1: str | None = None
    word2: str | None = None


class CraftError(Exception):
    """Base exception for all craft errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str = "Internal Server Error",
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.public_message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class MissingParametersError(CraftError):
    """One or both words to combine were missing or blank."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required parameters: {', '.join(missing)}",
            "MISSING_PARAMETERS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, "Bad Request",
        )
        self.missing = missing


class WordTooLongError(CraftError):
    """A word is longer than the pair columns allow once normalized."""
    def __init__(self, field_name: str, max_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"{field_name} exceeds {max_length} characters after normalization",
            "WORD_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, "Bad Request",
        )
        self.field_name = field_name
        self.max_length = max_length


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CraftError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class GenerationAPIError(CraftError):
    """Text-generation endpoint call failed (transport, timeout or HTTP status)."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"Generation API error ({api_error_type}): {message}",
            "GENERATION_API_ERROR", category,
            ErrorSeverity.WARNING, context, 503,
        )
        self.api_error_type = api_error_type
        self.status_code = status_code
