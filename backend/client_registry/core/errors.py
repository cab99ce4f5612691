"""Error Hierarchy — typed, categorized exceptions for every registry failure mode.

Invariants:
    - Every error has a message (str), kind (ErrorKind), category (ErrorCategory),
      severity (ErrorSeverity) and http_status
    - Adapters switch on kind, never on message text
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with RegistryError base: one global handler catches all
    - ErrorKind lives in domain_types so core modules share one tag set
"""

from enum import Enum

from client_registry.core.domain_types import ErrorKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


# Customer-facing text per kind, shown next to the technical message
FRIENDLY_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "Invalid ID number.",
    ErrorKind.NON_DIGIT: "Invalid ID number.",
    ErrorKind.WRONG_LENGTH: "Invalid ID number.",
    ErrorKind.INVALID_ID_NUMBER: "Invalid ID number.",
    ErrorKind.DUPLICATE_ID: "Duplicate ID number.",
    ErrorKind.DUPLICATE_MOBILE_NUMBER: "Duplicate mobile number.",
    ErrorKind.CLIENT_NOT_FOUND: "Client not found.",
}


class RegistryError(Exception):
    """Base exception for all client registry errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.category = category
        self.severity = severity
        self.http_status = http_status

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def friendly_message(self) -> str:
        return FRIENDLY_MESSAGES[self.kind]

    def to_response(self) -> dict:
        """Convert to the standard client response envelope."""
        return {
            "resultCode": self.http_status,
            "resultMessageCode": f"api-fm-{self.http_status}",
            "resultMessage": self.message,
            "friendlyCustomerMessage": self.friendly_message,
            "payload": None,
        }


# ─── ID Number Input Errors ─────────────────────────────────────

class IdNumberEmptyError(RegistryError):
    """ID number is missing or empty."""
    def __init__(self):
        super().__init__(
            "ID number cannot be null or empty.",
            ErrorKind.EMPTY_INPUT, ErrorCategory.VALIDATION,
        )


class IdNumberNonDigitError(RegistryError):
    """ID number contains a character other than 0-9."""
    def __init__(self):
        super().__init__(
            "ID number must contain only digits.",
            ErrorKind.NON_DIGIT, ErrorCategory.VALIDATION,
        )


class IdNumberLengthError(RegistryError):
    """ID number is not exactly 13 digits long."""
    def __init__(self, length: int):
        super().__init__(
            "ID number must be exactly 13 digits.",
            ErrorKind.WRONG_LENGTH, ErrorCategory.VALIDATION,
        )
        self.length = length


class InvalidIdNumberError(RegistryError):
    """13-digit ID number failed the checksum."""
    def __init__(self, id_number: str):
        super().__init__(
            "Invalid South African ID number.",
            ErrorKind.INVALID_ID_NUMBER, ErrorCategory.VALIDATION,
        )
        self.id_number = id_number


# ─── Registry State Errors ──────────────────────────────────────

class DuplicateIdError(RegistryError):
    """ID number already belongs to a stored client."""
    def __init__(self, id_number: str):
        super().__init__(
            "Duplicate ID number found.",
            ErrorKind.DUPLICATE_ID, ErrorCategory.CONFLICT,
        )
        self.id_number = id_number


class DuplicateMobileNumberError(RegistryError):
    """Mobile number already belongs to a stored client."""
    def __init__(self, mobile_number: str):
        super().__init__(
            "Duplicate mobile number found.",
            ErrorKind.DUPLICATE_MOBILE_NUMBER, ErrorCategory.CONFLICT,
        )
        self.mobile_number = mobile_number


class ClientNotFoundError(RegistryError):
    """No stored client matches the key or search criteria."""
    def __init__(self, lookup: str | None = None):
        super().__init__(
            "Client not found.",
            ErrorKind.CLIENT_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.lookup = lookup
