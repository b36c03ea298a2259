"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any, Sequence


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PROFILE_INPUT = "INVALID_PROFILE_INPUT"
    SELF_ENDORSEMENT = "SELF_ENDORSEMENT"

    # Conflict errors (409)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class ProfileNotFoundError(AppException):
    """No chef profile exists for the identity."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Chef profile not found: {owner_id}",
            status_code=404,
            details={"owner_id": owner_id},
        )


class ProfileAlreadyExistsError(AppException):
    """The caller already owns a chef profile."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="A chef profile already exists for this identity",
            status_code=409,
            details={"owner_id": owner_id},
        )


class InvalidProfileInputError(AppException):
    """One or more profile fields failed validation.

    Every field failure shares the same error code; ``details`` names the
    checked field group and lists each violated rule.
    """

    def __init__(self, field: str, violations: Sequence[str]) -> None:
        self.field = field
        self.violations = [str(v) for v in violations]
        super().__init__(
            error_code=ErrorCode.INVALID_PROFILE_INPUT,
            message=f"Invalid {field} input",
            status_code=400,
            details={"field": field, "violations": self.violations},
        )


class SelfEndorsementError(AppException):
    """A chef tried to endorse their own profile."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.SELF_ENDORSEMENT,
            message="You cannot endorse your own profile",
            status_code=400,
        )
