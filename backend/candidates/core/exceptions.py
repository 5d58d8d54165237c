"""
Custom exception hierarchy for structured error handling.

WHY: Custom exceptions provide:
1. Consistent error handling across the API
2. HTTP status code mapping for FastAPI
3. Structured error responses with contextual data

Every failure raised by the candidate service aborts the operation before
anything is written. Nothing in this module is retried.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (overrides class default)
            **context: Additional context for debugging (filtered in to_dict)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        sensitive_fields = {"password", "token", "secret", "key", "api_key"}
        filtered_context = {
            k: v for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": filtered_context if filtered_context else None,
        }


# ============================================================================
# Validation & Input Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when input validation fails.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"


class InvalidArgumentError(ValidationError):
    """
    Raised when an identifier or a required input field is missing.

    WHY: A missing id, a blank name or an absent party/election reference
    is a malformed request, not a broken business rule.

    HTTP Status: 400 Bad Request
    """

    default_message = "Invalid argument"


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(AppException):
    """
    Raised when a requested resource doesn't exist.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Resource not found"


class CandidateNotFoundError(ResourceNotFoundError):
    """Raised when no candidate exists with the requested id."""

    default_message = "Candidate not found"


# ============================================================================
# Business Logic Exceptions
# ============================================================================


class BusinessRuleViolation(AppException):
    """
    Raised when a business rule is violated.

    WHY: 422 Unprocessable Entity indicates the request was well-formed
    but conflicts with the candidate rules (name format, party number
    prefix, registration uniqueness, election lock).

    HTTP Status: 422 Unprocessable Entity
    """

    status_code = 422
    default_message = "Business rule violation"


class CandidateValidationError(BusinessRuleViolation):
    """
    Raised when candidate input is present but breaks a format rule.

    Examples: a name without a last name, or an election number that
    does not start with the party's official number.
    """

    default_message = "Invalid candidate"


class DuplicateCandidateError(BusinessRuleViolation):
    """
    Raised when another candidate already holds the same election number
    in the same election.
    """

    default_message = "Duplicate candidate"


class ElectionLockedError(BusinessRuleViolation):
    """
    Raised when a candidate's election has recorded votes.

    Once votes exist, the candidates of that election can no longer be
    moved to another election or deleted.
    """

    default_message = "This election already has votes"


class InvalidReferenceError(BusinessRuleViolation):
    """
    Raised when a party or election reference cannot be resolved.

    WHY: Lookup failures from the peer services are reported to the
    caller as an invalid reference, naming which reference failed.
    """

    default_message = "Invalid party or election"


# ============================================================================
# External Service Exceptions
# ============================================================================


class ExternalServiceError(AppException):
    """
    Base exception for external service failures.

    HTTP Status: 502 Bad Gateway
    """

    status_code = 502
    default_message = "External service error"


class LookupServiceError(ExternalServiceError):
    """
    Raised when a Party or Election lookup fails.

    Subclasses mark the two error kinds the lookup clients distinguish.
    """

    default_message = "Lookup service error"


class LookupNotFoundError(LookupServiceError):
    """
    Raised when the peer service answers 404 for the requested record.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Referenced record not found"


class LookupServerError(LookupServiceError):
    """
    Raised on any other upstream failure: 5xx or unexpected 4xx answers,
    timeouts, connection errors and malformed response bodies.

    HTTP Status: 502 Bad Gateway
    """

    default_message = "Lookup service unavailable"
