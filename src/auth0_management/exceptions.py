"""
Exception hierarchy for the Auth0 Management API client.

API errors map to HTTP status codes and preserve the Auth0 error body
(``statusCode``, ``error``, ``message``, ``errorCode``). Local argument
errors are raised before any request is sent.
"""

from typing import Any, Dict, Optional


class ManagementApiError(Exception):
    """
    Base exception for all Management API client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Auth0 error code (e.g., "inexistent_connection")
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(ManagementApiError):
    """The API rejected the request payload or query."""

    def __init__(
        self,
        message: str = "Bad request",
        *,
        status_code: int = 400,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


# =============================================================================
# Authentication / Authorization Errors (401, 403)
# =============================================================================


class AuthenticationError(ManagementApiError):
    """
    The access token is missing, malformed or expired.

    Token renewal is the caller's concern; the client never retries.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class AuthorizationError(ManagementApiError):
    """The access token lacks the scope required for the operation."""

    def __init__(
        self,
        message: str = "Insufficient scope",
        *,
        status_code: int = 403,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


# =============================================================================
# Not Found / Conflict Errors (404, 409)
# =============================================================================


class NotFoundError(ManagementApiError):
    """Requested resource was not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ConflictError(ManagementApiError):
    """A resource with the same identifier already exists."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


# =============================================================================
# Rate Limit Errors (429)
# =============================================================================


class RateLimitError(ManagementApiError):
    """
    Rate limit exceeded.

    ``retry_after`` carries the ``Retry-After`` header in seconds when the
    API sent one. Waiting and retrying is left to the caller.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.retry_after = retry_after


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(ManagementApiError):
    """Server-side error occurred."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(ManagementApiError):
    """Connection problem, DNS failure or another transport-level issue."""

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Response shape errors
# =============================================================================


class DeserializationError(ManagementApiError):
    """The response body does not match the expected model."""

    def __init__(
        self,
        message: str = "Unexpected response body",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Local argument errors
# =============================================================================


class MissingArgumentError(ValueError):
    """A required argument was None. Raised before any request is sent."""

    def __init__(self, argument: str):
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument


class MissingPathParameterError(ValueError):
    """A path template references a placeholder without a value."""

    def __init__(self, template: str, placeholder: str):
        super().__init__(
            f"No value supplied for placeholder '{{{placeholder}}}' in '{template}'"
        )
        self.template = template
        self.placeholder = placeholder


class InvalidPathParameterError(ValueError):
    """A placeholder value would not form a single path segment."""

    def __init__(self, template: str, placeholder: str, value: Any):
        super().__init__(
            f"Value {value!r} for placeholder '{{{placeholder}}}' in '{template}' "
            f"is not a valid path segment"
        )
        self.template = template
        self.placeholder = placeholder
        self.value = value


def require(value: Any, argument: str) -> Any:
    """Return ``value`` or raise ``MissingArgumentError`` if it is None."""
    if value is None:
        raise MissingArgumentError(argument)
    return value


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    retry_after: Optional[int] = None,
) -> ManagementApiError:
    """
    Create an appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Auth0 error code
        details: The decoded error body
        retry_after: Seconds from the ``Retry-After`` header (429 only)

    Returns:
        Appropriate ManagementApiError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else ManagementApiError

    if exception_class is RateLimitError:
        return RateLimitError(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            retry_after=retry_after,
        )
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
