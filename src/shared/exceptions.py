"""Custom exceptions for the expense tracker application."""


class ExpenseTrackerException(Exception):
    """Base exception for all expense tracker errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ExpenseTrackerException):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class AuthenticationError(ExpenseTrackerException):
    """Raised when the request carries no credentials to forward.

    Answered like any other server-side failure so callers cannot tell
    authentication problems apart from store or network ones.
    """

    def __init__(self, message: str = "Missing Authorization header"):
        super().__init__(message, status_code=500)


class NotFoundError(ExpenseTrackerException):
    """Raised when a path does not belong to this function."""

    def __init__(self, message: str = "Route not found"):
        super().__init__(message, status_code=404)


class MethodNotAllowedError(ExpenseTrackerException):
    """Raised when a path exists but the method is not routed."""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message, status_code=405)


class RouteNotImplementedError(ExpenseTrackerException):
    """Raised for routes that are declared but not built yet."""

    def __init__(self, message: str = "Route not implemented"):
        super().__init__(message, status_code=501)


class ConfigurationError(ExpenseTrackerException):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration"):
        super().__init__(message, status_code=500)


class StoreError(ExpenseTrackerException):
    """Raised when the backing data service rejects or fails a request."""

    def __init__(self, message: str = "Store operation failed"):
        super().__init__(message, status_code=500)


def error_status(error: Exception) -> int:
    """
    Map an exception to the HTTP status it is answered with.

    Args:
        error: Any exception raised while handling a request

    Returns:
        The error's own status code for application errors, 500 otherwise
    """
    if isinstance(error, ExpenseTrackerException):
        return error.status_code
    return 500
