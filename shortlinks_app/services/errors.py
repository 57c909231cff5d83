"""
Business errors raised by the link and redirect services.

Each error carries a stable ``code`` that the API layer maps to an HTTP
status; ``message`` is safe to show to the user.
"""

from typing import Optional


class LinkServiceError(Exception):
    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str, short_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        # Set when the error refers to an existing link the caller may want
        self.short_code = short_code


class InvalidInputError(LinkServiceError):
    """Malformed URL or custom code."""
    code = "INVALID_INPUT"
    status_code = 422


class ConflictError(LinkServiceError):
    """The URL has already been shortened."""
    code = "CONFLICT"
    status_code = 409


class BadRequestError(LinkServiceError):
    """Requested code is taken, or no code was given."""
    code = "BAD_REQUEST"
    status_code = 400


class NotFoundError(LinkServiceError):
    code = "NOT_FOUND"
    status_code = 404


class InternalError(LinkServiceError):
    """Storage failure or no free code found. Callers may retry later."""
    code = "INTERNAL_SERVER_ERROR"
    status_code = 500
