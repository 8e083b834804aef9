from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource or route is not found."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when a request carries no session or an invalid one."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when an authenticated identity is not allowed in.

    `detail` is an optional human-readable explanation shown next to the error.
    """

    def __init__(self, message: str = "Access denied", detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class ValidationError(UserError):
    """Raised when user input fails validation."""


class UpstreamError(UserError):
    """Raised when the RAG service cannot be reached or returns an unusable response.

    The message is route specific and never includes upstream internals.
    """
