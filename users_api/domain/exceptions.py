"""Errors raised by the profile handler and its collaborators.

Every error carries the HTTP status it maps to and a human-readable message
that becomes the response body.
"""


class ProfileError(Exception):
    """Base error for the users API."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(ProfileError):
    """Malformed request body."""

    status_code = 400


class UnauthorizedError(ProfileError):
    """Missing or malformed authorization header."""

    status_code = 401


class NotFoundError(ProfileError):
    """No profile for the asserted username."""

    status_code = 404


class MethodNotAllowedError(ProfileError):
    """HTTP method outside GET/PUT."""

    status_code = 405

    def __init__(self, method: str):
        super().__init__(f"HTTP method '{method}' not allowed")
        self.method = method


class AuthContextError(ProfileError):
    """Caller identity could not be established from the request context.

    Kept at 500 for compatibility with existing clients.
    """

    status_code = 500


class DependencyError(ProfileError):
    """The store or the identity provider failed."""

    status_code = 500
