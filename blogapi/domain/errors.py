"""Error taxonomy raised by the domain services.

None of these know about HTTP; the app maps each kind to a status code.
"""

from __future__ import annotations


class BlogError(Exception):
    """Base class for expected, request-terminal failures."""

    code = "blog.error"
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogError):
    code = "request.invalid"
    default_message = "Missing fields"


class DuplicateUser(BlogError):
    code = "user.exists"
    default_message = "User already exists"


class AuthenticationError(BlogError):
    """Identity could not be established."""

    code = "auth.failed"
    default_message = "Authentication failed"


class InvalidCredentials(AuthenticationError):
    code = "auth.invalid_credentials"
    default_message = "Invalid credentials"


class InvalidToken(AuthenticationError):
    code = "auth.invalid_token"
    default_message = "Invalid token"


class NotFound(BlogError):
    code = "resource.not_found"
    default_message = "Not found"


class Forbidden(BlogError):
    code = "resource.forbidden"
    default_message = "Not authorized"
