"""Authentication exceptions.

These exceptions are raised by the pizzeria_auth package and by the
AuthenticationService. Their messages are safe to show to clients verbatim;
the presentation layer maps them to HTTP responses.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTH_ERROR"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidIdentifierError(AuthError):
    """Raised when a login identifier is missing or not email-like."""

    code = "INVALID_IDENTIFIER"

    def __init__(self, message: str = "A valid email address is required."):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised for any failed sign-in.

    Wrong principal type, unknown identifier and wrong password all raise
    this with the same message, so callers cannot tell them apart.
    """

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid username or password."):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet hashing requirements."""

    code = "WEAK_PASSWORD"

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
