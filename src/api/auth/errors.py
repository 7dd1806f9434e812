"""
Errors raised while extracting an API key from the Authorization header.

Both kinds are terminal: the caller decides how to respond, typically with
401 Unauthorized.
"""


class AuthHeaderError(Exception):
    """Base error for Authorization header extraction."""

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class NoAuthHeaderIncludedError(AuthHeaderError):
    """The Authorization header is missing or empty."""

    def __init__(self) -> None:
        super().__init__(
            message="no authorization header included",
            error_code="no_auth_header",
        )


class MalformedAuthHeaderError(AuthHeaderError):
    """The Authorization header does not parse as `ApiKey <token>`."""

    def __init__(self) -> None:
        super().__init__(
            message="malformed authorization header",
            error_code="malformed_auth_header",
        )
