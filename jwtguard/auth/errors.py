"""
Authentication errors for jwtguard.

Every failure in the validation pipeline is raised as a subclass of
JWTAuthError. Each subclass carries a machine-readable code so that
HTTP integrations can report the failure kind without string matching.
"""

from typing import Any, Optional


class JWTAuthError(Exception):
    """Base exception raised when JWT authentication fails."""

    code = "auth_error"

    def __init__(self, message: str, code: Optional[str] = None):
        """
        Initialize JWT authentication error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.code


class ExtractionFormatError(JWTAuthError):
    """The Authorization header is present but not of the form 'Bearer <token>'."""

    code = "invalid_header_format"


class TokenNotFoundError(JWTAuthError):
    """No token could be extracted from the request."""

    code = "token_missing"


class TokenExtractionError(JWTAuthError):
    """The configured extractor failed. The original error is the __cause__."""

    code = "extraction_error"


class TokenParseError(JWTAuthError):
    """PyJWT rejected the token (structure, signature, expiry, key lookup)."""

    code = "invalid_token"


class AlgorithmMismatchError(JWTAuthError):
    """The token declares an algorithm other than the pinned one."""

    code = "invalid_algorithm"

    def __init__(self, expected: str, received: Any):
        """
        Initialize algorithm mismatch error.

        Args:
            expected: Algorithm the validator is configured with
            received: Value of the token's 'alg' header
        """
        super().__init__(
            f"Invalid token algorithm. Wanted {expected}, got {received}"
        )
        self.expected = expected
        self.received = received
